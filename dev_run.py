#!/usr/bin/env python3
"""
Режим разработки: API перезапускается при изменении исходников

Наблюдаемые каталоги и пауза между перезапусками берутся из настроек
(RELOAD_PATHS_STR, RELOAD_DELAY). Модули в корне проекта (main.py)
отслеживаются всегда.
"""
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from config.settings import settings


PROJECT_ROOT = Path(__file__).resolve().parent
SERVER_COMMAND = [sys.executable, str(PROJECT_ROOT / "main.py")]

# Открытие и закрытие файла на чтение перезапуск не вызывают
RESTART_EVENTS = {"created", "modified", "moved", "deleted"}


class RestartDebouncer:
    """Пропускает не-Python файлы и пачки событий от одного сохранения"""

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self.clock = clock
        self.last_restart: Optional[float] = None

    def should_restart(self, path: str) -> bool:
        if not path.endswith(".py"):
            return False

        now = self.clock()
        if self.last_restart is not None and now - self.last_restart < self.delay:
            return False

        self.last_restart = now
        return True


class ServerProcess:
    """Дочерний процесс с API"""

    def __init__(self, command: Sequence[str] = SERVER_COMMAND, popen=subprocess.Popen, stop_timeout: float = 10):
        self.command = list(command)
        self.popen = popen
        self.stop_timeout = stop_timeout
        self.process = None

    @property
    def running(self) -> bool:
        return self.process is not None and self.process.poll() is None

    def start(self):
        logger.info("🚀 Запускаем сервер...")
        self.process = self.popen(self.command, cwd=str(PROJECT_ROOT))

    def stop(self):
        if self.running:
            logger.info("🛑 Останавливаем сервер...")
            self.process.terminate()
            try:
                self.process.wait(timeout=self.stop_timeout)
            except subprocess.TimeoutExpired:
                logger.warning("⚠️ Сервер не остановился, завершаем принудительно")
                self.process.kill()
                self.process.wait()
        self.process = None

    def restart(self):
        self.stop()
        self.start()


class ServerRestartHandler(FileSystemEventHandler):
    """Перезапуск сервера по событиям watchdog"""

    def __init__(self, server: ServerProcess, debouncer: RestartDebouncer):
        super().__init__()
        self.server = server
        self.debouncer = debouncer

    def on_any_event(self, event: FileSystemEvent):
        if event.is_directory or event.event_type not in RESTART_EVENTS:
            return

        # Редакторы часто сохраняют через переименование временного файла
        path = event.dest_path if event.event_type == "moved" else event.src_path
        path = str(path)
        if not self.debouncer.should_restart(path):
            return

        logger.info(f"🔄 Изменен файл: {path}")
        self.server.restart()


def watched_directories(paths: List[str], root: Path = PROJECT_ROOT) -> List[Path]:
    """Существующие каталоги из списка, относительно корня проекта"""
    directories = []
    for path in paths:
        directory = (root / path).resolve()
        if directory.is_dir():
            directories.append(directory)
        else:
            logger.warning(f"⚠️ Каталог не найден, пропускаем: {path}")
    return directories


def main():
    logger.info("🔧 Режим разработки запущен, для остановки нажмите Ctrl+C")

    server = ServerProcess()
    handler = ServerRestartHandler(server, RestartDebouncer(settings.reload_delay))
    observer = Observer()

    for directory in watched_directories(settings.reload_paths):
        observer.schedule(handler, str(directory), recursive=True)
        logger.info(f"👁️ Отслеживаем: {directory.relative_to(PROJECT_ROOT)}")
    observer.schedule(handler, str(PROJECT_ROOT), recursive=False)

    server.start()
    observer.start()
    try:
        while observer.is_alive():
            observer.join(1)
    except KeyboardInterrupt:
        logger.info("👋 Остановка режима разработки...")
    finally:
        observer.stop()
        observer.join()
        server.stop()


if __name__ == "__main__":
    main()
