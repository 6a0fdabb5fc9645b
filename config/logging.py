"""
Настройка логирования через loguru
"""
import sys

from loguru import logger

from config.settings import settings


def setup_logging(level: str = None, log_file: str = None) -> None:
    """
    Настроить вывод логов в консоль и в файл с ротацией

    Args:
        level: Уровень логирования (по умолчанию из настроек)
        log_file: Путь к файлу логов (по умолчанию из настроек)
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        log_file,
        rotation="1 day",
        retention="7 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"
    )
