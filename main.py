import asyncio

from loguru import logger

from config.settings import settings
from config.logging import setup_logging
from database.base import init_db, engine
from api.server import run_server


async def main():
    """Главная функция запуска API"""

    # Настройка логирования
    setup_logging()

    logger.info("🚀 Запуск API проката автомобилей...")

    try:
        # Инициализация базы данных
        logger.info("🗄️ Инициализация базы данных...")
        await init_db()
        logger.info("✅ База данных инициализирована")

        # Запуск сервера
        await run_server(settings.host, settings.port)

    except Exception as e:
        logger.error(f"❌ Ошибка при запуске: {e}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Сервер остановлен пользователем")
    except Exception as e:
        logger.error(f"💥 Критическая ошибка: {e}")
        raise
