"""
Запуск веб-сервера API
"""
import asyncio

from aiohttp import web
from loguru import logger

from api.app import create_app


async def run_server(host: str = "0.0.0.0", port: int = 5000):
    """
    Запустить сервер API

    Args:
        host: Хост для прослушивания
        port: Порт для прослушивания
    """
    app = create_app()
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"🌐 API сервер запущен на http://{host}:{port}")
    logger.info(f"   - Модели автомобилей: http://{host}:{port}/api/cars")
    logger.info(f"   - Health check: GET http://{host}:{port}/health")

    try:
        # Держим сервер запущенным
        while True:
            await asyncio.sleep(3600)
    finally:
        await runner.cleanup()
