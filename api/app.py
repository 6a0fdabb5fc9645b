"""
Сборка aiohttp-приложения
"""
from datetime import date
from typing import Callable, Optional

from aiohttp import web
from sqlalchemy.ext.asyncio import async_sessionmaker

from api.auth import auth_middleware
from api.middlewares import error_middleware
from api.handlers.common import routes as common_routes
from api.handlers.cars import routes as cars_routes
from api.handlers.customers import routes as customers_routes
from api.handlers.rentals import routes as rentals_routes


def create_app(
    session_factory: Optional[async_sessionmaker] = None,
    today: Callable[[], date] = date.today,
) -> web.Application:
    """
    Создать приложение API

    Args:
        session_factory: Фабрика сессий БД (по умолчанию - из database.base)
        today: Источник текущей даты для расчета скидок
    """
    if session_factory is None:
        from database.base import async_session_factory
        session_factory = async_session_factory

    # Порядок важен: ошибки аутентификации тоже проходят через error_middleware
    app = web.Application(middlewares=[error_middleware, auth_middleware])
    app["session_factory"] = session_factory
    app["today"] = today

    app.add_routes(common_routes)
    app.add_routes(cars_routes)
    app.add_routes(customers_routes)
    app.add_routes(rentals_routes)

    return app
