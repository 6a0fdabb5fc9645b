"""
Аутентификация по заголовку x-auth-token
"""
from typing import Optional

from aiohttp import web

from api.responses import json_error
from config.settings import settings
from database.models.user import User
from database.repositories import UserRepository


AUTH_HEADER = "x-auth-token"


@web.middleware
async def auth_middleware(request: web.Request, handler):
    """Найти пользователя по токену и положить его в request["user"]"""
    request["user"] = None

    token = request.headers.get(AUTH_HEADER)
    if token:
        async with request.app["session_factory"]() as session:
            request["user"] = await UserRepository(session).find_by_token(token)

    return await handler(request)


def is_admin(user: Optional[User]) -> bool:
    if user is None:
        return False
    return user.is_admin or user.id in settings.admin_ids


def require_user(request: web.Request) -> User:
    user = request.get("user")
    if user is None:
        raise json_error(web.HTTPUnauthorized, "No token, authorization denied")
    return user


def require_admin(request: web.Request) -> User:
    user = require_user(request)
    if not is_admin(user):
        raise json_error(web.HTTPForbidden, "Access denied")
    return user
