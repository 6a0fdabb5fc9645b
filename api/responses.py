"""
Вспомогательные функции для JSON-ответов
"""
import json
from typing import Iterable, Type

from aiohttp import web
from pydantic import BaseModel


def json_error(exc_class: Type[web.HTTPException], message: str) -> web.HTTPException:
    """HTTP-исключение aiohttp с телом {"msg": ...}"""
    return exc_class(
        text=json.dumps({"msg": message}),
        content_type="application/json",
    )


def dump(schema: Type[BaseModel], obj) -> dict:
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)


def schema_response(schema: Type[BaseModel], obj, status: int = 200) -> web.Response:
    return web.json_response(dump(schema, obj), status=status)


def schema_list_response(schema: Type[BaseModel], items: Iterable) -> web.Response:
    return web.json_response([dump(schema, item) for item in items])


async def read_json(request: web.Request) -> dict:
    """Тело запроса как dict; пустое или некорректное тело - ошибка 400"""
    try:
        data = await request.json()
    except json.JSONDecodeError:
        raise json_error(web.HTTPBadRequest, "Request body must be valid JSON")
    if not isinstance(data, dict):
        raise json_error(web.HTTPBadRequest, "Request body must be a JSON object")
    return data


def path_id(request: web.Request, name: str = "id") -> int:
    return int(request.match_info[name])
