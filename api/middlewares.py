"""
Обработка ошибок: преобразование исключений в JSON-ответы
"""
from aiohttp import web
from loguru import logger
from pydantic import ValidationError as SchemaValidationError

from services.exceptions import ConflictError, NotFoundError, ValidationError


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)

    except web.HTTPException:
        raise

    except NotFoundError as e:
        return web.json_response({"msg": str(e)}, status=404)

    except (ValidationError, ConflictError) as e:
        return web.json_response({"msg": str(e)}, status=400)

    except SchemaValidationError as e:
        errors = [
            {
                "param": ".".join(str(part) for part in error["loc"]),
                "msg": error["msg"],
            }
            for error in e.errors()
        ]
        return web.json_response({"errors": errors}, status=400)

    except Exception:
        logger.exception(f"❌ Ошибка обработки запроса {request.method} {request.path}")
        return web.json_response({"msg": "Server Error"}, status=500)

