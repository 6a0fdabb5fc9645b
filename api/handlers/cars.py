from aiohttp import web

from api.auth import require_admin
from api.responses import path_id, read_json, schema_list_response, schema_response
from api.schemas import CarModelCreate, CarModelFilter, CarModelOut, CarModelUpdate
from services.car_service import CarModelService

routes = web.RouteTableDef()


@routes.get("/api/cars")
async def list_car_models(request: web.Request) -> web.Response:
    """Список моделей с фильтрами из query-параметров"""
    filters = CarModelFilter.model_validate(dict(request.query))

    async with request.app["session_factory"]() as session:
        car_models = await CarModelService(session).list_car_models(**filters.model_dump())
        return schema_list_response(CarModelOut, car_models)


@routes.post("/api/cars")
async def create_car_model(request: web.Request) -> web.Response:
    require_admin(request)
    payload = CarModelCreate.model_validate(await read_json(request))

    async with request.app["session_factory"]() as session:
        car_model = await CarModelService(session).create_car_model(payload.model_dump())
        return schema_response(CarModelOut, car_model)


@routes.get(r"/api/cars/{id:\d+}")
async def get_car_model(request: web.Request) -> web.Response:
    async with request.app["session_factory"]() as session:
        car_model = await CarModelService(session).get_car_model(path_id(request))
        return schema_response(CarModelOut, car_model)


@routes.put(r"/api/cars/{id:\d+}")
async def update_car_model(request: web.Request) -> web.Response:
    require_admin(request)
    payload = CarModelUpdate.model_validate(await read_json(request))

    async with request.app["session_factory"]() as session:
        car_model = await CarModelService(session).update_car_model(
            path_id(request),
            payload.changes(),
        )
        return schema_response(CarModelOut, car_model)


@routes.delete(r"/api/cars/{id:\d+}")
async def delete_car_model(request: web.Request) -> web.Response:
    require_admin(request)

    async with request.app["session_factory"]() as session:
        await CarModelService(session).delete_car_model(path_id(request))

    return web.json_response({"msg": "Car model removed"})
