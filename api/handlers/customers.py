from aiohttp import web

from api.auth import is_admin, require_user
from api.responses import json_error, path_id, read_json, schema_list_response, schema_response
from api.schemas import CustomerCreate, CustomerOut, CustomerUpdate
from services.customer_service import CustomerService

routes = web.RouteTableDef()


def _check_owner(request: web.Request, customer) -> None:
    """Изменять профиль может только его владелец или администратор"""
    user = request["user"]
    if customer.user_id != user.id and not is_admin(user):
        raise json_error(web.HTTPUnauthorized, "Not authorized")


@routes.get("/api/customers")
async def list_customers(request: web.Request) -> web.Response:
    require_user(request)

    async with request.app["session_factory"]() as session:
        customers = await CustomerService(session).list_customers()
        return schema_list_response(CustomerOut, customers)


@routes.post("/api/customers")
async def create_customer(request: web.Request) -> web.Response:
    user = require_user(request)
    payload = CustomerCreate.model_validate(await read_json(request))

    async with request.app["session_factory"]() as session:
        customer = await CustomerService(session).create_customer(user, payload.model_dump())
        return schema_response(CustomerOut, customer)


@routes.get(r"/api/customers/{id:\d+}")
async def get_customer(request: web.Request) -> web.Response:
    require_user(request)

    async with request.app["session_factory"]() as session:
        customer = await CustomerService(session).get_customer(path_id(request))
        return schema_response(CustomerOut, customer)


@routes.put(r"/api/customers/{id:\d+}")
async def update_customer(request: web.Request) -> web.Response:
    require_user(request)
    payload = CustomerUpdate.model_validate(await read_json(request))

    async with request.app["session_factory"]() as session:
        service = CustomerService(session)
        _check_owner(request, await service.get_customer(path_id(request)))

        customer = await service.update_customer(
            path_id(request),
            payload.changes(),
        )
        return schema_response(CustomerOut, customer)


@routes.delete(r"/api/customers/{id:\d+}")
async def delete_customer(request: web.Request) -> web.Response:
    require_user(request)

    async with request.app["session_factory"]() as session:
        service = CustomerService(session)
        _check_owner(request, await service.get_customer(path_id(request)))
        await service.delete_customer(path_id(request))

    return web.json_response({"msg": "Customer removed"})
