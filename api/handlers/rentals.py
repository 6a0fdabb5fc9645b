from aiohttp import web

from api.auth import is_admin, require_admin, require_user
from api.responses import json_error, path_id, read_json, schema_list_response, schema_response
from api.schemas import PriceQuoteOut, RentalOut, RentalRequest
from services.exceptions import ValidationError
from services.pricing_service import PricingService
from services.rental_service import RentalService

routes = web.RouteTableDef()


async def _read_rental_request(request: web.Request) -> RentalRequest:
    payload = RentalRequest.model_validate(await read_json(request))
    if payload.return_date <= payload.issue_date:
        raise ValidationError("Return date must be after issue date.")
    return payload


def _pricing_service(request: web.Request, session) -> PricingService:
    return PricingService(session, today=request.app["today"])


# /all регистрируется раньше /{id}
@routes.get("/api/rentals/all")
async def list_all_rentals(request: web.Request) -> web.Response:
    require_admin(request)

    async with request.app["session_factory"]() as session:
        rentals = await RentalService(session).list_rentals()
        return schema_list_response(RentalOut, rentals)


@routes.get("/api/rentals")
async def list_my_rentals(request: web.Request) -> web.Response:
    user = require_user(request)

    async with request.app["session_factory"]() as session:
        rentals = await RentalService(session).list_customer_rentals(user.id)
        return schema_list_response(RentalOut, rentals)


@routes.post("/api/rentals/calculate-price")
async def calculate_price(request: web.Request) -> web.Response:
    user = require_user(request)
    payload = await _read_rental_request(request)

    async with request.app["session_factory"]() as session:
        quote = await _pricing_service(request, session).quote_price(
            payload.car_model, user.id, payload.issue_date, payload.return_date
        )
        return schema_response(PriceQuoteOut, quote)


@routes.post("/api/rentals")
async def create_rental(request: web.Request) -> web.Response:
    user = require_user(request)
    payload = await _read_rental_request(request)

    async with request.app["session_factory"]() as session:
        rental = await _pricing_service(request, session).create_rental(
            payload.car_model, user.id, payload.issue_date, payload.return_date
        )
        return schema_response(RentalOut, rental)


@routes.get(r"/api/rentals/{id:\d+}")
async def get_rental(request: web.Request) -> web.Response:
    user = require_user(request)

    async with request.app["session_factory"]() as session:
        rental = await RentalService(session).get_rental(path_id(request))

        owner_id = rental.customer.user_id if rental.customer else None
        if owner_id != user.id and not is_admin(user):
            raise json_error(web.HTTPUnauthorized, "Not authorized")

        return schema_response(RentalOut, rental)


@routes.post(r"/api/rentals/{id:\d+}/return")
async def return_rental(request: web.Request) -> web.Response:
    require_admin(request)

    async with request.app["session_factory"]() as session:
        rental = await RentalService(session).return_rental(path_id(request))
        return schema_response(RentalOut, rental)


@routes.post(r"/api/rentals/{id:\d+}/penalty")
async def apply_penalty(request: web.Request) -> web.Response:
    require_admin(request)
    data = await read_json(request)

    async with request.app["session_factory"]() as session:
        rental = await RentalService(session).apply_penalty(path_id(request), data.get("penalty"))
        return schema_response(RentalOut, rental)
