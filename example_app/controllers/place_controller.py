"""Place handlers.

The same handlers serve the public ``/places`` routes, which carry no
schemas, and the ``/admin/places`` routes, which validate and require a
token. Validated values are read back with ``get_validated``; without
them the handlers fall back to the raw request.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.requests import Request
from starlette.responses import Response

from example_app.schemas.place import PlaceCreate, PlaceParams, PlaceQuery
from example_app.services.place_service import PlaceService
from routeforge import get_validated

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

service = PlaceService()


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Place not found"},
    )


def _positive_int(value: str | None, default: int) -> int:
    """Lenient query parsing: anything but a positive integer is ``default``."""
    try:
        number = int(value) if value is not None else default
    except ValueError:
        return default
    return number if number > 0 else default


def _page(request: Request) -> tuple[int, int]:
    query: PlaceQuery | None = get_validated(request, "query")
    if query is not None:
        return query.page, query.limit
    return (
        _positive_int(request.query_params.get("page"), DEFAULT_PAGE),
        _positive_int(request.query_params.get("limit"), DEFAULT_LIMIT),
    )


def _place_id(request: Request) -> str:
    params: PlaceParams | None = get_validated(request, "params")
    return params.id if params is not None else request.path_params["id"]


async def _payload(request: Request) -> dict[str, Any]:
    body: PlaceCreate | None = get_validated(request, "body")
    if body is not None:
        return body.model_dump()
    if not await request.body():
        return {}
    return await request.json()


class PlaceController:
    """Handlers for ``/places`` and ``/admin/places``."""

    @staticmethod
    async def find_all(request: Request) -> dict:
        page, limit = _page(request)
        return await service.find_all(page, limit)

    @staticmethod
    async def find_by_id(request: Request) -> Response | dict:
        place = await service.find_by_id(_place_id(request))
        if place is None:
            return _not_found()
        return place

    @staticmethod
    async def create(request: Request) -> Response:
        place = await service.create(await _payload(request))
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=place)

    @staticmethod
    async def update(request: Request) -> Response | dict:
        place = await service.update(_place_id(request), await _payload(request))
        if place is None:
            return _not_found()
        return place

    @staticmethod
    async def delete(request: Request) -> Response:
        if not await service.delete(_place_id(request)):
            return _not_found()
        return Response(status_code=status.HTTP_204_NO_CONTENT)
