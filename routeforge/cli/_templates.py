"""Code generation templates: plain Python strings for ``routeforge``.

Simple ``str.format()`` substitution:
    {pascal}  entity class prefix (``user`` → ``User``)
    {entity}  entity module name (``user``)
    {path}    collection path (``/users``)
"""

# ---------------------------------------------------------------------------
# routeforge init
# ---------------------------------------------------------------------------

PACKAGE_INIT_PY = '"""{doc}"""\n'

HELLO_ROUTE_PY = """\
from routeforge import define_route


def hello(request):
    return {"message": "Hello from routeforge!"}


routes = define_route(method="GET", path="/hello", handler=hello)
"""

# ---------------------------------------------------------------------------
# routeforge generate crud
# ---------------------------------------------------------------------------

SERVICE_PY = """\
\"\"\"In-memory {entity} storage.\"\"\"

from typing import Any

from uuid_extensions import uuid7


class {pascal}Service:
    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {{}}

    async def find_all(self, page: int = 1, limit: int = 10) -> dict[str, Any]:
        skip = (page - 1) * limit
        items = list(self._items.values())
        return {{
            "data": items[skip : skip + limit],
            "total": len(items),
            "page": page,
            "limit": limit,
        }}

    async def find_by_id(self, item_id: str) -> dict[str, Any] | None:
        return self._items.get(item_id)

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        item = {{**data, "id": str(uuid7())}}
        self._items[item["id"]] = item
        return item

    async def update(self, item_id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        if item_id not in self._items:
            return None
        item = {{**self._items[item_id], **data, "id": item_id}}
        self._items[item_id] = item
        return item

    async def delete(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None
"""

CONTROLLER_PY = """\
\"\"\"{pascal} handlers.\"\"\"

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.requests import Request
from starlette.responses import Response

from app.services.{entity}_service import {pascal}Service
from routeforge import get_validated

service = {pascal}Service()


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={{"error": "{pascal} not found"}},
    )


def _positive_int(value: str | None, default: int) -> int:
    try:
        number = int(value) if value is not None else default
    except ValueError:
        return default
    return number if number > 0 else default


async def _payload(request: Request) -> dict[str, Any]:
    body = get_validated(request, "body")
    if body is None:
        return await request.json()
    return body.model_dump() if hasattr(body, "model_dump") else dict(body)


class {pascal}Controller:
    @staticmethod
    async def find_all(request: Request) -> dict:
        page = _positive_int(request.query_params.get("page"), 1)
        limit = _positive_int(request.query_params.get("limit"), 10)
        return await service.find_all(page, limit)

    @staticmethod
    async def find_by_id(request: Request) -> Response | dict:
        item = await service.find_by_id(request.path_params["id"])
        if item is None:
            return _not_found()
        return item

    @staticmethod
    async def create(request: Request) -> Response:
        item = await service.create(await _payload(request))
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=item)

    @staticmethod
    async def update(request: Request) -> Response | dict:
        item = await service.update(request.path_params["id"], await _payload(request))
        if item is None:
            return _not_found()
        return item

    @staticmethod
    async def delete(request: Request) -> Response:
        if not await service.delete(request.path_params["id"]):
            return _not_found()
        return Response(status_code=status.HTTP_204_NO_CONTENT)
"""

ROUTES_PY = """\
{imports}
routes = [
    define_route(
        method=HTTPMethod.GET,
        path="{path}",
        handler={pascal}Controller.find_all,
    ),
    define_route(
        method=HTTPMethod.POST,
        path="{path}",{create_validation}
        handler={pascal}Controller.create,
    ),
    define_route(
        method=HTTPMethod.GET,
        path="{path}/:id",{id_validation}
        handler={pascal}Controller.find_by_id,
    ),
    define_route(
        method=HTTPMethod.PUT,
        path="{path}/:id",{update_validation}
        handler={pascal}Controller.update,
    ),
    define_route(
        method=HTTPMethod.DELETE,
        path="{path}/:id",{id_validation}
        handler={pascal}Controller.delete,
    ),
]
"""

ID_PARAMS_CLASS = """

class {pascal}Params(BaseModel):
    id: str
"""
