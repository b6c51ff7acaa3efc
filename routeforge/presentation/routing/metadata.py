"""Route definition types.

A route module declares its endpoints as data and exposes them through a
module attribute named ``routes``:

    from routeforge import define_route

    from app.controllers.place_controller import PlaceController
    from app.schemas.place import PlaceCreate, PlaceParams

    routes = [
        define_route(method="GET", path="/places", handler=PlaceController.find_all),
        define_route(
            method="POST",
            path="/places",
            auth=True,
            validate={"body": PlaceCreate},
            handler=PlaceController.create,
        ),
        define_route(
            method="GET",
            path="/places/:id",
            validate={"params": PlaceParams},
            handler=PlaceController.find_by_id,
        ),
    ]

Core types:
    HTTPMethod: GET, POST, PUT, DELETE, PATCH
    RouteValidation: optional params/query/body schema handles
    RouteDefinition: one endpoint (method, path, auth, validate, handler)
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from routeforge.presentation.types import Handler

_PATH_PARAM = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods a route definition may declare.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        DELETE: Idempotent delete operations
        PATCH: Non-idempotent partial update
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


# =============================================================================
# Validation slots
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteValidation:
    """Schema handles applied before the handler runs.

    Slots are always applied params → query → body, whatever order they
    are declared in.

    Attributes:
        params: Schema for path parameters (``:id`` segments).
        query: Schema for the query string.
        body: Schema for the parsed JSON body.
    """

    params: Any = None
    query: Any = None
    body: Any = None

    @classmethod
    def from_value(
        cls, value: "RouteValidation | Mapping[str, Any] | None"
    ) -> "RouteValidation | None":
        """Coerce a mapping (``{"body": Schema}``) into RouteValidation.

        Raises:
            ValueError: If the mapping names an unknown slot.
        """
        if value is None or isinstance(value, RouteValidation):
            return value

        unknown = set(value) - {"params", "query", "body"}
        if unknown:
            msg = f"Unknown validation slot(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return cls(**value)

    def slots(self) -> list[tuple[str, Any]]:
        """Return the configured slots in application order."""
        ordered = (("params", self.params), ("query", self.query), ("body", self.body))
        return [(name, schema) for name, schema in ordered if schema is not None]


# =============================================================================
# Route Definition
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteDefinition:
    """Complete declaration of one endpoint.

    Attributes:
        method: HTTP method.
        path: Path pattern, ``:name`` marks a path parameter.
        handler: Terminal step; receives the Request and returns a Response
            or a JSON-able value. May be sync or async.
        auth: Require a valid bearer credential.
        validate: Optional params/query/body schemas.
        name: Route name (defaults to the handler's ``__name__``).
        summary: OpenAPI summary.
        tags: OpenAPI tags.
    """

    method: HTTPMethod
    path: str
    handler: Handler
    auth: bool = False
    validate: RouteValidation | None = None
    name: str | None = None
    summary: str | None = None
    tags: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.method, HTTPMethod):
            object.__setattr__(self, "method", HTTPMethod(str(self.method).upper()))
        if not self.path or not self.path.startswith("/"):
            msg = f"Route path must start with '/': {self.path!r}"
            raise ValueError(msg)
        if not callable(self.handler):
            msg = f"Route '{self.method.value} {self.path}' has non-callable handler"
            raise TypeError(msg)
        object.__setattr__(self, "validate", RouteValidation.from_value(self.validate))
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def route_name(self) -> str:
        """Name used for the mounted route."""
        return self.name or getattr(self.handler, "__name__", "endpoint")


def define_route(
    *,
    method: HTTPMethod | str,
    path: str,
    handler: Handler,
    auth: bool = False,
    validate: RouteValidation | Mapping[str, Any] | None = None,
    name: str | None = None,
    summary: str | None = None,
    tags: Sequence[str] = (),
) -> RouteDefinition:
    """Build a RouteDefinition.

    ``method`` is case-insensitive; ``validate`` may be a plain mapping.

    Raises:
        ValueError: Unknown method, bad path or unknown validation slot.
        TypeError: Handler is not callable.
    """
    return RouteDefinition(
        method=method,  # type: ignore[arg-type]  # normalized in __post_init__
        path=path,
        handler=handler,
        auth=auth,
        validate=validate,  # type: ignore[arg-type]
        name=name,
        summary=summary,
        tags=tags,
    )


def join_path(prefix: str, path: str) -> str:
    """Concatenate a registration prefix and a route path.

    Plain concatenation, so ``"/api/v1" + "/places"`` is ``"/api/v1/places"``.
    A trailing slash on the prefix is dropped to avoid ``//``.
    """
    return prefix.rstrip("/") + path


def to_starlette_path(path: str) -> str:
    """Translate ``:name`` segments into Starlette ``{name}`` parameters."""
    return _PATH_PARAM.sub(r"{\1}", path)
