"""Route registrar.

Generates FastAPI routes from RouteDefinitions at application startup:
discover → compose → ``router.add_api_route`` → ``app.include_router``.

Functions:
    register_routes: Discover definitions in a directory and mount them
    register_route_definitions: Mount an already collected list of definitions

Usage:
    app = FastAPI()
    await register_routes(
        app,
        RegistrationOptions(prefix="/api/v1", routes_dir="app/routes"),
    )

Registration runs once, before the server accepts traffic. A fatal
discovery error stops it; definitions processed before the error are not
mounted because the router is only included once everything succeeded.
"""

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter, FastAPI
from starlette.requests import Request
from starlette.responses import Response

from routeforge.core.config import get_settings
from routeforge.core.container import get_authenticator, get_logger
from routeforge.domain.protocols import LoggerProtocol
from routeforge.presentation.middleware.auth_middleware import AuthMiddleware
from routeforge.presentation.routing.composer import ComposedRoute, compose_route
from routeforge.presentation.routing.loader import (
    ensure_routes_dir,
    iter_route_definitions,
)
from routeforge.presentation.routing.metadata import (
    RouteDefinition,
    join_path,
    to_starlette_path,
)
from routeforge.presentation.types import Step


@dataclass(frozen=True, kw_only=True)
class RegistrationOptions:
    """Options for one registrar invocation.

    Attributes:
        prefix: Prepended to every route path (e.g. "/api/v1").
        global_middleware: Steps run first on every route, in order.
        auth_middleware: Step for ``auth=True`` routes (default: bearer
            token check with the container's authenticator).
        routes_dir: Route module directory (default: ``settings.routes_dir``,
            relative to the working directory).
        handler_timeout: Optional handler deadline in seconds.
    """

    prefix: str = ""
    global_middleware: Sequence[Step] = ()
    auth_middleware: Step | None = None
    routes_dir: str | Path | None = None
    handler_timeout: float | None = None


def _mount(router: APIRouter, full_path: str, composed: ComposedRoute) -> None:
    definition = composed.definition

    async def endpoint(request: Request) -> Response:
        return await composed(request)

    router.add_api_route(
        path=to_starlette_path(full_path),
        endpoint=endpoint,
        methods=[definition.method.value],
        name=definition.route_name,
        summary=definition.summary,
        tags=list(definition.tags) or None,
        response_model=None,
    )


async def _iterate(
    definitions: Iterable[RouteDefinition] | AsyncIterable[RouteDefinition],
) -> AsyncIterator[RouteDefinition]:
    if isinstance(definitions, AsyncIterable):
        async for definition in definitions:
            yield definition
    else:
        for definition in definitions:
            yield definition


async def register_route_definitions(
    app: FastAPI,
    definitions: Iterable[RouteDefinition] | AsyncIterable[RouteDefinition],
    options: RegistrationOptions | None = None,
    *,
    logger: LoggerProtocol | None = None,
) -> APIRouter:
    """Compose and mount ``definitions`` on ``app``.

    Args:
        app: FastAPI application to mount on.
        definitions: Definitions in registration order (sync or async iterable).
        options: Prefix, global middleware, auth override, timeout.
        logger: Logger (default: container logger).

    Returns:
        The APIRouter that was included in ``app``.
    """
    options = options or RegistrationOptions()
    logger = logger or get_logger()
    auth_middleware = options.auth_middleware

    router = APIRouter()
    seen: set[tuple[str, str]] = set()

    async for definition in _iterate(definitions):
        full_path = join_path(options.prefix, definition.path)
        if definition.auth and auth_middleware is None:
            auth_middleware = AuthMiddleware(get_authenticator())
        composed = compose_route(
            definition,
            global_middleware=options.global_middleware,
            auth_middleware=auth_middleware,
            handler_timeout=options.handler_timeout,
        )
        _mount(router, full_path, composed)

        key = (definition.method.value, full_path)
        if key in seen:
            # Not deduplicated: the first mounted route keeps answering.
            logger.warning(
                "duplicate_route_registered",
                method=definition.method.value,
                path=full_path,
            )
        seen.add(key)

        logger.info(
            "route_registered",
            method=definition.method.value,
            path=full_path,
            auth=definition.auth,
            steps=composed.step_names,
        )

    app.include_router(router)
    return router


async def register_routes(
    app: FastAPI,
    options: RegistrationOptions | None = None,
    *,
    logger: LoggerProtocol | None = None,
) -> APIRouter:
    """Discover route modules and mount every definition on ``app``.

    Args:
        app: FastAPI application to mount on.
        options: Registration options.
        logger: Logger (default: container logger).

    Returns:
        The APIRouter that was included in ``app``.

    Raises:
        ConfigurationError: Routes directory missing (raised before anything
            is mounted) or a route module failed to load.
    """
    options = options or RegistrationOptions()
    logger = logger or get_logger()

    routes_dir = ensure_routes_dir(
        options.routes_dir
        if options.routes_dir is not None
        else get_settings().routes_dir
    )
    logger.info(
        "routes_registering",
        routes_dir=str(routes_dir),
        prefix=options.prefix,
    )

    return await register_route_definitions(
        app,
        iter_route_definitions(routes_dir),
        options,
        logger=logger,
    )
