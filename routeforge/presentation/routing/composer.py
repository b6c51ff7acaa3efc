"""Middleware composition.

Turns one RouteDefinition into the ordered chain that serves it. The order
is fixed for every route:

    1. global middleware (registration-wide, in the order supplied)
    2. params validation   (request.path_params)
    3. query validation    (query string bag)
    4. body validation     (parsed JSON body)
    5. authentication      (only when ``auth=True``)
    6. the handler

Inputs are validated before the credential is checked, so a malformed
request is rejected with 400 without revealing whether it would have been
authorized.

Short-circuits:
    - ValidationFailure in steps 2-4 → 400
      {"message": "Validation failed", "errors": [...]}
    - the auth step answers 401 itself
    - handler_timeout exceeded → 504 {"error": "Gateway Timeout"}
Every other exception propagates to the application's error boundary.

Sync steps and handlers run in the worker thread pool; only coroutine
functions run on the event loop itself.
"""

import asyncio
import functools
import inspect
import json
from collections.abc import Sequence
from typing import Any, Literal

import anyio.to_thread
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from routeforge.core.errors import FieldIssue, ValidationFailure
from routeforge.domain.protocols import SchemaValidator
from routeforge.infrastructure.validation import as_validator
from routeforge.presentation.routing.metadata import RouteDefinition
from routeforge.presentation.types import CallNext, Handler, Step

type ValidationSource = Literal["params", "query", "body"]


def is_async_callable(func: Any) -> bool:
    """Return True when calling ``func`` produces a coroutine."""
    while isinstance(func, functools.partial):
        func = func.func
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


async def call_step(func: Any, *args: Any, abandon_on_cancel: bool = False) -> Any:
    """Call a step or handler without blocking the event loop.

    Coroutine functions are awaited directly. Plain functions run in the
    worker thread pool, so a blocking handler only holds up its own
    request. With ``abandon_on_cancel`` a cancelled caller (handler
    timeout) stops waiting for the thread instead of blocking until it
    returns.
    """
    if is_async_callable(func):
        return await func(*args)

    if abandon_on_cancel:
        result = await anyio.to_thread.run_sync(
            functools.partial(func, *args), abandon_on_cancel=True
        )
    else:
        result = await run_in_threadpool(func, *args)
    if inspect.isawaitable(result):
        return await result
    return result


def step_name(step: Step) -> str:
    """Readable name of a chain step (introspection and logs)."""
    return getattr(step, "name", None) or getattr(
        step, "__name__", type(step).__name__
    )


# =============================================================================
# Request bags
# =============================================================================


def query_bag(request: Request) -> dict[str, str | list[str]]:
    """Flatten the query string: single values as str, repeated keys as lists."""
    bag: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        bag[key] = values[0] if len(values) == 1 else values
    return bag


async def json_body(request: Request) -> Any:
    """Parse the request body as JSON (empty body → ``{}``).

    Raises:
        ValidationFailure: If the body is not valid JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationFailure(
            [FieldIssue(field="body", message="Malformed JSON body")]
        ) from exc


async def extract_source(request: Request, source: ValidationSource) -> Any:
    """Return the raw value a validation slot applies to."""
    if source == "params":
        return dict(request.path_params)
    if source == "query":
        return query_bag(request)
    return await json_body(request)


def get_validated(
    request: Request, source: ValidationSource, default: Any = None
) -> Any:
    """Return the validated (coerced) value for a slot, if it was validated."""
    validated: dict[str, Any] = getattr(request.state, "validated", {})
    return validated.get(source, default)


# =============================================================================
# Steps
# =============================================================================


def validation_failed_response(exc: ValidationFailure) -> JSONResponse:
    """Build the 400 response for a validation failure."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "errors": exc.to_list()},
    )


class ValidationStep:
    """Validate one request source and stop the chain on failure."""

    def __init__(self, source: ValidationSource, validator: SchemaValidator) -> None:
        self.source = source
        self.validator = validator
        self.name = f"validate:{source}"

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            value = await extract_source(request, self.source)
            validated = self.validator.validate(value)
        except ValidationFailure as exc:
            return validation_failed_response(exc)

        if not hasattr(request.state, "validated"):
            request.state.validated = {}
        request.state.validated[self.source] = validated
        return await call_next(request)


class HandlerStep:
    """Terminal step: call the handler and turn its result into a Response."""

    name = "handler"

    def __init__(self, handler: Handler, timeout: float | None = None) -> None:
        self.handler = handler
        self.timeout = timeout

    async def __call__(self, request: Request) -> Response:
        if self.timeout is None:
            result = await call_step(self.handler, request)
        else:
            try:
                async with asyncio.timeout(self.timeout):
                    result = await call_step(
                        self.handler, request, abandon_on_cancel=True
                    )
            except TimeoutError:
                return JSONResponse(
                    status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                    content={"error": "Gateway Timeout"},
                )

        if isinstance(result, Response):
            return result
        return JSONResponse(content=jsonable_encoder(result))


# =============================================================================
# Composition
# =============================================================================


class ComposedRoute:
    """Ordered chain for one route; awaitable as a Starlette endpoint.

    Attributes:
        definition: Route the chain serves.
        steps: Middleware steps in execution order (handler excluded).
        terminal: The handler step.
    """

    def __init__(
        self,
        definition: RouteDefinition,
        steps: Sequence[Step],
        terminal: HandlerStep,
    ) -> None:
        self.definition = definition
        self.steps: tuple[Step, ...] = tuple(steps)
        self.terminal = terminal

        call_next: CallNext = terminal
        for step in reversed(self.steps):
            call_next = _link(step, call_next)
        self._entry = call_next

    @property
    def step_names(self) -> list[str]:
        """Names of every step including the terminal handler."""
        return [step_name(step) for step in self.steps] + [self.terminal.name]

    async def __call__(self, request: Request) -> Response:
        return await self._entry(request)

    def __repr__(self) -> str:
        return (
            f"ComposedRoute({self.definition.method.value} {self.definition.path}: "
            f"{' -> '.join(self.step_names)})"
        )


def _link(step: Step, call_next: CallNext) -> CallNext:
    async def run(request: Request) -> Response:
        return await call_step(step, request, call_next)

    return run


def build_steps(
    definition: RouteDefinition,
    *,
    global_middleware: Sequence[Step] = (),
    auth_middleware: Step | None = None,
) -> list[Step]:
    """Return the middleware steps for a route, in execution order.

    Raises:
        ValueError: If the route requires auth and no auth step is given.
    """
    steps: list[Step] = list(global_middleware)

    if definition.validate is not None:
        for source, schema in definition.validate.slots():
            steps.append(ValidationStep(source, as_validator(schema)))

    if definition.auth:
        if auth_middleware is None:
            msg = (
                f"Route '{definition.method.value} {definition.path}' requires "
                "auth but no auth middleware was provided"
            )
            raise ValueError(msg)
        steps.append(auth_middleware)

    return steps


def compose_route(
    definition: RouteDefinition,
    *,
    global_middleware: Sequence[Step] = (),
    auth_middleware: Step | None = None,
    handler_timeout: float | None = None,
) -> ComposedRoute:
    """Compose the full chain for ``definition``.

    Args:
        definition: Route to compose.
        global_middleware: Steps run first on every route.
        auth_middleware: Step used when ``definition.auth`` is true.
        handler_timeout: Optional deadline (seconds) for the handler.

    Returns:
        ComposedRoute ready to mount.
    """
    steps = build_steps(
        definition,
        global_middleware=global_middleware,
        auth_middleware=auth_middleware,
    )
    return ComposedRoute(
        definition, steps, HandlerStep(definition.handler, timeout=handler_timeout)
    )
