"""Callable shapes shared by the routing engine and middleware.

A request chain is a sequence of steps ending in a handler:

    async def step(request: Request, call_next: CallNext) -> Response:
        ...                      # before
        response = await call_next(request)
        ...                      # after
        return response

A step short-circuits by returning a response without calling ``call_next``.
Steps and handlers may also be plain functions; the composer awaits their
result only when it is awaitable.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

type CallNext = Callable[[Request], Awaitable[Response]]

type Step = Callable[[Request, CallNext], Awaitable[Response] | Response]

type Handler = Callable[[Request], Awaitable[Any] | Any]
