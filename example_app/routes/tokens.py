"""Token issuing and introspection routes."""

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.requests import Request

from routeforge import define_route, get_current_user, get_validated, sign_token


class TokenRequest(BaseModel):
    sub: str = Field(min_length=1)
    role: str = "user"


async def issue_token(request: Request) -> JSONResponse:
    body: TokenRequest = get_validated(request, "body")
    token = sign_token(body.model_dump())
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"access_token": token, "token_type": "bearer"},
    )


async def me(request: Request) -> dict:
    return get_current_user(request)


routes = [
    define_route(
        method="POST",
        path="/tokens",
        validate={"body": TokenRequest},
        handler=issue_token,
    ),
    define_route(method="GET", path="/me", auth=True, handler=me),
]
