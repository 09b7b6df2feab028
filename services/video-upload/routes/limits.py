"""Request body size guards."""

from typing import AsyncGenerator, Awaitable, Callable

from fastapi import HTTPException, Request, Response
from fastapi.routing import APIRoute

from config import AppConfig
from dependencies import get_config


def _too_large(max_bytes: int) -> HTTPException:
    return HTTPException(
        status_code=413,
        detail=f"Request body too large. Maximum size is {max_bytes} bytes",
    )


def validate_content_length(request: Request, max_bytes: int) -> None:
    """
    Rejects a request whose declared Content-Length exceeds ``max_bytes``.

    Raises:
        HTTPException: 413 if the body is too large, 400 if the header is
            not a number.
    """
    content_length = request.headers.get("content-length")
    if not content_length:
        return
    try:
        declared = int(content_length)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid Content-Length")
    if declared > max_bytes:
        raise _too_large(max_bytes)


class BodyLimitedRequest(Request):
    """Request whose body stream fails with 413 once it passes ``max_bytes``."""

    def __init__(self, scope, receive, max_bytes: int):
        super().__init__(scope, receive)
        self._max_bytes = max_bytes

    async def stream(self) -> AsyncGenerator[bytes, None]:
        received = 0
        async for chunk in super().stream():
            received += len(chunk)
            if received > self._max_bytes:
                raise _too_large(self._max_bytes)
            yield chunk


def _current_config(request: Request) -> AppConfig:
    provider = request.app.dependency_overrides.get(get_config, get_config)
    return provider()


def body_limited_route(limit: Callable[[AppConfig], int]) -> type[APIRoute]:
    """
    Builds a route class capping request bodies at ``limit(config)`` bytes.

    The declared Content-Length is checked before anything is read. The
    received byte count is checked while the body streams, which also covers
    chunked requests and every multipart part.
    """

    class BodyLimitedRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
            route_handler = super().get_route_handler()

            async def limited_route_handler(request: Request) -> Response:
                max_bytes = limit(_current_config(request))
                validate_content_length(request, max_bytes)
                limited = BodyLimitedRequest(request.scope, request.receive, max_bytes)
                return await route_handler(limited)

            return limited_route_handler

    return BodyLimitedRoute
