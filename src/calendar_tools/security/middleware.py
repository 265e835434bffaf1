from __future__ import annotations

import logging
from typing import Iterable, Optional

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from .bearer import validate_bearer_token
from .origin import is_localhost_origin

logger = logging.getLogger(__name__)

DEFAULT_EXEMPT_PATHS = ("/health",)


class TransportGuardMiddleware:
    """ASGI middleware that rejects foreign origins (403) and bad tokens (401)."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        auth_token: Optional[str] = None,
        exempt_paths: Iterable[str] = DEFAULT_EXEMPT_PATHS,
    ) -> None:
        self.app = app
        self.auth_token = auth_token
        self.exempt_paths = frozenset(exempt_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path") in self.exempt_paths:
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        origin = headers.get("origin")
        if origin is not None and not is_localhost_origin(origin):
            logger.warning("Rejected request to %s from origin %r", scope.get("path"), origin)
            response = JSONResponse({"error": "Forbidden origin"}, status_code=403)
            await response(scope, receive, send)
            return

        # CORS preflights never carry credentials.
        is_preflight = scope.get("method") == "OPTIONS" and "access-control-request-method" in headers
        if not is_preflight and not validate_bearer_token(headers, self.auth_token):
            logger.warning("Rejected unauthenticated request to %s", scope.get("path"))
            response = JSONResponse(
                {"error": "Unauthorized"},
                status_code=401,
                headers={"WWW-Authenticate": "Bearer"},
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
