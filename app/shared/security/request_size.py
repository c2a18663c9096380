"""
Request body size limit.

Rejects requests whose declared Content-Length exceeds the configured
maximum before the body is read.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.handlers import error_response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Answers 413 when Content-Length is above ``max_bytes``."""

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_bytes:
            return error_response(
                413,
                "Corpo da requisição muito grande",
                "PAYLOAD_TOO_LARGE",
                details=f"Máximo de {self.max_bytes} bytes",
            )
        return await call_next(request)
