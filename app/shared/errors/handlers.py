"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients unless
debug mode is on. All error responses use the same envelope:
``{"success": false, "message", "error", "details"?}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.catalog.errors import (
    CatalogDomainError,
    ProductNotFoundError,
    ProductValidationError,
    StorageError,
    StorageErrorKind,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_429 = 429
HTTP_500 = 500
HTTP_502 = 502
HTTP_503 = 503

_STORAGE_ERRORS: dict[StorageErrorKind, tuple[int, str, str, str]] = {
    StorageErrorKind.AUTH: (
        HTTP_401,
        "Erro de autenticação",
        "UNAUTHORIZED",
        "Verifique suas credenciais do AirTable",
    ),
    StorageErrorKind.RATE_LIMITED: (
        HTTP_429,
        "Muitas requisições",
        "RATE_LIMIT_EXCEEDED",
        "Tente novamente em alguns minutos",
    ),
    StorageErrorKind.UNREACHABLE: (
        HTTP_503,
        "Serviço temporariamente indisponível",
        "SERVICE_UNAVAILABLE",
        "Erro de conexão com o banco de dados",
    ),
}


def error_response(
    status_code: int,
    message: str,
    error: str,
    details: Any = None,
    **extra: Any,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"success": False, "message": message, "error": error}
    if details is not None:
        body["details"] = details
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def available_endpoints(app: FastAPI) -> list[str]:
    """List ``METHOD path`` for every documented API route of the app."""
    endpoints = []
    for route in app.routes:
        if isinstance(route, APIRoute) and route.include_in_schema:
            for method in sorted(route.methods):
                endpoints.append(f"{method} {route.path}")
    return endpoints


def _format_request_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{location}: {err.get('msg', 'invalid')}")
    return messages


def register_error_handlers(app: FastAPI, debug: bool = False) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        debug: Include exception text in 500 responses.
    """

    @app.exception_handler(ProductValidationError)
    async def handle_product_validation(
        _request: Request, exc: ProductValidationError
    ) -> JSONResponse:
        """Handle payloads that break product rules."""
        logger.warning("Invalid product payload: %s", exc.errors)
        return error_response(
            HTTP_400, "Dados inválidos", "VALIDATION_ERROR", errors=exc.errors
        )

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle missing product ids."""
        logger.warning("Product not found: %s", exc.product_id)
        return error_response(HTTP_404, "Produto não encontrado", "NOT_FOUND")

    @app.exception_handler(StorageError)
    async def handle_storage(_request: Request, exc: StorageError) -> JSONResponse:
        """Classify storage backend failures by their kind."""
        if exc.kind in _STORAGE_ERRORS:
            status_code, message, error, details = _STORAGE_ERRORS[exc.kind]
            logger.warning("Storage error (%s): %s", exc.kind.value, exc.message)
            return error_response(status_code, message, error, details=details)

        status_code = HTTP_502 if (exc.status_hint or 0) >= 500 else HTTP_400
        logger.error(
            "Storage backend rejected operation (status=%s): %s",
            exc.status_hint,
            exc.message,
        )
        return error_response(
            status_code,
            "Erro na operação com o banco de dados",
            "DATABASE_ERROR",
            details=exc.message,
        )

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return error_response(
            HTTP_500,
            "Erro interno do servidor",
            "INTERNAL_SERVER_ERROR",
            details=exc.message if debug else "Algo deu errado",
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed JSON and bodies of the wrong shape."""
        if any(err.get("type") == "json_invalid" for err in exc.errors()):
            logger.warning("Malformed JSON body")
            return error_response(
                HTTP_400,
                "JSON inválido",
                "INVALID_JSON",
                details="Verifique o formato do JSON enviado",
            )
        messages = _format_request_errors(exc)
        logger.warning("Request rejected: %s", messages)
        return error_response(
            HTTP_400, "Dados inválidos", "VALIDATION_ERROR", errors=messages
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Answer unmatched routes with the list of available endpoints."""
        if exc.status_code in (404, 405):
            return error_response(
                HTTP_404,
                f"A rota {request.method} {request.url.path} não existe",
                "ENDPOINT_NOT_FOUND",
                availableEndpoints=available_endpoints(request.app),
            )
        return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals outside debug."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(
            HTTP_500,
            "Erro interno do servidor",
            "INTERNAL_SERVER_ERROR",
            details=str(exc) if debug else "Algo deu errado",
        )
