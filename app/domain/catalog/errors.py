"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum
from typing import Any, Optional


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProductNotFoundError(CatalogDomainError):
    """Raised when a product id does not exist in the storage backend."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class ProductValidationError(CatalogDomainError):
    """Raised when an inbound payload breaks one or more product rules.

    Carries every violation found, in rule order.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Dados inválidos: " + "; ".join(errors))
        self.errors = list(errors)


class StorageErrorKind(Enum):
    """Classification of storage backend failures."""

    NOT_FOUND = "not_found"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    UNREACHABLE = "unreachable"
    BACKEND = "backend"


class StorageError(CatalogDomainError):
    """Raised by storage adapters when the backend call fails.

    Attributes:
        kind: What went wrong, set by the adapter that saw the failure.
        status_hint: HTTP status reported by the backend, if any.
        details: Error payload supplied by the backend, if any.
    """

    def __init__(
        self,
        kind: StorageErrorKind,
        message: str,
        status_hint: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_hint = status_hint
        self.details = details

    def with_context(self, context: str) -> "StorageError":
        """Return a copy of this error whose message is prefixed with context."""
        return StorageError(
            kind=self.kind,
            message=f"{context}: {self.message}",
            status_hint=self.status_hint,
            details=self.details,
        )
