"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Union

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format an instant as an ISO-8601 UTC string with millisecond precision.

    Produces ``YYYY-MM-DDTHH:MM:SS.mmmZ`` so that lexical order of stored
    timestamps matches chronological order.
    """
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class Product:
    """A stored product record as read back from the storage backend.

    Fields may be None when the backend has an empty cell for them.
    ``estoque`` is a float only when a stored cell holds a fraction;
    ``ativo`` is None when the backend kept its own default.
    """

    id: str
    nome: Optional[str]
    descricao: Optional[str]
    preco: Optional[float]
    categoria: Optional[str]
    estoque: Optional[Union[int, float]]
    ativo: Optional[bool]
    data_criacao: Optional[str]
    data_atualizacao: Optional[str]


@dataclass(frozen=True)
class ProductDraft:
    """Validated input for creating a product.

    Attributes:
        nome: Display name.
        descricao: Description.
        preco: Non-negative price.
        categoria: Category label.
        estoque: Non-negative stock count.
        ativo: Strict boolean when the caller supplied one, else None
            so the backend default applies.
    """

    nome: str
    descricao: str
    preco: float
    categoria: str
    estoque: int
    ativo: Optional[bool] = None


@dataclass(frozen=True)
class ProductChanges:
    """Selective update input. ``None`` means "not supplied, leave untouched"."""

    nome: Optional[str] = None
    descricao: Optional[str] = None
    preco: Optional[float] = None
    categoria: Optional[str] = None
    estoque: Optional[int] = None
    ativo: Optional[bool] = None

    def supplied(self) -> dict:
        """Return only the supplied fields, keyed by attribute name."""
        return {
            name: value
            for name, value in (
                ("nome", self.nome),
                ("descricao", self.descricao),
                ("preco", self.preco),
                ("categoria", self.categoria),
                ("estoque", self.estoque),
                ("ativo", self.ativo),
            )
            if value is not None
        }
