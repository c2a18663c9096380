"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from app.domain.catalog.entities import Product


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        payload: Raw JSON object sent by the client, validated by the use case.
    """

    payload: Mapping[str, Any]


@dataclass(frozen=True)
class GetProductQuery:
    """Input DTO for retrieving one product."""

    product_id: str


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for a full update (PUT).

    Attributes:
        product_id: Id of the product to update.
        payload: Raw JSON object; must pass every product rule.
    """

    product_id: str
    payload: Mapping[str, Any]


@dataclass(frozen=True)
class PatchProductCommand:
    """Input DTO for a partial update (PATCH).

    Attributes:
        product_id: Id of the product to update.
        payload: Raw JSON object; only the supplied fields are checked.
    """

    product_id: str
    payload: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteProductCommand:
    """Input DTO for deleting a product."""

    product_id: str


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for a single product.

    Attributes:
        id: Backend-assigned record id.
        nome: Display name.
        descricao: Description.
        preco: Price.
        categoria: Category label.
        estoque: Stock count.
        ativo: Active flag, None when the backend kept its default.
        data_criacao: ISO-8601 creation timestamp.
        data_atualizacao: ISO-8601 last-update timestamp.
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
class DeleteProductResult:
    """Output DTO for a completed delete."""

    id: str


def to_result(product: Product) -> ProductResult:
    """Convert a Product entity into its output DTO."""
    return ProductResult(
        id=product.id,
        nome=product.nome,
        descricao=product.descricao,
        preco=product.preco,
        categoria=product.categoria,
        estoque=product.estoque,
        ativo=product.ativo,
        data_criacao=product.data_criacao,
        data_atualizacao=product.data_atualizacao,
    )
