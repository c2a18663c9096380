"""
Adapter: In-memory product repository.

Implements ProductRepository port with a dict keyed by product id.
Used for demos and tests. Each method finishes its read-modify-write
without awaiting, so concurrent requests on one event loop cannot
interleave inside a mutation.
"""

import dataclasses
import uuid
from typing import Dict, Optional

from app.domain.catalog.entities import (
    Clock,
    Product,
    ProductChanges,
    ProductDraft,
    format_timestamp,
    utc_now,
)
from app.domain.catalog.ports import ProductRepository


def _new_record_id() -> str:
    return "rec" + uuid.uuid4().hex[:14]


class InMemoryProductRepository(ProductRepository):
    """Simple in-memory product store.

    Args:
        clock: Source of the current instant for timestamps.
        default_ativo: Value stored for ``ativo`` when a create omits it,
            standing in for the remote table's column default.
    """

    backend_name = "memory"

    def __init__(
        self, clock: Clock = utc_now, default_ativo: Optional[bool] = True
    ) -> None:
        self._clock = clock
        self._default_ativo = default_ativo
        self.products: Dict[str, Product] = {}

    def reset(self) -> None:
        """Clear all stored products (useful in tests)."""
        self.products.clear()

    async def create(self, draft: ProductDraft) -> Product:
        timestamp = format_timestamp(self._clock())
        product = Product(
            id=_new_record_id(),
            nome=draft.nome,
            descricao=draft.descricao,
            preco=float(draft.preco),
            categoria=draft.categoria,
            estoque=int(draft.estoque),
            ativo=draft.ativo if isinstance(draft.ativo, bool) else self._default_ativo,
            data_criacao=timestamp,
            data_atualizacao=timestamp,
        )
        self.products[product.id] = product
        return product

    async def find_all(self) -> list[Product]:
        return sorted(
            self.products.values(),
            key=lambda p: p.data_criacao or "",
            reverse=True,
        )

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    async def update(
        self, product_id: str, changes: ProductChanges
    ) -> Optional[Product]:
        current = self.products.get(product_id)
        if current is None:
            return None
        updated = dataclasses.replace(
            current,
            data_atualizacao=format_timestamp(self._clock()),
            **changes.supplied(),
        )
        self.products[product_id] = updated
        return updated

    async def delete(self, product_id: str) -> bool:
        return self.products.pop(product_id, None) is not None
