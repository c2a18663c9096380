"""
Adapter: Product repository backed by an Airtable table.

Implements ProductRepository port.
Maps catalog entities to the table's field schema and back. A backend
"not found" becomes a None/False return value; every other failure is
re-raised as a StorageError with context, keeping its kind, status hint
and details.
"""

import logging
from typing import Optional

from app.domain.catalog.entities import (
    Clock,
    Product,
    ProductChanges,
    ProductDraft,
    utc_now,
)
from app.domain.catalog.errors import StorageError, StorageErrorKind
from app.domain.catalog.ports import ProductRepository
from app.infrastructure.catalog.airtable_client import AirtableTable
from app.infrastructure.catalog.record_mapper import (
    SORT_FIELD,
    changes_to_fields,
    draft_to_fields,
    record_to_product,
)

logger = logging.getLogger(__name__)


class AirtableProductRepository(ProductRepository):
    """Product persistence in a remote Airtable table.

    Args:
        table: Client bound to the products table.
        clock: Source of the current instant for timestamps.
    """

    backend_name = "airtable"

    def __init__(self, table: AirtableTable, clock: Clock = utc_now) -> None:
        self._table = table
        self._clock = clock

    async def create(self, draft: ProductDraft) -> Product:
        """Create a record with typecasting enabled.

        Raises:
            StorageError: On any backend failure.
        """
        fields = draft_to_fields(draft, self._clock())
        try:
            record = await self._table.create(fields, typecast=True)
        except StorageError as exc:
            logger.error(
                "Airtable create error: kind=%s status=%s message=%s",
                exc.kind.value,
                exc.status_hint,
                exc.message,
            )
            raise StorageError(
                kind=exc.kind,
                message=exc.message or "Erro ao criar produto",
                status_hint=exc.status_hint,
                details=exc.details,
            ) from exc
        return record_to_product(record)

    async def find_all(self) -> list[Product]:
        try:
            records = await self._table.all(sort=[(SORT_FIELD, "desc")])
        except StorageError as exc:
            raise exc.with_context("Erro ao buscar produtos") from exc
        return [record_to_product(record) for record in records]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        try:
            record = await self._table.find(product_id)
        except StorageError as exc:
            if exc.kind is StorageErrorKind.NOT_FOUND:
                return None
            raise exc.with_context("Erro ao buscar produto") from exc
        return record_to_product(record)

    async def update(
        self, product_id: str, changes: ProductChanges
    ) -> Optional[Product]:
        fields = changes_to_fields(changes, self._clock())
        try:
            record = await self._table.update(product_id, fields)
        except StorageError as exc:
            if exc.kind is StorageErrorKind.NOT_FOUND:
                return None
            raise exc.with_context("Erro ao atualizar produto") from exc
        return record_to_product(record)

    async def delete(self, product_id: str) -> bool:
        try:
            await self._table.destroy(product_id)
        except StorageError as exc:
            if exc.kind is StorageErrorKind.NOT_FOUND:
                return False
            raise exc.with_context("Erro ao deletar produto") from exc
        return True
