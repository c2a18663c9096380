"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.catalog.entities import Product, ProductChanges, ProductDraft


class ProductRepository(ABC):
    """Port for persisting and retrieving products.

    Absence is reported as a value (None / False), never as an exception.
    Every other failure surfaces as a StorageError.
    """

    #: Short name of the backend variant, reported by the health endpoint.
    backend_name: str = "unknown"

    @abstractmethod
    async def create(self, draft: ProductDraft) -> Product:
        """Persist a new product and return it with its backend-assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Return every product, newest ``data_criacao`` first."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Return a product by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, product_id: str, changes: ProductChanges
    ) -> Optional[Product]:
        """Write the supplied fields and refresh ``data_atualizacao``.

        Returns:
            The updated product, or None if the id does not exist.
        """
        raise NotImplementedError

    async def patch(
        self, product_id: str, changes: ProductChanges
    ) -> Optional[Product]:
        """Partial update. Same selective merge as ``update``."""
        return await self.update(product_id, changes)

    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        """Remove a product.

        Returns:
            True when the row was removed, False if the id does not exist.
        """
        raise NotImplementedError
