"""
Use case: Delete a product.

Input: DeleteProductCommand (product_id)
Output: DeleteProductResult
Side effects: Removes one record from the storage backend.
Failure cases: ProductNotFoundError, StorageError.
"""

import logging

from app.application.catalog.dtos import DeleteProductCommand, DeleteProductResult
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Removes a product; absence is reported as ProductNotFoundError."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, command: DeleteProductCommand) -> DeleteProductResult:
        deleted = await self._repository.delete(command.product_id)
        if not deleted:
            raise ProductNotFoundError(command.product_id)
        logger.info("Deleted product id=%s", command.product_id)
        return DeleteProductResult(id=command.product_id)
