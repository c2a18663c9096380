"""
Use case: Create a product.

Input: CreateProductCommand (raw payload)
Output: ProductResult
Side effects: Writes one record to the storage backend.
Failure cases: ProductValidationError, StorageError.
"""

import logging

from app.application.catalog.dtos import CreateProductCommand, ProductResult, to_result
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import parse_draft, validate_product

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Validates a payload and stores it as a new product."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create use case.

        Args:
            command: The create request holding the raw payload.

        Returns:
            The stored product, including its new id and timestamps.

        Raises:
            ProductValidationError: If any product rule is broken.
        """
        validate_product(command.payload)
        draft = parse_draft(command.payload)

        product = await self._repository.create(draft)
        logger.info("Created product id=%s", product.id)
        return to_result(product)
