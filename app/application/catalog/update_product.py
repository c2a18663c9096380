"""
Use case: Update a product (PUT).

Input: UpdateProductCommand (product_id, raw payload)
Output: ProductResult
Side effects: Overwrites the supplied fields of one record.
Failure cases: ProductValidationError, ProductNotFoundError, StorageError.
"""

import logging

from app.application.catalog.dtos import ProductResult, UpdateProductCommand, to_result
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import parse_changes, validate_product

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Validates a complete payload and merges it into an existing product.

    The payload must satisfy every rule a create would. Fields the rules
    do not require (``ativo``) are left untouched when omitted.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, command: UpdateProductCommand) -> ProductResult:
        """Run the update use case.

        Raises:
            ProductValidationError: If any product rule is broken.
            ProductNotFoundError: If no product has this id.
        """
        validate_product(command.payload)
        changes = parse_changes(command.payload)

        product = await self._repository.update(command.product_id, changes)
        if product is None:
            raise ProductNotFoundError(command.product_id)
        logger.info("Updated product id=%s", product.id)
        return to_result(product)
