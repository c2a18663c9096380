"""
Use case: Partially update a product (PATCH).

Input: PatchProductCommand (product_id, raw payload)
Output: ProductResult
Side effects: Overwrites the supplied fields of one record.
Failure cases: ProductValidationError, ProductNotFoundError, StorageError.
"""

import logging

from app.application.catalog.dtos import PatchProductCommand, ProductResult, to_result
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import parse_changes, validate_product

logger = logging.getLogger(__name__)


class PatchProductUseCase:
    """Merges only the supplied fields into an existing product.

    Supplied fields are checked against the same rules as a create;
    omitted fields are neither checked nor written.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, command: PatchProductCommand) -> ProductResult:
        """Run the patch use case.

        Raises:
            ProductValidationError: If a supplied field breaks its rule.
            ProductNotFoundError: If no product has this id.
        """
        validate_product(command.payload, partial=True)
        changes = parse_changes(command.payload)

        product = await self._repository.patch(command.product_id, changes)
        if product is None:
            raise ProductNotFoundError(command.product_id)
        logger.info(
            "Patched product id=%s fields=%s",
            product.id,
            sorted(changes.supplied()),
        )
        return to_result(product)
