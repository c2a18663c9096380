"""
Use case: Get a product by id.

Input: GetProductQuery (product_id)
Output: ProductResult
Side effects: None.
Failure cases: ProductNotFoundError, StorageError.
"""

from app.application.catalog.dtos import GetProductQuery, ProductResult, to_result
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository


class GetProductUseCase:
    """Looks up one product and reports absence as ProductNotFoundError."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, query: GetProductQuery) -> ProductResult:
        """Run the lookup.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = await self._repository.find_by_id(query.product_id)
        if product is None:
            raise ProductNotFoundError(query.product_id)
        return to_result(product)
