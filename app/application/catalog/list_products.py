"""
Use case: List every product.

Input: None
Output: list[ProductResult], newest first
Side effects: None.
Failure cases: StorageError.
"""

from app.application.catalog.dtos import ProductResult, to_result
from app.domain.catalog.ports import ProductRepository


class ListProductsUseCase:
    """Returns all products ordered by creation date, newest first."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self) -> list[ProductResult]:
        products = await self._repository.find_all()
        return [to_result(p) for p in products]
