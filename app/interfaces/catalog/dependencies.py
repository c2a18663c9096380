"""
Dependency injection for the catalog bounded context.

Builds the storage adapter once per application (selected by settings)
and provides FastAPI dependency functions that hand it to use cases via
constructor injection. The repository and the progress tracker live on
``app.state``; nothing here is a module-level global.
"""

import logging

from fastapi import Depends, Request

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.patch_product import PatchProductUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.core.config import ConfigurationError, Settings
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.rewards import ProgressTracker
from app.infrastructure.catalog.airtable_client import AirtableTable
from app.infrastructure.catalog.airtable_repository import AirtableProductRepository
from app.infrastructure.catalog.memory_repository import InMemoryProductRepository

logger = logging.getLogger(__name__)


def build_product_repository(settings: Settings) -> ProductRepository:
    """Build the storage adapter selected by ``settings.storage_backend``.

    Raises:
        ConfigurationError: If the Airtable backend is selected and any
            credential is missing.
    """
    if settings.storage_backend == "memory":
        return InMemoryProductRepository()

    missing = settings.missing_airtable_settings()
    if missing:
        message = (
            f"Variáveis de ambiente ausentes: {', '.join(missing)}. "
            "Crie um arquivo .env baseado em .env.example e preencha suas "
            "credenciais, ou exporte-as no shell."
        )
        logger.critical(message)
        raise ConfigurationError(message)

    table = AirtableTable(
        api_key=settings.airtable_api_key,
        base_id=settings.airtable_base_id,
        table_name=settings.airtable_table_name,
        api_url=settings.airtable_api_url,
        timeout=settings.airtable_timeout_seconds,
    )
    return AirtableProductRepository(table)


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository wired into this application."""
    return request.app.state.product_repository


def get_progress_tracker(request: Request) -> ProgressTracker:
    """Return the progress tracker of this application."""
    return request.app.state.progress


def count_request(progress: ProgressTracker = Depends(get_progress_tracker)) -> None:
    """Count one request against the product API."""
    progress.record_request()


def get_create_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(repository=repository)


def get_list_products_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(repository=repository)


def get_get_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(repository=repository)


def get_update_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(repository=repository)


def get_patch_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> PatchProductUseCase:
    return PatchProductUseCase(repository=repository)


def get_delete_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(repository=repository)
