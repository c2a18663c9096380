"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Product payloads are validated by the use cases (all violations at once).
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.dtos import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    PatchProductCommand,
    ProductResult,
    UpdateProductCommand,
)
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.patch_product import PatchProductUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.domain.catalog.rewards import Operation, ProgressTracker
from app.interfaces.catalog.dependencies import (
    count_request,
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_use_case,
    get_list_products_use_case,
    get_patch_product_use_case,
    get_progress_tracker,
    get_update_product_use_case,
)
from app.interfaces.catalog.schemas import (
    PRODUCT_EXAMPLE,
    DeletedEnvelope,
    DeletedItem,
    ErrorResponse,
    ProductEnvelope,
    ProductItem,
    ProductListEnvelope,
)

router = APIRouter(
    prefix="/produtos",
    tags=["produtos"],
    dependencies=[Depends(count_request)],
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}
INVALID_RESPONSE = {400: {"model": ErrorResponse}}


def _item(result: ProductResult) -> ProductItem:
    return ProductItem(
        id=result.id,
        nome=result.nome,
        descricao=result.descricao,
        preco=result.preco,
        categoria=result.categoria,
        estoque=result.estoque,
        ativo=result.ativo,
        data_criacao=result.data_criacao,
        data_atualizacao=result.data_atualizacao,
    )


@router.post(
    "",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID_RESPONSE,
    summary="Create a product",
)
async def create_product(
    payload: dict[str, Any] = Body(..., examples=[PRODUCT_EXAMPLE]),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> ProductEnvelope:
    """Create a product. ``ativo`` is stored only when it is a real boolean."""
    result = await use_case.execute(CreateProductCommand(payload=payload))
    reward = progress.award(Operation.CREATE)
    return ProductEnvelope(
        message="Produto criado com sucesso!",
        data=_item(result),
        badges=list(reward.badges),
        xp=reward.xp,
    )


@router.get(
    "",
    response_model=ProductListEnvelope,
    response_model_exclude_none=True,
    summary="List products",
    description="Every product, newest first.",
)
async def list_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> ProductListEnvelope:
    results = await use_case.execute()
    reward = progress.award(Operation.LIST)
    return ProductListEnvelope(
        message=f"Encontrados {len(results)} produtos",
        data=[_item(r) for r in results],
        count=len(results),
        badges=list(reward.badges),
        xp=reward.xp,
    )


@router.get(
    "/{product_id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a product",
)
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> ProductEnvelope:
    result = await use_case.execute(GetProductQuery(product_id=product_id))
    reward = progress.award(Operation.GET)
    return ProductEnvelope(
        message="Produto encontrado com sucesso!",
        data=_item(result),
        badges=list(reward.badges),
        xp=reward.xp,
    )


@router.put(
    "/{product_id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Update a product",
    description="Requires a complete, valid product. Omitted optional fields are kept.",
)
async def update_product(
    product_id: str,
    payload: dict[str, Any] = Body(..., examples=[PRODUCT_EXAMPLE]),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> ProductEnvelope:
    result = await use_case.execute(
        UpdateProductCommand(product_id=product_id, payload=payload)
    )
    reward = progress.award(Operation.UPDATE)
    return ProductEnvelope(
        message="Produto atualizado com sucesso!",
        data=_item(result),
        badges=list(reward.badges),
        xp=reward.xp,
    )


@router.patch(
    "/{product_id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Partially update a product",
    description=(
        "Only the supplied fields are written. Each supplied field must pass "
        "the same rule as on create, otherwise the answer is 400 "
        "VALIDATION_ERROR listing every violation."
    ),
)
async def patch_product(
    product_id: str,
    payload: dict[str, Any] = Body(..., examples=[{"preco": 1800.0, "estoque": 8}]),
    use_case: PatchProductUseCase = Depends(get_patch_product_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> ProductEnvelope:
    result = await use_case.execute(
        PatchProductCommand(product_id=product_id, payload=payload)
    )
    reward = progress.award(Operation.PATCH)
    return ProductEnvelope(
        message="Produto atualizado parcialmente com sucesso!",
        data=_item(result),
        badges=list(reward.badges),
        xp=reward.xp,
    )


@router.delete(
    "/{product_id}",
    response_model=DeletedEnvelope,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> DeletedEnvelope:
    result = await use_case.execute(DeleteProductCommand(product_id=product_id))
    reward = progress.award(Operation.DELETE)
    return DeletedEnvelope(
        message="Produto deletado com sucesso!",
        data=DeletedItem(id=result.id),
        badges=list(reward.badges),
        xp=reward.xp,
    )
