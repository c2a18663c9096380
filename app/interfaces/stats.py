"""
Statistics router.

Reports the progress accumulated by the running application.
"""

from fastapi import APIRouter, Depends

from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.rewards import ProgressTracker
from app.interfaces.catalog.dependencies import (
    get_product_repository,
    get_progress_tracker,
)
from app.interfaces.catalog.schemas import StatsData, StatsResponse

router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Progress statistics",
    description="Requests served, products stored, XP and unlocked badges.",
)
async def stats(
    repository: ProductRepository = Depends(get_product_repository),
    progress: ProgressTracker = Depends(get_progress_tracker),
) -> StatsResponse:
    products = await repository.find_all()
    return StatsResponse(
        message="Estatísticas da API",
        data=StatsData(
            total_requests=progress.total_requests,
            total_products=len(products),
            total_xp=progress.total_xp,
            badges=list(progress.badges),
            uptime=progress.uptime_seconds,
            storage=repository.backend_name,
        ),
    )
