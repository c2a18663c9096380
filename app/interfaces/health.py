"""
Health check and API root routers.

Provides the liveness endpoint and a self-describing root.
No business logic. Returns application status, version and storage variant.
"""

from fastapi import APIRouter, Request

from app.domain.catalog.entities import format_timestamp, utc_now
from app.domain.catalog.rewards import Operation, reward_for
from app.interfaces.catalog.schemas import HealthResponse, RootResponse

router = APIRouter(tags=["health"])

API_ENDPOINTS = {
    "health": "GET /health",
    "stats": "GET /api/v1/stats",
    "listar": "GET /api/v1/produtos",
    "buscar": "GET /api/v1/produtos/:id",
    "criar": "POST /api/v1/produtos",
    "atualizar": "PUT /api/v1/produtos/:id",
    "atualizarParcial": "PATCH /api/v1/produtos/:id",
    "deletar": "DELETE /api/v1/produtos/:id",
}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and storage variant.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    state = request.app.state
    return HealthResponse(
        status="OK",
        message="API funcionando perfeitamente!",
        timestamp=format_timestamp(utc_now()),
        version=state.settings.version,
        storage=state.product_repository.backend_name,
        uptime=state.progress.uptime_seconds,
    )


@router.get("/", response_model=RootResponse, summary="API root")
def root(request: Request) -> RootResponse:
    """Describe the API. The reward is shown but never credited to progress."""
    reward = reward_for(Operation.ROOT)
    return RootResponse(
        message="Bem-vindo à API de Produtos!",
        description="CRUD completo de produtos com persistência no AirTable",
        version=request.app.state.settings.version,
        endpoints=API_ENDPOINTS,
        badges=list(reward.badges),
        xp=reward.xp,
    )
