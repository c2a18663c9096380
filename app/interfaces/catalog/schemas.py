"""
Pydantic schemas for the catalog API responses.

These schemas define the API contract: every success answer is an
envelope ``{success, message, data, badges, xp}``; every failure is
``{success: false, message, error, details?}``.
Inbound product payloads are plain JSON objects checked by the domain
validation rules, so that every violation is reported at once.
No business logic belongs here.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PRODUCT_EXAMPLE = {
    "nome": "Smartphone Galaxy",
    "descricao": "Celular com 128GB de armazenamento",
    "preco": 1500.99,
    "categoria": "Eletrônicos",
    "estoque": 10,
    "ativo": True,
}


class ProductItem(BaseModel):
    """A single product in the response, with camelCase timestamps."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    nome: Optional[str] = None
    descricao: Optional[str] = None
    preco: Optional[float] = None
    categoria: Optional[str] = None
    estoque: Optional[Union[int, float]] = None
    ativo: Optional[bool] = None
    data_criacao: Optional[str] = Field(default=None, alias="dataCriacao")
    data_atualizacao: Optional[str] = Field(default=None, alias="dataAtualizacao")


class DeletedItem(BaseModel):
    """Id of a removed product."""

    id: str


class SuccessEnvelope(BaseModel):
    """Fields shared by every success response."""

    success: bool = True
    message: str
    badges: list[str]
    xp: int


class ProductEnvelope(SuccessEnvelope):
    """Response carrying one product."""

    data: ProductItem


class ProductListEnvelope(SuccessEnvelope):
    """Response carrying every product."""

    data: list[ProductItem]
    count: int


class DeletedEnvelope(SuccessEnvelope):
    """Response for a completed delete."""

    data: DeletedItem


class ErrorResponse(BaseModel):
    """Error envelope returned by the centralized error handlers."""

    success: bool = False
    message: str
    error: str
    details: Any = None
    errors: Optional[list[str]] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    message: str
    timestamp: str
    version: str
    storage: str
    uptime: float


class RootResponse(BaseModel):
    """Response schema for the API root."""

    message: str
    description: str
    version: str
    endpoints: dict[str, str]
    badges: list[str]
    xp: int


class StatsData(BaseModel):
    """Accumulated progress of the running application."""

    model_config = ConfigDict(populate_by_name=True)

    total_requests: int = Field(alias="totalRequests")
    total_products: int = Field(alias="totalProducts")
    total_xp: int = Field(alias="totalXP")
    badges: list[str]
    uptime: float
    storage: str


class StatsResponse(BaseModel):
    """Response schema for the statistics endpoint."""

    success: bool = True
    message: str
    data: StatsData
