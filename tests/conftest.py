"""
Shared pytest fixtures.

The test session runs against the in-memory storage backend so that
importing ``app.main`` never needs Airtable credentials.
"""

import os

os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.infrastructure.catalog.memory_repository import (  # noqa: E402
    InMemoryProductRepository,
)
from app.main import create_app  # noqa: E402

START = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


class TickingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = START) -> None:
        self.current = start

    def __call__(self) -> datetime:
        moment = self.current
        self.current = self.current + timedelta(seconds=1)
        return moment


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def memory_repository(clock: TickingClock) -> InMemoryProductRepository:
    return InMemoryProductRepository(clock=clock)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storage_backend="memory", rate_limit_enabled=False)


@pytest.fixture
def client(
    test_settings: Settings, memory_repository: InMemoryProductRepository
) -> TestClient:
    app = create_app(settings=test_settings, repository=memory_repository)
    return TestClient(app)


@pytest.fixture
def product_payload() -> dict:
    return {
        "nome": "Smartphone Galaxy",
        "descricao": "Celular com 128GB de armazenamento",
        "preco": 1500.99,
        "categoria": "Eletrônicos",
        "estoque": 10,
        "ativo": True,
    }
