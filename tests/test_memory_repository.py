"""
Tests for the in-memory product repository.
"""

import pytest

from app.domain.catalog.entities import ProductChanges, ProductDraft
from app.infrastructure.catalog.memory_repository import InMemoryProductRepository


def _draft(nome: str = "Monitor", ativo=None) -> ProductDraft:
    return ProductDraft(
        nome=nome,
        descricao="Monitor 27 polegadas",
        preco=1200.0,
        categoria="Informática",
        estoque=4,
        ativo=ativo,
    )


class TestInMemoryProductRepository:
    """CRUD behaviour of the in-memory store."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, memory_repository) -> None:
        product = await memory_repository.create(_draft())
        assert product.id.startswith("rec")
        assert len(product.id) == 17
        assert product.data_criacao == "2024-01-15T10:30:00.000Z"
        assert product.data_atualizacao == product.data_criacao

    @pytest.mark.asyncio
    async def test_ativo_defaults_when_omitted(self, memory_repository) -> None:
        assert (await memory_repository.create(_draft())).ativo is True
        assert (await memory_repository.create(_draft(ativo=False))).ativo is False

    @pytest.mark.asyncio
    async def test_default_ativo_is_configurable(self, clock) -> None:
        repository = InMemoryProductRepository(clock=clock, default_ativo=None)
        assert (await repository.create(_draft())).ativo is None

    @pytest.mark.asyncio
    async def test_find_all_newest_first(self, memory_repository) -> None:
        first = await memory_repository.create(_draft("A"))
        second = await memory_repository.create(_draft("B"))
        assert [p.id for p in await memory_repository.find_all()] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_update_merges_and_refreshes_stamp(self, memory_repository) -> None:
        created = await memory_repository.create(_draft())
        updated = await memory_repository.update(
            created.id, ProductChanges(nome="Monitor 4K", ativo=False)
        )
        assert updated.nome == "Monitor 4K"
        assert updated.ativo is False
        assert updated.preco == created.preco
        assert updated.data_criacao == created.data_criacao
        assert updated.data_atualizacao == "2024-01-15T10:30:01.000Z"
        assert await memory_repository.find_by_id(created.id) == updated

    @pytest.mark.asyncio
    async def test_missing_ids_return_sentinels(self, memory_repository) -> None:
        assert await memory_repository.find_by_id("recNOPE") is None
        assert await memory_repository.patch("recNOPE", ProductChanges(estoque=1)) is None
        assert await memory_repository.delete("recNOPE") is False

    @pytest.mark.asyncio
    async def test_delete_then_reset(self, memory_repository) -> None:
        kept = await memory_repository.create(_draft("Kept"))
        removed = await memory_repository.create(_draft("Removed"))
        assert await memory_repository.delete(removed.id) is True
        assert await memory_repository.delete(removed.id) is False
        assert [p.id for p in await memory_repository.find_all()] == [kept.id]

        memory_repository.reset()
        assert await memory_repository.find_all() == []
