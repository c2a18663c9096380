"""
Field mapping between catalog entities and the Airtable table schema.

The table uses capitalized column names (Nome, Preco, DataCriacao, ...).
Outgoing field sets only contain what the caller supplied; incoming
records map missing cells to None.
"""

from datetime import datetime
from typing import Any, Mapping

from app.domain.catalog.entities import (
    Product,
    ProductChanges,
    ProductDraft,
    format_timestamp,
)

FIELD_NAMES: dict[str, str] = {
    "nome": "Nome",
    "descricao": "Descricao",
    "preco": "Preco",
    "categoria": "Categoria",
    "estoque": "Estoque",
    "ativo": "Ativo",
    "data_criacao": "DataCriacao",
    "data_atualizacao": "DataAtualizacao",
}

SORT_FIELD = FIELD_NAMES["data_criacao"]


def draft_to_fields(draft: ProductDraft, now: datetime) -> dict[str, Any]:
    """Build the field set for a new record.

    ``Ativo`` is only sent when the draft holds a strict boolean, so the
    table's own default applies otherwise.
    """
    timestamp = format_timestamp(now)
    fields: dict[str, Any] = {
        FIELD_NAMES["nome"]: draft.nome,
        FIELD_NAMES["descricao"]: draft.descricao,
        FIELD_NAMES["preco"]: float(draft.preco),
        FIELD_NAMES["categoria"]: draft.categoria,
        FIELD_NAMES["estoque"]: int(draft.estoque),
        FIELD_NAMES["data_criacao"]: timestamp,
        FIELD_NAMES["data_atualizacao"]: timestamp,
    }
    if isinstance(draft.ativo, bool):
        fields[FIELD_NAMES["ativo"]] = draft.ativo
    return fields


def changes_to_fields(changes: ProductChanges, now: datetime) -> dict[str, Any]:
    """Build the field set for a selective update.

    Always refreshes ``DataAtualizacao``; every other column is included
    only when the caller supplied it.
    """
    fields: dict[str, Any] = {
        FIELD_NAMES["data_atualizacao"]: format_timestamp(now),
    }
    for name, value in changes.supplied().items():
        fields[FIELD_NAMES[name]] = value
    return fields


def _stock_value(value: Any) -> Any:
    # Cells edited by hand may hold 4.0 or 2.5; integral values read back as int.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def record_to_product(record: Mapping[str, Any]) -> Product:
    """Map an Airtable record (``{"id", "fields"}``) to a Product."""
    fields = record.get("fields") or {}
    return Product(
        id=record["id"],
        nome=fields.get(FIELD_NAMES["nome"]),
        descricao=fields.get(FIELD_NAMES["descricao"]),
        preco=fields.get(FIELD_NAMES["preco"]),
        categoria=fields.get(FIELD_NAMES["categoria"]),
        estoque=_stock_value(fields.get(FIELD_NAMES["estoque"])),
        ativo=fields.get(FIELD_NAMES["ativo"]),
        data_criacao=fields.get(FIELD_NAMES["data_criacao"]),
        data_atualizacao=fields.get(FIELD_NAMES["data_atualizacao"]),
    )
