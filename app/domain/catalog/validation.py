"""
Validation rules for inbound product payloads.

Rules run against the raw JSON object before any mutation. Every rule is
checked independently and all violations are reported together, in rule
order. ``ativo`` is never validated: anything other than a strict boolean
is dropped when the payload is parsed.
"""

import math
from typing import Any, Callable, Mapping, Optional

from app.domain.catalog.entities import ProductChanges, ProductDraft
from app.domain.catalog.errors import ProductValidationError

NOME_REQUIRED = "Nome é obrigatório"
DESCRICAO_REQUIRED = "Descrição é obrigatória"
PRECO_INVALID = "Preço deve ser um número positivo"
CATEGORIA_REQUIRED = "Categoria é obrigatória"
ESTOQUE_INVALID = "Estoque deve ser um número inteiro positivo"


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a number.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _as_float(value: Any) -> Optional[float]:
    """Return the value as a float, or None if it is not a representable number."""
    if not _is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def _is_valid_price(value: Any) -> bool:
    number = _as_float(value)
    return number is not None and math.isfinite(number) and number >= 0


def _is_valid_stock(value: Any) -> bool:
    number = _as_float(value)
    return number is not None and number.is_integer() and number >= 0


_RULES: tuple[tuple[str, Callable[[Any], bool], str], ...] = (
    ("nome", _is_filled_text, NOME_REQUIRED),
    ("descricao", _is_filled_text, DESCRICAO_REQUIRED),
    ("preco", _is_valid_price, PRECO_INVALID),
    ("categoria", _is_filled_text, CATEGORIA_REQUIRED),
    ("estoque", _is_valid_stock, ESTOQUE_INVALID),
)


def collect_violations(payload: Mapping[str, Any], partial: bool = False) -> list[str]:
    """Return every rule violated by the payload, in rule order.

    Args:
        payload: Raw JSON object sent by the client.
        partial: When True, only keys present with a non-null value are
            checked (used for partial updates).

    Returns:
        Human-readable violation messages; empty when the payload is valid.
    """
    violations = []
    for field_name, is_valid, message in _RULES:
        value = payload.get(field_name)
        if partial and value is None:
            continue
        if not is_valid(value):
            violations.append(message)
    return violations


def validate_product(payload: Mapping[str, Any], partial: bool = False) -> None:
    """Raise ProductValidationError if the payload breaks any rule."""
    violations = collect_violations(payload, partial=partial)
    if violations:
        raise ProductValidationError(violations)


def strict_bool(value: Any) -> Optional[bool]:
    """Return the value if it is a real boolean, otherwise None.

    Keeps ``0``, ``""``, ``"false"`` and ``null`` from being written as False.
    """
    return value if isinstance(value, bool) else None


def parse_draft(payload: Mapping[str, Any]) -> ProductDraft:
    """Build a ProductDraft from a payload that already passed validation."""
    return ProductDraft(
        nome=payload["nome"],
        descricao=payload["descricao"],
        preco=float(payload["preco"]),
        categoria=payload["categoria"],
        estoque=int(payload["estoque"]),
        ativo=strict_bool(payload.get("ativo")),
    )


def parse_changes(payload: Mapping[str, Any]) -> ProductChanges:
    """Build a ProductChanges holding only the fields the caller supplied.

    Keys that are missing or null are left as None (untouched).
    """
    preco = payload.get("preco")
    estoque = payload.get("estoque")
    return ProductChanges(
        nome=payload.get("nome"),
        descricao=payload.get("descricao"),
        preco=float(preco) if preco is not None else None,
        categoria=payload.get("categoria"),
        estoque=int(estoque) if estoque is not None else None,
        ativo=strict_bool(payload.get("ativo")),
    )
