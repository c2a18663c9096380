"""
Tests for the catalog domain layer.

Covers validation rules, boolean coercion, timestamps, errors and
rewards. Pure functions only; no IO.
"""

from datetime import datetime, timezone

import pytest

from app.domain.catalog.entities import ProductChanges, format_timestamp
from app.domain.catalog.errors import (
    ProductNotFoundError,
    ProductValidationError,
    StorageError,
    StorageErrorKind,
)
from app.domain.catalog.rewards import (
    BADGE_CRUD_MASTER,
    BADGE_PATCH_BONUS,
    Operation,
    ProgressTracker,
    reward_for,
)
from app.domain.catalog.validation import (
    CATEGORIA_REQUIRED,
    DESCRICAO_REQUIRED,
    ESTOQUE_INVALID,
    NOME_REQUIRED,
    PRECO_INVALID,
    collect_violations,
    parse_changes,
    parse_draft,
    strict_bool,
    validate_product,
)

VALID = {
    "nome": "Notebook",
    "descricao": "16GB RAM",
    "preco": 3500.0,
    "categoria": "Informática",
    "estoque": 3,
}


class TestValidation:
    """Tests for the product payload rules."""

    def test_valid_payload_has_no_violations(self) -> None:
        assert collect_violations(VALID) == []

    def test_zero_price_and_stock_are_valid(self) -> None:
        assert collect_violations({**VALID, "preco": 0, "estoque": 0}) == []

    def test_every_violation_is_reported_in_rule_order(self) -> None:
        """An empty payload breaks all five rules at once."""
        assert collect_violations({}) == [
            NOME_REQUIRED,
            DESCRICAO_REQUIRED,
            PRECO_INVALID,
            CATEGORIA_REQUIRED,
            ESTOQUE_INVALID,
        ]

    def test_blank_name_negative_price_fractional_stock(self) -> None:
        payload = {**VALID, "nome": "   ", "preco": -5, "estoque": 1.5}
        assert collect_violations(payload) == [
            NOME_REQUIRED,
            PRECO_INVALID,
            ESTOQUE_INVALID,
        ]

    def test_text_stock_counts_as_one_violation(self) -> None:
        payload = {**VALID, "nome": "", "preco": -100, "estoque": "abc"}
        assert len(collect_violations(payload)) == 3

    @pytest.mark.parametrize("preco", ["10", True, None, float("nan"), float("inf")])
    def test_price_must_be_a_finite_number(self, preco) -> None:
        assert collect_violations({**VALID, "preco": preco}) == [PRECO_INVALID]

    def test_integers_beyond_float_range_are_violations(self) -> None:
        """Huge integers are reported as violations instead of overflowing."""
        payload = {**VALID, "preco": 10**400, "estoque": 10**400}
        assert collect_violations(payload) == [PRECO_INVALID, ESTOQUE_INVALID]
        assert collect_violations({"estoque": -(10**400)}, partial=True) == [
            ESTOQUE_INVALID
        ]

    @pytest.mark.parametrize("estoque", [-1, 2.5, "3", False])
    def test_stock_must_be_a_non_negative_integer(self, estoque) -> None:
        assert collect_violations({**VALID, "estoque": estoque}) == [ESTOQUE_INVALID]

    def test_integral_float_stock_is_accepted(self) -> None:
        assert collect_violations({**VALID, "estoque": 4.0}) == []

    def test_partial_checks_only_supplied_fields(self) -> None:
        assert collect_violations({"preco": 99.9}, partial=True) == []
        assert collect_violations({"nome": None}, partial=True) == []
        assert collect_violations({"estoque": -2}, partial=True) == [ESTOQUE_INVALID]

    def test_validate_product_raises_with_all_errors(self) -> None:
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product({**VALID, "categoria": "", "preco": -1})
        assert exc_info.value.errors == [PRECO_INVALID, CATEGORIA_REQUIRED]


class TestParsing:
    """Tests for turning validated payloads into domain inputs."""

    @pytest.mark.parametrize(
        "value,expected",
        [(True, True), (False, False), (0, None), (1, None), ("false", None), (None, None)],
    )
    def test_strict_bool(self, value, expected) -> None:
        assert strict_bool(value) is expected

    def test_parse_draft_coerces_numbers(self) -> None:
        draft = parse_draft({**VALID, "preco": 10, "estoque": 4.0, "ativo": "yes"})
        assert draft.preco == 10.0
        assert isinstance(draft.preco, float)
        assert draft.estoque == 4
        assert isinstance(draft.estoque, int)
        assert draft.ativo is None

    def test_parse_changes_keeps_only_supplied_fields(self) -> None:
        changes = parse_changes({"preco": 12, "ativo": False, "nome": None})
        assert changes.supplied() == {"preco": 12.0, "ativo": False}

    def test_empty_changes(self) -> None:
        assert ProductChanges().supplied() == {}


class TestTimestamps:
    """Tests for the stored timestamp format."""

    def test_millisecond_precision_utc(self) -> None:
        moment = datetime(2024, 1, 15, 10, 30, 5, 123456, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2024-01-15T10:30:05.123Z"


class TestErrors:
    """Tests for catalog domain errors."""

    def test_not_found_keeps_id(self) -> None:
        error = ProductNotFoundError("rec123")
        assert error.product_id == "rec123"
        assert "rec123" in error.message

    def test_storage_error_with_context_keeps_kind(self) -> None:
        error = StorageError(
            kind=StorageErrorKind.RATE_LIMITED,
            message="Too many requests",
            status_hint=429,
            details={"type": "RATE_LIMIT"},
        )
        wrapped = error.with_context("Erro ao buscar produtos")
        assert wrapped.kind is StorageErrorKind.RATE_LIMITED
        assert wrapped.status_hint == 429
        assert wrapped.details == {"type": "RATE_LIMIT"}
        assert wrapped.message == "Erro ao buscar produtos: Too many requests"


class TestRewards:
    """Tests for badges, XP and progress tracking."""

    @pytest.mark.parametrize(
        "operation,xp",
        [
            (Operation.CREATE, 30),
            (Operation.LIST, 20),
            (Operation.GET, 20),
            (Operation.UPDATE, 25),
            (Operation.PATCH, 35),
            (Operation.DELETE, 20),
            (Operation.ROOT, 170),
        ],
    )
    def test_xp_per_operation(self, operation, xp) -> None:
        assert reward_for(operation).xp == xp

    def test_only_patch_and_root_grant_bonus_badge(self) -> None:
        assert reward_for(Operation.PATCH).badges == (BADGE_CRUD_MASTER, BADGE_PATCH_BONUS)
        assert reward_for(Operation.UPDATE).badges == (BADGE_CRUD_MASTER,)

    def test_tracker_accumulates_xp_and_unique_badges(self) -> None:
        tracker = ProgressTracker()
        tracker.award(Operation.CREATE)
        tracker.award(Operation.PATCH)
        tracker.award(Operation.PATCH)
        tracker.record_request()
        assert tracker.total_xp == 30 + 35 + 35
        assert tracker.badges == [BADGE_CRUD_MASTER, BADGE_PATCH_BONUS]
        assert tracker.total_requests == 1
        assert tracker.uptime_seconds >= 0
