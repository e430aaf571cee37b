"""Tests for the wire-key codec."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

import pytest

from xendit_requests import wire
from xendit_requests.models import Invoice, RecurringPayment


@dataclass(frozen=True)
class Renamed:
    payer: str | None = None
    total: int | None = None

    WIRE_KEYS: ClassVar[dict[str, str]] = {"payer": "payer_email", "total": "amount"}


class TestWireKeyTables:
    @pytest.mark.parametrize("record_type", [RecurringPayment, Invoice])
    def test_table_covers_every_field(self, record_type):
        wire.check_wire_keys(record_type)

    def test_mismatch_detected(self):
        @dataclass(frozen=True)
        class Broken:
            a: str | None = None

            WIRE_KEYS: ClassVar[dict[str, str]] = {"b": "b"}

        with pytest.raises(TypeError, match="missing=\\['a'\\] extra=\\['b'\\]"):
            wire.check_wire_keys(Broken)


class TestEncode:
    def test_uses_wire_keys_and_skips_unset(self):
        assert wire.encode(Renamed(payer="a@example.com")) == {"payer_email": "a@example.com"}

    def test_encode_params_renames_known_fields(self):
        params = wire.encode_params(Renamed, {"payer": "a@example.com", "locale": "id"})
        assert params == {"payer_email": "a@example.com", "locale": "id"}

    def test_encode_params_passes_wire_keys_through(self):
        assert wire.encode_params(Renamed, {"amount": 5}) == {"amount": 5}


class TestDecode:
    def test_renamed_keys(self):
        record = wire.decode(Renamed, {"payer_email": "a@example.com", "amount": 10})
        assert record == Renamed(payer="a@example.com", total=10)

    def test_unknown_keys_ignored(self):
        record = wire.decode(Renamed, {"amount": 10, "brand_new_field": {"x": 1}})
        assert record == Renamed(total=10)

    def test_absent_keys_stay_none(self):
        assert wire.decode(Renamed, {}) == Renamed()

    def test_list_preserves_order(self):
        records = wire.decode(list[Renamed], [{"amount": 1}, {"amount": 2}, {"amount": 3}])
        assert [r.total for r in records] == [1, 2, 3]

    def test_empty_list(self):
        assert wire.decode(list[Renamed], []) == []

    def test_object_where_array_expected(self):
        with pytest.raises(ValueError, match="JSON array"):
            wire.decode(list[Renamed], {"amount": 1})

    def test_array_where_object_expected(self):
        with pytest.raises(ValueError, match="JSON object"):
            wire.decode(Renamed, [{"amount": 1}])


class TestNumbers:
    def test_floats_load_as_decimal(self):
        payload = wire.loads('{"amount": 10000.50, "interval_count": 3}')
        assert payload["amount"] == Decimal("10000.50")
        assert isinstance(payload["interval_count"], int)

    def test_integral_decimal_dumps_as_int(self):
        assert wire.dumps({"amount": Decimal("150000")}) == '{"amount": 150000}'

    def test_fractional_decimal_dumps_as_float(self):
        assert wire.dumps({"amount": Decimal("12.5")}) == '{"amount": 12.5}'

    @pytest.mark.parametrize("value", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_non_finite_decimal_rejected(self, value):
        with pytest.raises(ValueError, match="non-finite"):
            wire.dumps({"amount": Decimal(value)})

    def test_float_nan_rejected(self):
        with pytest.raises(ValueError):
            wire.dumps({"amount": float("nan")})

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            wire.dumps({"when": object()})
