"""JSON wire codec driven by each record's static wire-key table.

Every record type declares ``WIRE_KEYS``, a mapping of in-memory field name
to JSON key. Encoding and decoding only ever consult that table.

Numbers: JSON floats decode to ``Decimal`` and integers stay ``int``, so
currency amounts never pass through binary floating point on the way in.
On the way out an integral ``Decimal`` is written as a JSON integer; any
other ``Decimal`` is written as a JSON float. NaN and infinities are rejected.
"""

from __future__ import annotations

import json
from dataclasses import fields
from decimal import Decimal
from typing import Any, Mapping, TypeVar, get_args, get_origin


R = TypeVar("R")


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot encode non-finite number {value} as JSON")
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(body: Any) -> str:
    return json.dumps(body, default=_json_default, allow_nan=False)


def loads(text: str) -> Any:
    """Parse JSON text. Raises json.JSONDecodeError on malformed input."""
    return json.loads(text, parse_float=Decimal)


def encode(record: Any) -> dict[str, Any]:
    """Serialize a record to its wire mapping, omitting unset fields."""
    keys = type(record).WIRE_KEYS
    body: dict[str, Any] = {}
    for name, wire_key in keys.items():
        value = getattr(record, name)
        if value is not None:
            body[wire_key] = value
    return body


def encode_params(record_type: type, params: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a caller-assembled parameter map to wire keys.

    Keys that name a field of ``record_type`` are renamed to that field's
    wire key; anything else is passed through untouched so callers can send
    parameters the record does not model.
    """
    keys = record_type.WIRE_KEYS
    return {keys.get(name, name): value for name, value in params.items()}


def _decode_one(record_type: type[R], payload: Any) -> R:
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"Expected a JSON object for {record_type.__name__}, "
            f"got {type(payload).__name__}"
        )
    keys = record_type.WIRE_KEYS  # type: ignore[attr-defined]
    kwargs = {name: payload[wire_key] for name, wire_key in keys.items() if wire_key in payload}
    return record_type(**kwargs)


def decode(result_type: Any, payload: Any) -> Any:
    """Build ``result_type`` from a decoded JSON payload.

    ``result_type`` is either a record class or ``list[RecordClass]``.
    Unknown keys in the payload are ignored.

    Raises:
        ValueError: If the payload shape does not match ``result_type``.
    """
    if get_origin(result_type) is list:
        (item_type,) = get_args(result_type)
        if not isinstance(payload, list):
            raise ValueError(
                f"Expected a JSON array of {item_type.__name__}, "
                f"got {type(payload).__name__}"
            )
        return [_decode_one(item_type, item) for item in payload]
    return _decode_one(result_type, payload)


def check_wire_keys(record_type: type) -> None:
    """Raise TypeError unless ``WIRE_KEYS`` covers exactly the dataclass fields."""
    declared = {f.name for f in fields(record_type)}
    mapped = set(record_type.WIRE_KEYS)
    if declared != mapped:
        missing = sorted(declared - mapped)
        extra = sorted(mapped - declared)
        raise TypeError(
            f"{record_type.__name__}.WIRE_KEYS mismatch: missing={missing} extra={extra}"
        )
