"""Identifier parsing shared by the v4 translators.

Creation is strict: a required id must parse, empty included. Filtering is
lenient on absence: an empty field is skipped, only a non-empty value that
does not parse is an error.
"""

from __future__ import annotations

import re
from typing import Any

from gandi_hosting.exceptions import ParseError

# int() alone would also take whitespace, underscores and non-ASCII digits
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_id(value: str, entity: str, field: str, fn: str = "") -> int:
    """Parse a decimal id, raising ParseError naming ``entity.field``."""
    if not _DECIMAL.fullmatch(value):
        raise ParseError(fn or f"to_wire({entity})", entity, field)
    return int(value)


def set_id(
    wire: dict[str, Any],
    key: str,
    value: str,
    entity: str,
    field: str,
) -> None:
    """Add ``key`` to a sparse map when ``value`` is set."""
    if value == "":
        return
    wire[key] = parse_id(value, entity, field, f"to_wire_filter({entity})")


def set_str(wire: dict[str, Any], key: str, value: str) -> None:
    if value:
        wire[key] = value


def id_str(value: int | None) -> str:
    return "" if value is None else str(value)
