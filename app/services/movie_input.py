"""Coercion rules applied to raw movie form/API input."""

from __future__ import annotations

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def split_actors(raw: str) -> list[str]:
    """Turn ``"A, B, C"`` into ``["A", "B", "C"]``."""

    return [name.strip() for name in raw.split(",")]


def coerce_actors(value: Any) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return split_actors(value)
    if isinstance(value, (list, tuple)):
        return [str(name) for name in value]
    return [str(value)]


def coerce_release_year(value: Any) -> int | None:
    """Parse the leading integer of ``value``; ``None`` when there is none.

    ``"1999"`` -> 1999, ``"1999abc"`` -> 1999, ``1999.7`` -> 1999,
    ``"abc"`` -> None. No range check is made.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
