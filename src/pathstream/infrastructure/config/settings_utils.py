"""Lenient parsers for environment-sourced settings.

Each parser falls back to its default on malformed input, so a bad variable
never stops `Settings` from loading.
"""

from __future__ import annotations


MAX_FILE_MODE = 0o7777

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(value: object, *, default: bool = False) -> bool:
    """Parse "yes"/"off"/"1"-style flags."""
    if isinstance(value, bool):
        return value
    raw = "" if value is None else str(value).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def parse_int(value: object, *, default: int, minimum: int | None = None) -> int:
    """Parse a decimal count, clamping to `minimum` when given."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except (TypeError, ValueError):
            return default
    if minimum is not None and parsed < minimum:
        return minimum
    return parsed


def parse_octal(value: object, *, default: int) -> int:
    """Parse a permission mode.

    Text is always octal ("644", "0o644"); ints are taken as they are.
    Anything outside 0..0o7777 falls back to `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    else:
        raw = str(value).strip().lower()
        if raw.startswith("0o"):
            raw = raw[2:]
        try:
            parsed = int(raw, 8)
        except ValueError:
            return default
    if parsed < 0 or parsed > MAX_FILE_MODE:
        return default
    return parsed
