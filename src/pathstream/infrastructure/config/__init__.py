"""Configuration helpers."""

from .settings_utils import (
    MAX_FILE_MODE,
    parse_bool,
    parse_int,
    parse_octal,
)

__all__ = [
    "MAX_FILE_MODE",
    "parse_bool",
    "parse_int",
    "parse_octal",
]
