"""Field types shared by the catalog models."""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator

DELIMITER = "|"

UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")


def decode_delimited_list(raw: str, delimiter: str = DELIMITER) -> list[str]:
    """
    Split a delimiter-wrapped scalar such as ``|a|b|c|`` into its items.

    Exactly one leading and one trailing delimiter are removed before
    splitting, so ``""`` and ``"|"`` both decode to ``[""]``.

    Args:
        raw: Raw field content
        delimiter: Single separator character

    Returns:
        Items in their original order
    """
    if raw.startswith(delimiter):
        raw = raw[len(delimiter):]
    if raw.endswith(delimiter):
        raw = raw[: -len(delimiter)]
    return raw.split(delimiter)


def _coerce_delimited(value: Any) -> Any:
    if isinstance(value, str):
        return decode_delimited_list(value)
    return value


def _coerce_uint(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if not _DIGITS.fullmatch(text):
            raise ValueError(f"not an unsigned integer: {value!r}")
        value = int(text)
    if isinstance(value, int) and not 0 <= value <= UINT64_MAX:
        raise ValueError(f"out of range for an unsigned 64-bit integer: {value}")
    return value


# Pipe-wrapped list such as Actors, Genre, Writer and Director
DelimitedList = Annotated[list[str], BeforeValidator(_coerce_delimited)]

# Catalog IDs and numbering; empty elements decode to 0
UInt = Annotated[int, BeforeValidator(_coerce_uint)]
