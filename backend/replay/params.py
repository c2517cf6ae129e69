"""
Strict integer parsing for query-string parameters.

Accepts an optional sign followed by ASCII digits, nothing else. int() alone
would also take padded or underscored values, so the raw string is matched
first and range-checked after.
"""

import re
from typing import Optional

from replay.errors import InvalidArgument

_INTEGER = re.compile(r"[+-]?[0-9]+")

INT32 = 32
INT64 = 64


def parse_int(raw: Optional[str], name: str, bits: int = INT64) -> int:
    if raw is None:
        raise InvalidArgument(f"{name} parameter required")
    if not _INTEGER.fullmatch(raw):
        raise InvalidArgument(f"invalid {name} format")

    value = int(raw)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise InvalidArgument(f"invalid {name} format")
    return value


def parse_optional_int(raw: Optional[str], name: str, bits: int = INT64) -> Optional[int]:
    """Like parse_int, but an absent parameter is simply None."""
    if raw is None:
        return None
    return parse_int(raw, name, bits)
