"""
Permissive numeric parsing for inventory fields.

The inventory file and operator input are not validated beyond field types:
a numeric field is read from its leading numeric prefix and anything that
has no such prefix reads as zero.

Floats follow ``strtod``: decimal and exponent forms, hex floats
(``0x1.8p3``) and ``inf`` / ``infinity`` in any case. ``nan`` reads as 0.0
so it can never end up in a balance.
"""

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(
    r"\s*([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_INF_PREFIX = re.compile(r"\s*([+-]?inf(?:inity)?)", re.IGNORECASE)
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(text: str | None) -> int:
    """Parse the leading integer of ``text`` ("12b" -> 12, "abc" -> 0)."""
    if not text:
        return 0
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


def parse_float(text: str | None) -> float:
    """Parse the leading number of ``text`` ("30.5ft" -> 30.5, "inf" -> inf, "" -> 0.0)."""
    if not text:
        return 0.0
    try:
        m = _HEX_PREFIX.match(text)
        if m:
            value = float.fromhex("0x" + m.group(2))
            return -value if m.group(1) == "-" else value
        m = _INF_PREFIX.match(text) or _FLOAT_PREFIX.match(text)
        return float(m.group(1)) if m else 0.0
    except (ValueError, OverflowError):
        return 0.0
