"""
Core constants for the marina inventory manager.

Store capacity, field limits, location tokens and the monthly rate card.
Values marked as overridable can be changed through environment variables.
"""

import os

# ---------------------------------------------------------------------------
# Store capacity
# ---------------------------------------------------------------------------
MAX_BOATS = 120


def default_capacity() -> int:
    """Capacity used when none is passed explicitly (env: MARINA_CAPACITY)."""
    raw = os.environ.get("MARINA_CAPACITY", "")
    try:
        value = int(raw)
    except ValueError:
        return MAX_BOATS
    return value if value > 0 else MAX_BOATS


def default_log_level() -> str:
    """Log level name used by the CLI (env: MARINA_LOG_LEVEL)."""
    return os.environ.get("MARINA_LOG_LEVEL", "INFO").upper()


# ---------------------------------------------------------------------------
# Record field limits
# ---------------------------------------------------------------------------
NAME_MAX_BYTES = 127     # UTF-8 bytes, longer names are truncated
PLATE_MAX_LEN = 5        # trailor licence plate characters

# ---------------------------------------------------------------------------
# Location tokens as they appear in the inventory file
# ---------------------------------------------------------------------------
LOCATION_TOKENS = {
    "slip":    "SLIP",
    "land":    "LAND",
    "trailor": "TRAILOR",
    "storage": "STORAGE",
}
LOCATION_TOKEN_BY_KIND = {kind: token for token, kind in LOCATION_TOKENS.items()}

CSV_UNKNOWN_KIND = "unknown"
CSV_UNKNOWN_DETAIL = "?"
DISPLAY_UNKNOWN = "unknown location"

# ---------------------------------------------------------------------------
# Monthly rate card — dollars per foot of boat, keyed by location kind
# ---------------------------------------------------------------------------
MONTHLY_RATES = {
    "SLIP":    12.5,
    "LAND":    14.0,
    "TRAILOR": 25.0,
    "STORAGE": 11.2,
}

# ---------------------------------------------------------------------------
# Inventory file format
# ---------------------------------------------------------------------------
CSV_FIELD_COUNT = 5      # name,size,locationKind,locationDetail,amountOwed
CSV_DELIMITER = ","
