"""
Inventory file adapter.

The inventory is a plain comma-separated file, one boat per line, no header
and no quoting:

    name,size,locationKind,locationDetail,amountOwed

e.g. ``Serenity,30.00,slip,12,250.00``. Empty fields collapse (``a,,b`` reads
as two fields), so a name containing a comma cannot be stored. Sizes and
amounts are written with two decimals and read permissively.
"""

from __future__ import annotations

from pathlib import Path

from marina.config.constants import CSV_DELIMITER, CSV_FIELD_COUNT
from marina.models.boat import Boat, create_boat
from marina.models.errors import (
    InventoryFileError,
    MalformedLineError,
    MarinaFullError,
    UnknownLocationError,
)
from marina.models.location import LocationKind, format_location, parse_location_kind
from marina.services.inventory import MarinaInventory
from marina.utils.logger import get_logger
from marina.utils.parsing import parse_float

logger = get_logger(__name__)


def split_fields(line: str) -> list[str]:
    """Split a line on commas, dropping empty fields and the line ending."""
    line = line.rstrip("\r\n")
    return [f for f in line.split(CSV_DELIMITER) if f]


def parse_boat_line(line: str) -> Boat:
    """
    Build a boat from one inventory line.

    Args:
        line: ``name,size,locationKind,locationDetail,amountOwed``

    Returns:
        A new Boat with its location detail set

    Raises:
        MalformedLineError: fewer than five fields
        UnknownLocationError: location token is not slip/land/trailor/storage
    """
    text = line.rstrip("\r\n")
    fields = split_fields(text)
    if len(fields) < CSV_FIELD_COUNT:
        raise MalformedLineError(text, reason="expected 5 fields")

    name, size_str, kind_str, detail_str, owed_str = fields[:CSV_FIELD_COUNT]
    kind = parse_location_kind(kind_str)
    if kind is LocationKind.UNKNOWN:
        raise UnknownLocationError(text, kind_str)

    boat = create_boat(name, parse_float(size_str), parse_float(owed_str), kind)
    boat.set_location_detail(detail_str)
    return boat


def format_boat_line(boat: Boat) -> str:
    """Inverse of parse_boat_line (without the line ending)."""
    return (f"{boat.name}{CSV_DELIMITER}{boat.size:.2f}{CSV_DELIMITER}"
            f"{format_location(boat.location, 'csv')}{CSV_DELIMITER}"
            f"{boat.amount_owed:.2f}")


def decode_line(raw: bytes) -> str:
    """Decode one raw file line as UTF-8; raises MalformedLineError if it is not."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        text = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        raise MalformedLineError(text, reason=f"not valid UTF-8 at byte {e.start}") from e


def load_inventory(path: Path | str, inventory: MarinaInventory) -> int:
    """
    Read boats from ``path`` into ``inventory``.

    Malformed lines, lines that are not valid UTF-8, unknown locations and
    boats that do not fit are logged and skipped; the rest of the file still
    loads.

    Returns:
        Number of boats added to the inventory

    Raises:
        InventoryFileError: if the file cannot be opened
    """
    path = Path(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise InventoryFileError(path, "r", e.strerror or str(e)) from e

    count = 0
    with f:
        for lineno, raw in enumerate(f, start=1):
            try:
                boat = parse_boat_line(decode_line(raw))
            except UnknownLocationError as e:
                logger.warning("Unknown location '%s' on line %d. Skipping line.",
                               e.token, lineno)
                continue
            except MalformedLineError as e:
                logger.warning("Ignoring invalid line %d: '%s'", lineno, e.line)
                continue

            try:
                inventory.insert(boat)
            except MarinaFullError:
                logger.warning("Marina is full; cannot add %r (line %d).", boat.name, lineno)
                continue
            count += 1

    logger.info("Loaded %d boats from %s", count, path)
    return count


def save_inventory(path: Path | str, inventory: MarinaInventory) -> None:
    """
    Write every boat in ``inventory`` to ``path``, replacing its contents.

    Raises:
        InventoryFileError: if the file cannot be opened for writing
    """
    path = Path(path)
    try:
        f = open(path, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise InventoryFileError(path, "w", e.strerror or str(e)) from e

    try:
        with f:
            for boat in inventory:
                f.write(format_boat_line(boat) + "\n")
    except OSError as e:
        raise InventoryFileError(path, "w", e.strerror or str(e)) from e

    logger.info("Saved %d boats to %s", len(inventory), path)
