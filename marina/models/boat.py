"""
Boat record — one entry of the marina inventory.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from marina.config.constants import NAME_MAX_BYTES
from marina.models.location import (
    Location,
    LocationKind,
    UnknownLocation,
    empty_location,
    format_location,
    parse_location,
)


def truncate_name(name: str, max_bytes: int = NAME_MAX_BYTES) -> str:
    """Cut ``name`` to at most ``max_bytes`` UTF-8 bytes without splitting a character."""
    encoded = name.encode("utf-8")
    if len(encoded) <= max_bytes:
        return name
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


@dataclass
class Boat:
    """A boat kept at the marina and the money its owner owes."""
    name: str
    size: float                 # feet
    amount_owed: float = 0.0    # dollars, negative means credit
    location: Location = field(default_factory=UnknownLocation)

    @property
    def kind(self) -> LocationKind:
        return self.location.kind

    def set_location_detail(self, raw: str | None) -> None:
        """Replace the location detail, parsed for the boat's current kind."""
        self.location = parse_location(self.kind, raw)

    def to_display(self) -> str:
        """One inventory listing line."""
        return (f"{self.name:<20} {self.size:2.0f}'    "
                f"{format_location(self.location, 'display')}   "
                f"Owes ${self.amount_owed:.2f}")


def create_boat(name: str, size: float, amount_owed: float, kind: LocationKind) -> Boat:
    """
    Create a boat with an empty location detail for ``kind``.

    Names longer than NAME_MAX_BYTES UTF-8 bytes are truncated silently.
    Size and amount owed are stored as given.
    """
    return Boat(
        name=truncate_name(name),
        size=float(size),
        amount_owed=float(amount_owed),
        location=empty_location(kind),
    )
