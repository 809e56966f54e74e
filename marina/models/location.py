"""
Boat location model.

A boat is kept in exactly one kind of location and each kind carries its own
detail:

    slip      -> slip number      (1..85)
    land      -> bay letter       (A..Z)
    trailor   -> licence plate    (up to 5 characters)
    storage   -> storage shed     (1..50)

The ranges are documented, not enforced. ``UnknownLocation`` has no detail;
boats may hold it but it is never billed. Each variant is its own frozen
dataclass, so a location's kind and its detail cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from marina.config.constants import (
    CSV_DELIMITER,
    CSV_UNKNOWN_DETAIL,
    CSV_UNKNOWN_KIND,
    DISPLAY_UNKNOWN,
    LOCATION_TOKEN_BY_KIND,
    LOCATION_TOKENS,
    PLATE_MAX_LEN,
)
from marina.utils.parsing import parse_int


class LocationKind(Enum):
    SLIP = "SLIP"
    LAND = "LAND"
    TRAILOR = "TRAILOR"
    STORAGE = "STORAGE"
    UNKNOWN = "UNKNOWN"

    @property
    def token(self) -> str:
        """Token used for this kind in the inventory file."""
        return LOCATION_TOKEN_BY_KIND.get(self.value, CSV_UNKNOWN_KIND)


@dataclass(frozen=True)
class SlipLocation:
    slip_number: int = 0
    kind: ClassVar[LocationKind] = LocationKind.SLIP

    def detail_token(self) -> str:
        return str(self.slip_number)

    def display(self) -> str:
        return f"slip   # {self.slip_number}"


@dataclass(frozen=True)
class LandLocation:
    bay_letter: str = ""
    kind: ClassVar[LocationKind] = LocationKind.LAND

    def detail_token(self) -> str:
        return self.bay_letter

    def display(self) -> str:
        return f"land {self.bay_letter}"


@dataclass(frozen=True)
class TrailorLocation:
    plate: str = ""
    kind: ClassVar[LocationKind] = LocationKind.TRAILOR

    def detail_token(self) -> str:
        return self.plate

    def display(self) -> str:
        return f"trailor {self.plate}"


@dataclass(frozen=True)
class StorageLocation:
    shed_number: int = 0
    kind: ClassVar[LocationKind] = LocationKind.STORAGE

    def detail_token(self) -> str:
        return str(self.shed_number)

    def display(self) -> str:
        return f"storage # {self.shed_number}"


@dataclass(frozen=True)
class UnknownLocation:
    kind: ClassVar[LocationKind] = LocationKind.UNKNOWN

    def detail_token(self) -> str:
        return CSV_UNKNOWN_DETAIL

    def display(self) -> str:
        return DISPLAY_UNKNOWN


Location = Union[SlipLocation, LandLocation, TrailorLocation, StorageLocation, UnknownLocation]

_EMPTY_LOCATIONS: dict[LocationKind, Location] = {
    LocationKind.SLIP: SlipLocation(),
    LocationKind.LAND: LandLocation(),
    LocationKind.TRAILOR: TrailorLocation(),
    LocationKind.STORAGE: StorageLocation(),
    LocationKind.UNKNOWN: UnknownLocation(),
}


def parse_location_kind(text: str | None) -> LocationKind:
    """
    Map a location token to its kind.

    Only the exact lowercase tokens ``slip``, ``land``, ``trailor`` and
    ``storage`` are recognised. Anything else is ``LocationKind.UNKNOWN``;
    callers decide whether to reject it.
    """
    kind = LOCATION_TOKENS.get(text or "")
    if kind is None:
        return LocationKind.UNKNOWN
    return LocationKind(kind)


def empty_location(kind: LocationKind) -> Location:
    """Zero-valued location for ``kind`` (slip 0, bay "", plate "", shed 0)."""
    return _EMPTY_LOCATIONS[kind]


def parse_location(kind: LocationKind, raw: str | None) -> Location:
    """
    Build the location variant for ``kind`` from a raw detail string.

    Args:
        kind: Location kind the detail belongs to
        raw: Detail text as read from the file or the operator

    Returns:
        Slip/storage numbers parsed from the leading integer (0 if malformed),
        the first character for a land bay, the first PLATE_MAX_LEN
        characters for a trailor plate. Unknown ignores ``raw``.
    """
    raw = raw or ""
    if kind is LocationKind.SLIP:
        return SlipLocation(parse_int(raw))
    if kind is LocationKind.LAND:
        return LandLocation(raw[:1])
    if kind is LocationKind.TRAILOR:
        return TrailorLocation(raw[:PLATE_MAX_LEN])
    if kind is LocationKind.STORAGE:
        return StorageLocation(parse_int(raw))
    return UnknownLocation()


def format_location(location: Location, destination: str = "display") -> str:
    """
    Render a location for the operator or for the inventory file.

    ``destination="display"`` gives e.g. ``slip   # 12`` or
    ``unknown location``; ``destination="csv"`` gives the two file fields,
    e.g. ``slip,12`` or ``unknown,?``.
    """
    if destination == "display":
        return location.display()
    if destination == "csv":
        return f"{location.kind.token}{CSV_DELIMITER}{location.detail_token()}"
    raise ValueError(f"Unknown destination: {destination}")
