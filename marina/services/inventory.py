"""
Marina inventory store.

Keeps the boats of one marina in ascending name order, packed at the front
of a capacity-bounded sequence:

    - names never decrease from front to back (plain code-point comparison)
    - a boat with the same name as existing boats goes after them
    - the store never holds more than ``capacity`` boats; an insert into a
      full store is rejected and the caller keeps the boat

Lookup by name is ASCII case-insensitive and returns the first match in
order. Monthly billing and payments mutate the stored boats in place.
"""

from __future__ import annotations

from typing import Iterator

from marina.config.constants import MONTHLY_RATES, default_capacity
from marina.models.boat import Boat
from marina.models.errors import (
    BoatNotFoundError,
    InvalidPaymentError,
    MarinaFullError,
    OverpaymentError,
)
from marina.utils.logger import get_logger

logger = get_logger(__name__)

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold_name(name: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return name.translate(_ASCII_FOLD)


def monthly_charge(boat: Boat) -> float | None:
    """Charge for one month at the boat's location, or None if it is unknown."""
    rate = MONTHLY_RATES.get(boat.kind.value)
    if rate is None:
        return None
    return rate * boat.size


class MarinaInventory:
    """Ordered, capacity-bounded collection of boats."""

    def __init__(self, capacity: int | None = None):
        if capacity is None:
            capacity = default_capacity()
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._boats: list[Boat] = []

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        """Occupied boats, front to back."""
        return iter(list(self._boats))

    def __getitem__(self, index: int) -> Boat:
        if not 0 <= index < len(self._boats):
            raise IndexError(f"no boat at index {index}")
        return self._boats[index]

    def __repr__(self) -> str:
        return f"MarinaInventory(boats={len(self._boats)}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    # ── Ordering ──────────────────────────────────────────────────────

    def insert(self, boat: Boat) -> int:
        """
        Insert a boat at its ordered position.

        Args:
            boat: Boat to store

        Returns:
            Index the boat was placed at

        Raises:
            MarinaFullError: if the store is at capacity (nothing changes)
        """
        if self.is_full:
            raise MarinaFullError(self._capacity)

        index = 0
        while index < len(self._boats):
            if boat.name < self._boats[index].name:
                break
            index += 1

        self._boats.insert(index, boat)
        logger.debug("Inserted %r at index %d", boat.name, index)
        self._check_invariants()
        return index

    def remove(self, index: int) -> Boat | None:
        """
        Remove the boat at ``index`` and close the gap.

        An index outside the occupied range is logged and ignored.
        """
        if index < 0 or index >= self._capacity:
            logger.warning("No boat at index %d (capacity %d)", index, self._capacity)
            return None
        if index >= len(self._boats):
            logger.warning("No boat at index %d.", index)
            return None

        boat = self._boats.pop(index)
        logger.debug("Removed %r from index %d", boat.name, index)
        self._check_invariants()
        return boat

    def find_by_name(self, name: str) -> int | None:
        """Index of the first boat whose name matches ignoring ASCII case."""
        wanted = fold_name(name)
        for index, boat in enumerate(self._boats):
            if fold_name(boat.name) == wanted:
                return index
        return None

    def remove_by_name(self, name: str) -> Boat:
        """Remove the first boat matching ``name``; raises BoatNotFoundError."""
        index = self.find_by_name(name)
        if index is None:
            raise BoatNotFoundError(name)
        return self.remove(index)

    # ── Billing ───────────────────────────────────────────────────────

    def apply_monthly_charges(self) -> list[Boat]:
        """
        Add one month of charges to every boat.

        Returns:
            Boats that were skipped because their location is unknown
        """
        skipped = []
        for boat in self._boats:
            charge = monthly_charge(boat)
            if charge is None:
                logger.info("Skipping monthly charge for %r: location unknown", boat.name)
                skipped.append(boat)
                continue
            boat.amount_owed += charge
        logger.info(
            "Applied monthly charges to %d boats (%d skipped)",
            len(self._boats) - len(skipped), len(skipped),
        )
        return skipped

    def apply_payment(self, index: int, amount: float) -> float:
        """
        Record a payment against the boat at ``index``.

        Args:
            index: Position of the boat in the store
            amount: Dollars paid

        Returns:
            The new amount owed (exactly 0.0 when paid in full)

        Raises:
            OverpaymentError: if amount exceeds what is owed
            InvalidPaymentError: if amount is negative
        """
        boat = self[index]
        if amount > boat.amount_owed:
            raise OverpaymentError(amount, boat.amount_owed)
        if amount < 0:
            raise InvalidPaymentError(amount)
        boat.amount_owed -= amount
        logger.info("Payment of $%.2f from %r, now owes $%.2f",
                    amount, boat.name, boat.amount_owed)
        return boat.amount_owed

    # ── Internal ──────────────────────────────────────────────────────

    def _check_invariants(self) -> None:
        assert len(self._boats) <= self._capacity, "store exceeds capacity"
        assert all(b is not None for b in self._boats), "gap in occupied slots"
        assert all(
            self._boats[i].name <= self._boats[i + 1].name
            for i in range(len(self._boats) - 1)
        ), "boats out of name order"

