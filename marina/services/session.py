"""
Interactive operator session.

Reads one command per line and dispatches on its first character
(case-insensitive):

    I  list the inventory
    A  add a boat from one CSV-shaped line
    R  remove a boat by name
    P  record a payment for a boat
    M  apply the monthly charges
    X  exit (end of input does the same)

Every failure is reported to the operator and the session carries on.
"""

from __future__ import annotations

import sys
from typing import Callable

from marina.models.errors import (
    BoatNotFoundError,
    InvalidPaymentError,
    MalformedLineError,
    MarinaFullError,
    OverpaymentError,
    UnknownLocationError,
)
from marina.services.inventory import MarinaInventory
from marina.storage.csv_store import parse_boat_line
from marina.utils.logger import get_logger
from marina.utils.parsing import parse_float

logger = get_logger(__name__)

MENU = "\n(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it :"


class MarinaSession:
    """Drives one inventory through operator commands."""

    def __init__(self, inventory: MarinaInventory, input_fn: Callable[[], str] = input):
        self.inventory = inventory
        self._input = input_fn
        self.running = False
        self._handlers = {
            "i": self.list_inventory,
            "a": self.add_boat,
            "r": self.remove_boat,
            "p": self.record_payment,
            "m": self.apply_month,
            "x": self.exit,
        }

    def _read_line(self) -> str | None:
        try:
            line = self._input()
        except EOFError:
            return None
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str | None:
        print(prompt, end="", flush=True)
        return self._read_line()

    def run(self) -> None:
        """Prompt for commands until the operator exits or input ends."""
        self.running = True
        while self.running:
            print(MENU)
            line = self._read_line()
            if line is None:
                logger.debug("End of input, leaving session")
                break
            command = line.strip()
            if not command:
                continue
            self.dispatch(command[0])
        self.running = False

    def dispatch(self, command: str) -> None:
        handler = self._handlers.get(command.lower())
        if handler is None:
            print(f"Unrecognized command '{command}'. Please try again.")
            return
        handler()

    # ── Commands ──────────────────────────────────────────────────────

    def list_inventory(self) -> None:
        for boat in self.inventory:
            print(boat.to_display())

    def add_boat(self) -> None:
        line = self._ask("\nPlease enter the boat data in CSV format : ")
        if line is None:
            return
        try:
            boat = parse_boat_line(line)
        except UnknownLocationError as e:
            print(f"Unknown location: {e.token}")
            return
        except MalformedLineError:
            print("Invalid input format.")
            return
        except MemoryError:
            print("Boat creation failed.")
            return

        try:
            self.inventory.insert(boat)
        except MarinaFullError:
            print("Marina is full. Boat not added.")
            return
        logger.debug("Added %r", boat.name)

    def remove_boat(self) -> None:
        name = self._ask("\nPlease enter the boat name for removal: ")
        if name is None:
            return
        try:
            self.inventory.remove_by_name(name)
        except BoatNotFoundError:
            print("Boat not found.")
            return
        print("Boat removed.")

    def record_payment(self) -> None:
        name = self._ask("\nPlease enter the boat name for payment: ")
        if name is None:
            return
        index = self.inventory.find_by_name(name)
        if index is None:
            print("Boat not found.")
            return

        amount_text = self._ask("Please enter the amount to be paid: ")
        if amount_text is None:
            return
        try:
            owed = self.inventory.apply_payment(index, parse_float(amount_text))
        except OverpaymentError as e:
            print(str(e), file=sys.stderr)
            return
        except InvalidPaymentError as e:
            print(str(e), file=sys.stderr)
            return
        print(f"Payment processed. New amount owed: ${owed:.2f}")

    def apply_month(self) -> None:
        for _ in self.inventory.apply_monthly_charges():
            print("The boat's location is unknown.")

    def exit(self) -> None:
        print("Exiting program.")
        self.running = False
