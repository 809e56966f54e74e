"""
Exception types raised by the inventory store and the file adapter.

Every failure is raised where it is detected and turned into an operator
message by the session loop or the CLI.
"""


class MarinaError(Exception):
    """Base class for all marina inventory errors."""


class MarinaFullError(MarinaError):
    """The store already holds as many boats as its capacity allows."""

    def __init__(self, capacity: int):
        super().__init__(f"Marina is full ({capacity} boats)")
        self.capacity = capacity


class BoatNotFoundError(MarinaError, LookupError):
    """No boat matches the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Boat not found: {name!r}")
        self.name = name


class MalformedLineError(MarinaError, ValueError):
    """An inventory line does not have the expected shape."""

    def __init__(self, line: str, reason: str = "invalid line"):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class UnknownLocationError(MalformedLineError):
    """The location token of an inventory line is not recognised."""

    def __init__(self, line: str, token: str):
        super().__init__(line, reason=f"unknown location {token!r}")
        self.token = token


class OverpaymentError(MarinaError, ValueError):
    """A payment exceeds the amount currently owed."""

    def __init__(self, amount: float, amount_owed: float):
        super().__init__(
            f"That is more than the amount owed, ${amount_owed:.2f}"
        )
        self.amount = amount
        self.amount_owed = amount_owed


class InvalidPaymentError(MarinaError, ValueError):
    """A payment amount is negative."""

    def __init__(self, amount: float):
        super().__init__(f"Payment amount must not be negative, got {amount:.2f}")
        self.amount = amount


class InventoryFileError(MarinaError):
    """The inventory file cannot be opened for reading or writing."""

    def __init__(self, path, mode: str, reason: str = ""):
        action = "reading" if mode == "r" else "writing"
        msg = f"cannot open file '{path}' for {action}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = path
        self.mode = mode
