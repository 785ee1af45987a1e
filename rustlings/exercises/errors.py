"""Solutions to the exercises on optional values and error handling."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, rejecting anything but digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Scoops of ice cream left at the given hour, or None for an invalid hour."""
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying the typed quantity of items at 5 tokens plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


class CreationError(ValueError):
    """Raised when a value is not a positive, nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be turned into a positive, nonzero integer.

    ``cause`` is either a CreationError or the error from parsing the number.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        number = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err