"""Solutions to the error handling and option exercises."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)
_U16_MAX = 2**16 - 1


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer strictly, with the usual integer parse messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_RE.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a fee of one; raise ValueError for bad input."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32)
    cost = qty * cost_per_item + processing_fee
    if not _I32[0] <= cost <= _I32[1]:
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


class CreationError(ValueError):
    """Base error for a value that is not a positive non-zero integer."""


class NegativeValueError(CreationError):
    """The value is negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroValueError(CreationError):
    """The value is zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeValueError()
        if self.value == 0:
            raise ZeroValueError()


class ParsePosNonzeroError(ValueError):
    """Parsing failed; error holds the parse or creation error behind it."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, _I64)
        return PositiveNonzeroInteger(value)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour: 5 before 22, 0 until 23, None past that."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time of day {time_of_day} is out of range")
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None