"""Solutions to the three quizzes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(Enum):
    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """An operation applied to a string by transformer."""

    kind: CommandKind
    times: int = 0

    @staticmethod
    def uppercase() -> Command:
        return Command(CommandKind.UPPERCASE)

    @staticmethod
    def trim() -> Command:
        return Command(CommandKind.TRIM)

    @staticmethod
    def append(times: int) -> Command:
        if times < 0:
            raise ValueError("append count must not be negative")
        return Command(CommandKind.APPEND, times)


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )