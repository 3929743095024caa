"""Solutions to the vector and hash map exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import MutableMapping

_U8_MAX = 255
_SCORE_FIELDS = 4


class Fruit(Enum):
    """Kinds of fruit that can go into the basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError("goal count does not fit in 8 bits")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count {text!r} does not fit in 8 bits")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < _SCORE_FIELDS:
            raise ValueError(f"malformed result line {line!r}")
        team_1, team_2, goals_1, goals_2 = fields[:_SCORE_FIELDS]
        score_1 = _parse_goals(goals_1)
        score_2 = _parse_goals(goals_2)
        scores.setdefault(team_1, Team()).record(score_1, score_2)
        scores.setdefault(team_2, Team()).record(score_2, score_1)
    return scores


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]