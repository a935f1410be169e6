"""Abilities a guesser can spend to change the points of a round."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "AbilityStrategy",
    "DoublePointsStrategy",
    "TriplePointsStrategy",
    "NullifyOpponentPointsStrategy",
]


class AbilityStrategy(ABC):
    """An ability that turns the points a player earned into new points."""

    name: str = ""

    @abstractmethod
    def modify_points(self, base_points: int) -> int:
        """Return the points after the ability is applied."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class DoublePointsStrategy(AbilityStrategy):
    """Doubles the points of the player who uses it."""

    name = "2x Points"

    def modify_points(self, base_points: int) -> int:
        return base_points * 2


class TriplePointsStrategy(AbilityStrategy):
    """Triples the points of the player who uses it."""

    name = "3x Points"

    def modify_points(self, base_points: int) -> int:
        return base_points * 3


class NullifyOpponentPointsStrategy(AbilityStrategy):
    """Leaves the user's points alone and wipes out the opponent's."""

    name = "Null Opponent's Points"

    def modify_points(self, base_points: int) -> int:
        return base_points

    def return_to_zero(self) -> int:
        """Return the points the opponent is left with."""
        return 0