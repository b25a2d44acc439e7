# =========================================================
# --- players_heuristic.py ---
# =========================================================

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Callable

from mancala.core.position import Position

# =========================================================

class ValueKind(Enum):
    """Kinds of position values, declared in ascending order."""
    NEGATIVE_INFINITY = -1
    ACTUAL = 0
    POSITIVE_INFINITY = 1


@total_ordering
@dataclass(frozen=True)
class Value:
    """
    Value of a position, ranging from -inf to +inf.

    Finite values carry an integer score; the two infinities bound every
    finite value and are used to open an alpha-beta window.

    Attributes:
        kind (ValueKind): Whether the value is finite or one of the infinities.
        score (int): Score of a finite value, 0 for the infinities.
    """
    kind: ValueKind
    score: int = 0

    @classmethod
    def actual(cls, score: int) -> "Value":
        """Create a finite value."""
        return cls(ValueKind.ACTUAL, int(score))

    @property
    def is_actual(self) -> bool:
        """Return True for finite values."""
        return self.kind is ValueKind.ACTUAL

    def opposite(self) -> "Value":
        """
        Return the value as seen by the other player.

        -inf -> +inf, s -> -s, +inf -> -inf
        """
        if self.kind is ValueKind.ACTUAL:
            return Value.actual(-self.score)
        if self.kind is ValueKind.NEGATIVE_INFINITY:
            return POSITIVE_INFINITY
        return NEGATIVE_INFINITY

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return (self.kind.value, self.score) < (other.kind.value, other.score)

    def __str__(self) -> str:
        if self.kind is ValueKind.ACTUAL:
            return str(self.score)
        return "-inf" if self.kind is ValueKind.NEGATIVE_INFINITY else "+inf"


NEGATIVE_INFINITY = Value(ValueKind.NEGATIVE_INFINITY)
POSITIVE_INFINITY = Value(ValueKind.POSITIVE_INFINITY)


class Heuristic(ABC):
    """A way to evaluate a position without full knowledge of the game tree."""

    @abstractmethod
    def evaluate(self, position: Position) -> Value:
        """
        Estimate the value of a position for the player to move.

        Args:
            position (Position): Position to evaluate.

        Returns:
            Value: Estimated value.
        """
        pass


class FunctionHeuristic(Heuristic):
    """Adapts a plain callable to the Heuristic interface."""

    def __init__(self, func: Callable[[Position], Value]):
        self.func = func

    def evaluate(self, position: Position) -> Value:
        return self.func(position)


class Delta(Heuristic):
    """A simple heuristic that looks at the difference between the captured stones."""

    def evaluate(self, position: Position) -> Value:
        return Value.actual(position.delta())


def delta() -> Delta:
    """Create a delta heuristic."""
    return Delta()
