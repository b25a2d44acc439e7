# =========================================================
# --- players_depth.py ---
# =========================================================

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Iterator, Optional, Tuple

from mancala.core.position import Position

from .heuristic import Value

# =========================================================

@total_ordering
@dataclass(frozen=True)
class Depth:
    """
    Remaining search depth of a tree strategy.

    Attributes:
        plies (Optional[int]): Number of plies left, or None for no limit.
    """
    plies: Optional[int] = None

    @classmethod
    def infinite(cls) -> "Depth":
        """No limit on the search depth."""
        return cls(None)

    @classmethod
    def limited(cls, plies: int) -> "Depth":
        """Limit the search depth to a number of plies."""
        if plies < 0:
            raise ValueError(f"Depth cannot be negative, got {plies}")
        return cls(plies)

    @property
    def is_infinite(self) -> bool:
        return self.plies is None

    def is_zero(self) -> bool:
        """Determine if we can go any deeper."""
        return self.plies == 0

    def decrement(self) -> "Depth":
        """Return the preceding depth, saturating at zero."""
        if self.plies is None:
            return self
        return Depth(max(self.plies - 1, 0))

    def increment(self) -> "Depth":
        """Return the succeeding depth."""
        if self.plies is None:
            return self
        return Depth(self.plies + 1)

    def to(self, limit: "Depth") -> Iterator["Depth"]:
        """
        Visit every depth between self and limit, both inclusive.

        Starting from an infinite depth visits it once. A finite depth never
        increments into infinity, so that range is rejected.

        Args:
            limit (Depth): Last depth to visit.

        Yields:
            Depth: Consecutive depths in ascending order.

        Raises:
            ValueError: If self is finite and limit is infinite.
        """
        if limit.is_infinite and not self.is_infinite:
            raise ValueError(f"Cannot count from depth {self} up to an infinite depth")
        current = self
        while current <= limit:
            yield current
            if current.is_infinite:
                return
            current = current.increment()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Depth):
            return NotImplemented
        # any limit is shallower than no limit
        return (self.is_infinite, self.plies or 0) < (other.is_infinite, other.plies or 0)

    def __str__(self) -> str:
        return "inf" if self.plies is None else str(self.plies)


class DepthLimitedSearch(ABC):
    """A search strategy that can be limited by depth."""

    @abstractmethod
    def search(self, position: Position, depth: Depth) -> Tuple[Optional[int], Value]:
        """
        Search up to a number of plies.

        Args:
            position (Position): Root of the search.
            depth (Depth): Search depth budget.

        Returns:
            Tuple[Optional[int], Value]: Best bowl (None at a leaf) and its value.
        """
        pass
