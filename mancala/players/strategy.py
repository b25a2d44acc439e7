# =========================================================
# --- players_strategy.py ---
# =========================================================

from abc import ABC, abstractmethod
from typing import Optional

from mancala.core.position import Position

# =========================================================

class Strategy(ABC):
    """
    Abstract base class for a way of playing Mancala.

    A strategy only holds its own configuration and telemetry; nothing kept
    between calls influences which bowl is chosen.
    """

    @abstractmethod
    def play(self, position: Position) -> Optional[int]:
        """
        Select a bowl to sow.

        Args:
            position (Position): Current, unfinished position.

        Returns:
            Optional[int]: Selected bowl, or None if no play is possible.
        """
        pass

    def __str__(self) -> str:
        """Return the strategy class name."""
        return type(self).__name__
