# =========================================================
# --- core_board.py ---
# =========================================================

from enum import Enum

# =========================================================

"""
Board-related constants and player identities for Mancala.

This module defines:
- Default board dimensions
- The two players and their display names
"""

#: Default number of bowls on each side of the board
DEFAULT_BOWLS = 6

#: Default number of stones placed in every bowl of a fresh board
DEFAULT_STONES = 4

#: Index of the mover's store in a capture pair
#: Index 0 = player to move, Index 1 = opponent
MOVER = 0
OPPONENT = 1


class Player(Enum):
    """
    The two sides of a Mancala game.

    Attributes:
        RED: The player that moves first in a fresh game.
        BLUE: The player that moves second.
    """
    RED = 0
    BLUE = 1

    @property
    def other(self) -> "Player":
        """Return the opposing player."""
        return Player.BLUE if self is Player.RED else Player.RED

    def __str__(self) -> str:
        """Return the lowercase player name."""
        return self.name.lower()
