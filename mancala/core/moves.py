# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass

from .board import Player

# =========================================================

@dataclass(frozen=True)
class Play:
    """
    Represents a single applied play in a Mancala game.

    Attributes:
        player (Player): The player who sowed the bowl.
        bowl (int): Zero-based bowl index, relative to the player's own side.
    """
    player: Player
    bowl: int

    def __str__(self) -> str:
        """Return a human-readable string representation of the play."""
        return f"{self.player} > {self.bowl}"

    def __repr__(self) -> str:
        """Return a formal string representation (same as __str__)."""
        return str(self)
