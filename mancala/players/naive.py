# =========================================================
# --- players_naive.py ---
# =========================================================

import random
from typing import Optional

from mancala.core.position import Position

from .strategy import Strategy

# =========================================================

class First(Strategy):
    """Pick the first playable bowl."""

    def play(self, position: Position) -> Optional[int]:
        options = position.options()
        return options[0] if options else None


class RandomStrategy(Strategy):
    """
    Pick a random playable bowl.

    Attributes:
        rng (random.Random): Random number generator.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a RandomStrategy.

        Args:
            rng (Optional[random.Random]): Optional RNG instance. If None, a new RNG is created.
        """
        self.rng: random.Random = rng or random.Random()

    def __str__(self) -> str:
        return "Random 🎲"

    def play(self, position: Position) -> Optional[int]:
        options = position.options()
        if not options:
            return None
        return self.rng.choice(options)
