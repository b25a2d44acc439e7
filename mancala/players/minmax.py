# =========================================================
# --- players_minmax.py ---
# =========================================================

import logging
from typing import Optional, Tuple

from mancala.core.position import Position

from .analyzer import Analyzer
from .heuristic import NEGATIVE_INFINITY, Value
from .strategy import Strategy

logger = logging.getLogger(__name__)

# =========================================================

def minmax(position: Position, analyzer: Analyzer, ply: int = 0) -> Tuple[Optional[int], Value]:
    """
    Exhaustive negamax search.

    Every call values the position for the player to move; a child reached by
    passing the turn is therefore negated before it is compared.

    Args:
        position (Position): Position to search.
        analyzer (Analyzer): Telemetry accumulator for this search.
        ply (int): Distance from the root.

    Returns:
        Tuple[Optional[int], Value]: Best bowl (None when finished) and its value.
    """
    analyzer.visit(ply)
    if position.finished():
        return None, Value.actual(position.score())

    best_bowl: Optional[int] = None
    best_value = NEGATIVE_INFINITY
    for bowl in position.options():
        child = position.play(bowl)
        assert child is not None, "option to be playable"
        _, value = minmax(child, analyzer, ply + 1)
        if child.player != position.player:
            value = value.opposite()
        if value > best_value:
            best_bowl = bowl
            best_value = value
    return best_bowl, best_value


class MinMax(Strategy):
    """
    Pick the option that maximizes the minimum win.

    Attributes:
        analyzer (Analyzer): Telemetry of the most recent search.
    """

    def __init__(self):
        self.analyzer: Analyzer = Analyzer()

    def search(self, position: Position) -> Tuple[Optional[int], Value]:
        """
        Search the complete game tree below a position.

        Args:
            position (Position): Root position.

        Returns:
            Tuple[Optional[int], Value]: Best bowl and its value for the player to move.
        """
        self.analyzer = Analyzer()
        bowl, value = minmax(position, self.analyzer)
        logger.debug("minmax chose %s (value %s, %s)", bowl, value, self.analyzer)
        return bowl, value

    def play(self, position: Position) -> Optional[int]:
        bowl, _ = self.search(position)
        return bowl
