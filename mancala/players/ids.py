# =========================================================
# --- players_ids.py ---
# =========================================================

import logging
from typing import Optional

from mancala.core.position import Position

from .depth import Depth, DepthLimitedSearch
from .strategy import Strategy

logger = logging.getLogger(__name__)

# =========================================================

class IterativeDeepening(Strategy):
    """
    Iterative deepening search.

    Runs a depth-limited search repeatedly with increasing depth limits and
    plays the bowl found by the deepest search that produced one.

    Attributes:
        searcher (DepthLimitedSearch): Search run at each depth.
        max_depth (Depth): Deepest limit to search.
    """

    def __init__(self, searcher: DepthLimitedSearch, max_depth: Depth):
        if max_depth.is_infinite or max_depth.is_zero():
            raise ValueError("Iterative deepening needs a finite maximum depth of at least one ply")
        self.searcher: DepthLimitedSearch = searcher
        self.max_depth: Depth = max_depth

    def __str__(self) -> str:
        return f"IterativeDeepening(max_depth={self.max_depth})"

    def play(self, position: Position) -> Optional[int]:
        best_bowl: Optional[int] = None
        for depth in Depth.limited(1).to(self.max_depth):
            bowl, value = self.searcher.search(position, depth)
            if bowl is not None:
                best_bowl = bowl
            logger.debug("depth %s: bowl %s, value %s", depth, bowl, value)
        return best_bowl
