# =========================================================
# --- players_alphabeta.py ---
# =========================================================

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from mancala.core.position import Position

from .analyzer import Analyzer
from .depth import Depth, DepthLimitedSearch
from .heuristic import NEGATIVE_INFINITY, POSITIVE_INFINITY, Heuristic, Value, delta
from .strategy import Strategy

logger = logging.getLogger(__name__)

# =========================================================

@dataclass
class AlphaBetaConfig:
    """
    Configuration of an alpha-beta search.

    Attributes:
        depth (Depth): Search depth budget of at least one ply. Defaults to no limit.
        heuristic (Heuristic): Evaluation used when the budget runs out. Defaults to delta.

    Raises:
        ValueError: If the depth is zero, since the root would never be expanded.
    """
    depth: Depth = field(default_factory=Depth.infinite)
    heuristic: Heuristic = field(default_factory=delta)

    def __post_init__(self) -> None:
        if self.depth.is_zero():
            raise ValueError("AlphaBeta needs a depth of at least one ply")


def alpha_beta(
    position: Position,
    alpha: Value,
    beta: Value,
    depth: Depth,
    heuristic: Heuristic,
    analyzer: Analyzer,
    ply: int = 0,
) -> Tuple[Optional[int], Value]:
    """
    Negamax search with alpha-beta pruning.

    Finished positions are scored exactly; unfinished positions at depth zero
    are valued by the heuristic. When a play passes the turn, the child is
    searched with the window (-beta, -alpha) and its value negated.

    Args:
        position (Position): Position to search.
        alpha (Value): Lower bound of useful values for the player to move.
        beta (Value): Upper bound of useful values for the player to move.
        depth (Depth): Remaining depth budget.
        heuristic (Heuristic): Evaluation for depth-limited leaves.
        analyzer (Analyzer): Telemetry accumulator for this search.
        ply (int): Distance from the root.

    Returns:
        Tuple[Optional[int], Value]: Best bowl (None at a leaf) and its value.
    """
    analyzer.visit(ply)
    if position.finished():
        return None, Value.actual(position.score())
    if depth.is_zero():
        return None, heuristic.evaluate(position)

    best_bowl: Optional[int] = None
    best_value = NEGATIVE_INFINITY
    for bowl in position.options():
        child = position.play(bowl)
        assert child is not None, "option to be playable"
        if child.player == position.player:
            _, value = alpha_beta(child, alpha, beta, depth.decrement(), heuristic, analyzer, ply + 1)
        else:
            _, value = alpha_beta(
                child, beta.opposite(), alpha.opposite(), depth.decrement(), heuristic, analyzer, ply + 1
            )
            value = value.opposite()
        if value > best_value:
            best_bowl = bowl
            best_value = value
        alpha = max(alpha, value)
        if alpha >= beta:
            break
    return best_bowl, best_value


class AlphaBeta(Strategy, DepthLimitedSearch):
    """
    Pick the option that maximizes the minimum win, pruning sub-trees along the way.

    Attributes:
        config (AlphaBetaConfig): Depth budget and heuristic.
        analyzer (Analyzer): Telemetry of the most recent search.
    """

    def __init__(self, config: Optional[AlphaBetaConfig] = None):
        self.config: AlphaBetaConfig = config or AlphaBetaConfig()
        self.analyzer: Analyzer = Analyzer()

    def __str__(self) -> str:
        return f"AlphaBeta(depth={self.config.depth})"

    def search(self, position: Position, depth: Depth) -> Tuple[Optional[int], Value]:
        self.analyzer = Analyzer()
        bowl, value = alpha_beta(
            position,
            NEGATIVE_INFINITY,
            POSITIVE_INFINITY,
            depth,
            self.config.heuristic,
            self.analyzer,
        )
        logger.debug("alpha-beta at depth %s chose %s (value %s, %s)", depth, bowl, value, self.analyzer)
        return bowl, value

    def play(self, position: Position) -> Optional[int]:
        bowl, _ = self.search(position, self.config.depth)
        return bowl
