# =========================================================
# --- players_analyzer.py ---
# =========================================================

from dataclasses import dataclass

# =========================================================

@dataclass
class Analyzer:
    """
    Telemetry collected during a tree search.

    One analyzer is created per search and passed down the recursion; it never
    influences which bowl is selected.

    Attributes:
        nodes (int): Number of positions visited.
        max_depth (int): Deepest ply reached, the root being ply 0.
    """
    nodes: int = 0
    max_depth: int = 0

    def visit(self, ply: int) -> None:
        """Record a visit of a position at the given ply."""
        self.nodes += 1
        if ply > self.max_depth:
            self.max_depth = ply

    def __str__(self) -> str:
        return f"nodes: {self.nodes} max depth: {self.max_depth}"
