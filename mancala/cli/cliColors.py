# =========================================================
# --- cli_cliColors.py ---
# =========================================================

from typing import Dict

from mancala.core.board import Player

# =========================================================

class TColor:
    """
    ANSI escape codes for terminal text coloring.

    Attributes:
        BLUE (str): Blue color for the blue player.
        RED (str): Red color for the red player.
        YELLOW (str): Highlight color for stores.
        RESET (str): Reset color to default terminal color.
        BOLD (str): Bold text formatting.
    """
    BLUE: str    = "\033[94m"   # Player BLUE
    RED: str     = "\033[91m"   # Player RED
    YELLOW: str  = "\033[93m"   # Store highlight
    RESET: str   = "\033[0m"    # Reset formatting
    BOLD: str    = "\033[1m"    # Bold text


PLAYER_COLOR: Dict[Player, str] = {
    Player.RED: TColor.RED,
    Player.BLUE: TColor.BLUE,
}

PLAYER: Dict[Player, str] = {
    Player.RED: f"{TColor.RED}(R)ed{TColor.RESET}",
    Player.BLUE: f"{TColor.BLUE}(B)lue{TColor.RESET}",
}
