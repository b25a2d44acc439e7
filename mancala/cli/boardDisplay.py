# =========================================================
# --- cli_boardDisplay.py ---
# =========================================================

import os
from typing import List

from mancala.core.board import MOVER, OPPONENT
from mancala.core.position import Position

from .cliColors import TColor, PLAYER_COLOR

# =========================================================

def clear_terminal() -> None:
    """Wipe the terminal before the board is redrawn."""
    os.system("cls" if os.name == "nt" else "clear")


class BoardDisplay:
    """
    Class for displaying the Mancala board in the terminal.

    The opponent's side is drawn on top, reversed so that sowing runs
    counter-clockwise, with the opponent's store on the left. The mover's side
    is drawn at the bottom with the mover's store on the right.

    Attributes:
        position (Position): The position to draw.
        clear_screen (bool): Whether to clear the screen before drawing.
        field_size (int): Width of a bowl for formatting.
        use_color (bool): Whether to use colored output.
    """

    def __init__(self, position: Position, clear_screen: bool = True, use_color: bool = True) -> None:
        """
        Initializes the BoardDisplay.

        Args:
            position (Position): The position to draw.
            clear_screen (bool, optional): Whether to clear the screen before drawing. Defaults to True.
            use_color (bool, optional): Whether to use colored output. Defaults to True.
        """
        self.position: Position = position
        self.clear_screen: bool = clear_screen
        self.field_size: int = 2  # Width of each bowl for alignment
        self.use_color: bool = use_color

    def _paint(self, text: str, color: str) -> str:
        """Wrap text in a color if colored output is enabled."""
        return f"{color}{text}{TColor.RESET}" if self.use_color else text

    def _bowls_str(self, bowls) -> str:
        """Format a row of bowls."""
        return " ".join(str(int(stones)).rjust(self.field_size) for stones in bowls)

    def rows(self) -> List[str]:
        """
        Render the board as two text rows.

        Returns:
            List[str]: The opponent's row followed by the mover's row.
        """
        position = self.position
        mover_color = PLAYER_COLOR[position.player]
        opponent_color = PLAYER_COLOR[position.player.other]
        store_width = max(len(str(c)) for c in position.capture)

        far = self._bowls_str(position.far_bowls[::-1])
        own = self._bowls_str(position.mover_bowls)
        their_store = str(position.capture[OPPONENT]).rjust(store_width)
        my_store = str(position.capture[MOVER])

        top = f"{self._paint(their_store, TColor.YELLOW)} | {self._paint(far, opponent_color)} |"
        bottom = f"{' ' * store_width} | {self._paint(own, mover_color)} | {self._paint(my_store, TColor.YELLOW)}"
        return [top, bottom]

    def draw_all(self) -> None:
        """Draws the entire board."""
        if self.clear_screen:
            clear_terminal()
        print(f"{TColor.BOLD + '--- Board ---' + TColor.RESET if self.use_color else '--- Board ---'}")
        for row in self.rows():
            print(row)
