# =========================================================
# --- players_human.py ---
# =========================================================

from typing import Callable, Optional

from mancala.core.position import Position

from .strategy import Strategy

# =========================================================

class User(Strategy):
    """
    Human-controlled strategy.

    Attributes:
        name (str): Display name.
        input_func (Callable[[str], str]): Function that prompts for a line of input.
        output_func (Callable[[str], None]): Function that shows messages to the user.
        show_position (Optional[Callable[[Position], None]]): Renders the position before asking.
    """

    def __init__(
        self,
        name: str = "Human Player",
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        show_position: Optional[Callable[[Position], None]] = None,
    ):
        self.name: str = name
        self.input_func = input_func
        self.output_func = output_func
        self.show_position = show_position

    def __str__(self) -> str:
        return self.name

    def play(self, position: Position) -> Optional[int]:
        """
        Ask for bowls until a playable one is entered.

        Args:
            position (Position): Current position.

        Returns:
            Optional[int]: The chosen bowl, or None if nothing is playable.
        """
        options = position.options()
        if not options:
            return None
        if self.show_position:
            self.show_position(position)
        while True:
            answer = self.input_func(f"enter a play {options}: ").strip()
            try:
                bowl = int(answer)
            except ValueError:
                self.output_func("enter a bowl.")
                continue
            if bowl in options:
                return bowl
            self.output_func("not an option")
