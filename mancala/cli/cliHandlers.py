# =========================================================
# --- cli_cliHandlers.py ---
# =========================================================

import time
from typing import Any, Dict, Callable

from mancala.core.board import Player

from .cliColors import PLAYER
from .boardDisplay import BoardDisplay

# =========================================================

class CLIHandlers:
    """
    Handles CLI events for Mancala bout visualization.

    Attributes:
        delay (float): Delay in seconds between event prints to allow user to follow the game.
        clear_screen (bool): Whether the board display clears the terminal.
    """

    def __init__(self, delay: float = 1.0, clear_screen: bool = False):
        """
        Initialize the CLI handler with optional delay.

        Args:
            delay (float): Sleep duration between events (default 1.0 seconds).
            clear_screen (bool): Clear the terminal before drawing the board.
        """
        self.delay: float = delay
        self.clear_screen: bool = clear_screen

    def _pause(self) -> None:
        """Pause so the viewer can follow the bout."""
        if self.delay > 0:
            time.sleep(self.delay)

    def _draw(self, position) -> None:
        BoardDisplay(position, clear_screen=self.clear_screen).draw_all()

    # ---------------- Event Handlers ----------------
    def handle_bout_start(self, event: Dict[str, Any]) -> None:
        """
        Handle the start of a bout.

        Args:
            event (dict): Event data with 'turn' and 'position'.
        """
        print(f"\n=> {PLAYER[event['turn']]} starts.")

    def handle_turn_start(self, event: Dict[str, Any]) -> None:
        """
        Handle start of a turn: display board and current player.

        Args:
            event (dict): Event data with 'turn' and 'position'.
        """
        self._draw(event["position"])
        print(f"\nTurn: {PLAYER[event['turn']]}")

    def handle_chosen_play(self, event: Dict[str, Any]) -> None:
        """
        Handle event when a strategy has chosen a bowl.

        Args:
            event (dict): Event data with 'turn', 'bowl' and 'strategy'.
        """
        print(f"{PLAYER[event['turn']]} ({event['strategy']}) played {event['bowl']}")
        self._pause()

    def handle_problem(self, event: Dict[str, Any]) -> None:
        """
        Handle a bout that ended without a finished game.

        Args:
            event (dict): Event data with 'problem'.
        """
        print(f"\nBout aborted: {event['problem']}\n")

    def handle_game_over(self, event: Dict[str, Any]) -> None:
        """
        Handle game over event: display final board and score.

        Args:
            event (dict): Event data with 'position', 'score' and 'plays'.
        """
        self._draw(event["position"])
        score = event["score"]
        if score > 0:
            outcome = f"Winner: {PLAYER[Player.RED]}"
        elif score < 0:
            outcome = f"Winner: {PLAYER[Player.BLUE]}"
        else:
            outcome = "Draw"
        print(f"\nGame Over! {outcome}, Score (red): {score}, Plays: {event['plays']}\n")

    # ---------------- Handler Mapping ----------------
    @property
    def handlers(self) -> Dict[str, Callable[[Dict[str, Any]], None]]:
        """
        Returns a dictionary mapping event types to their handler functions.

        Returns:
            dict: Mapping of event type strings to handler methods.
        """
        return {
            "bout_start": self.handle_bout_start,
            "turn_start": self.handle_turn_start,
            "chosen_play": self.handle_chosen_play,
            "problem": self.handle_problem,
            "game_over": self.handle_game_over,
        }
