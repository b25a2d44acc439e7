# =========================================================
# --- cli_game.py ---
# =========================================================

import argparse
import logging
import random
from typing import List, Optional

from mancala.core.board import DEFAULT_BOWLS, DEFAULT_STONES
from mancala.core.bout import Bout, BoutProblem
from mancala.core.game import GameBuilder, GameConfig
from mancala.core.position import Position

from mancala.players.alphabeta import AlphaBeta, AlphaBetaConfig
from mancala.players.depth import Depth
from mancala.players.human import User
from mancala.players.ids import IterativeDeepening
from mancala.players.minmax import MinMax
from mancala.players.naive import First, RandomStrategy
from mancala.players.strategy import Strategy

from .boardDisplay import BoardDisplay
from .cliHandlers import CLIHandlers

logger = logging.getLogger(__name__)

# =========================================================

STRATEGIES = ("user", "minmax", "alphabeta", "ids", "random", "first")


class ExitGame(Exception):
    """Raised when the human player quits in the middle of a bout."""
    pass


def read_bowl(prompt: str) -> str:
    """
    Read the human player's answer to a bowl prompt.

    Args:
        prompt (str): The prompt listing the playable bowls.

    Raises:
        ExitGame: If the player enters 'q'/'quit' or presses Ctrl+C or Ctrl+D.

    Returns:
        str: The answer without surrounding whitespace.
    """
    try:
        answer = input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        raise ExitGame()
    if answer.lower() in ("q", "quit"):
        raise ExitGame()
    return answer


def at_least_one(text: str) -> int:
    """Argument type for board sizes and search depths."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


class CLISetup:
    """
    Factory utilities for configuring strategies from command-line names.
    """

    @staticmethod
    def show_position(position: Position) -> None:
        """Draw the board for a human player."""
        BoardDisplay(position, clear_screen=False).draw_all()

    @staticmethod
    def create_user() -> User:
        """
        Create a human player reading from the terminal.

        Returns:
            User: Configured human strategy.
        """
        return User(input_func=read_bowl, show_position=CLISetup.show_position)

    @staticmethod
    def strategy_from_name(name: str, depth: Depth, rng: Optional[random.Random] = None) -> Strategy:
        """
        Instantiate a strategy by name.

        Args:
            name (str): One of STRATEGIES.
            depth (Depth): Search depth for the depth-limited strategies.
            rng (Optional[random.Random]): RNG for the random strategy.

        Returns:
            Strategy: Instantiated strategy object.

        Raises:
            ValueError: If the name is unknown.
        """
        if name == "user":
            return CLISetup.create_user()
        if name == "minmax":
            return MinMax()
        if name == "alphabeta":
            return AlphaBeta(AlphaBetaConfig(depth=depth))
        if name == "ids":
            return IterativeDeepening(AlphaBeta(), depth)
        if name == "random":
            return RandomStrategy(rng)
        if name == "first":
            return First()
        raise ValueError(f"Unknown strategy: {name}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv (Optional[List[str]]): Arguments to parse, defaults to sys.argv.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="mancala-battle",
        description="Pit various strategies against each other in a game of Mancala",
    )
    parser.add_argument("-b", "--bowls", type=at_least_one, default=DEFAULT_BOWLS, help="the number of bowls per side")
    parser.add_argument("-s", "--stones", type=at_least_one, default=DEFAULT_STONES, help="the number of stones per bowl")
    parser.add_argument("-d", "--depth", type=at_least_one, default=5, help="the strength of the computer, higher is stronger")
    parser.add_argument("--red", choices=STRATEGIES, default="user", help="the strategy the red player will employ")
    parser.add_argument("--blue", choices=STRATEGIES, default="alphabeta", help="the strategy the blue player will employ")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds to pause after each play")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


class MancalaCLI:
    """
    Main command-line interface controller for running a Mancala bout.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the CLI.

        Args:
            args (argparse.Namespace): Parsed command-line arguments.
        """
        self.args = args
        self.setup = CLISetup()
        self.handlers = CLIHandlers(args.delay).handlers

    def setup_bout(self) -> Bout:
        """
        Create the bout between the configured strategies.

        Returns:
            Bout: Fully configured bout.
        """
        depth = Depth.limited(self.args.depth)
        red = self.setup.strategy_from_name(self.args.red, depth)
        blue = self.setup.strategy_from_name(self.args.blue, depth)
        logger.info("red: %s, blue: %s", red, blue)
        return Bout(red, blue)

    def play_game(self, bout: Bout) -> None:
        """
        Run the bout and dispatch events to CLI handlers.

        Args:
            bout (Bout): The configured bout.
        """
        game = GameBuilder(GameConfig(bowls=self.args.bowls, stones=self.args.stones)).build()
        for event in bout.play_game(game):
            handler = self.handlers.get(event["type"])
            if handler:
                handler(event)

    def run(self) -> int:
        """
        Play a complete bout.

        Returns:
            int: Process exit code.
        """
        try:
            self.play_game(self.setup_bout())
        except BoutProblem as exc:
            logger.error("bout failed: %s", exc.problem)
            return 1
        except ExitGame:
            print("\nGame exited by player.")
        except KeyboardInterrupt:
            print("\nGame interrupted by user. Exiting…")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the mancala-battle command."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return MancalaCLI(args).run()


# ---------------- Main ----------------
if __name__ == "__main__":
    raise SystemExit(main())
