# =========================================================
# --- core_bout.py ---
# =========================================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional

from mancala.players.strategy import Strategy

from .board import Player
from .game import FoulPlay, Game
from .moves import Play
from .position import Position

logger = logging.getLogger(__name__)

# ========================================================

class ProblemKind(Enum):
    """
    Ways a bout can end without a finished game.

    Attributes:
        RIGHT_OUT_OF_THE_GATE: The game was over before any play was made.
        ILLEGAL_PLAY: A strategy chose a bowl that cannot be played.
        NO_PLAY: A strategy did not choose a bowl.
    """
    RIGHT_OUT_OF_THE_GATE = 1
    ILLEGAL_PLAY = 2
    NO_PLAY = 3


@dataclass(frozen=True)
class Problem:
    """
    Represents the failure of a bout.

    Attributes:
        kind (ProblemKind): Which failure occurred.
        player (Optional[Player]): The player at fault, if any.
        foul (Optional[FoulPlay]): The rejected play for ILLEGAL_PLAY.
    """
    kind: ProblemKind
    player: Optional[Player] = None
    foul: Optional[FoulPlay] = None

    def __str__(self) -> str:
        if self.player is None:
            return self.kind.name
        return f"{self.kind.name} by {self.player}"


class BoutProblem(Exception):
    """Raised when a bout ends with a Problem instead of a finished game."""

    def __init__(self, problem: Problem):
        super().__init__(str(problem))
        self.problem: Problem = problem


class BoutEvents:
    """
    Event factory for bout events.
    Returns structured dictionaries for UI or logging.
    """

    def bout_start(self, game: Game) -> Dict[str, Any]:
        """Event: A bout has started."""
        return {
            "type": "bout_start",
            "turn": game.turn(),
            "position": game.current,
        }

    def turn_start(self, turn: Player, position: Position) -> Dict[str, Any]:
        """Event: A player is asked for a play."""
        return {
            "type": "turn_start",
            "turn": turn,
            "position": position,
        }

    def chosen_play(self, turn: Player, bowl: int, strategy: str) -> Dict[str, Any]:
        """Event: A strategy has chosen a bowl."""
        return {
            "type": "chosen_play",
            "turn": turn,
            "bowl": bowl,
            "strategy": strategy,
        }

    def apply_play(self, play: Play, position: Position) -> Dict[str, Any]:
        """Event: A play has been applied to the game."""
        return {
            "type": "apply_play",
            "play": play,
            "position": position,
        }

    def problem(self, problem: Problem) -> Dict[str, Any]:
        """Event: The bout ended with a problem."""
        return {
            "type": "problem",
            "problem": problem,
        }

    def game_over(self, game: Game) -> Dict[str, Any]:
        """Event: The game has finished."""
        return {
            "type": "game_over",
            "position": game.current,
            "score": game.score_for(Player.RED),
            "plays": len(game.history),
        }


class Bout:
    """
    Coordinates a game between two strategies.

    Attributes:
        strategies (Dict[Player, Strategy]): Strategy per player.
        display (Optional[Callable[[int], None]]): Receives every bowl played.
        emit_enabled (bool): If True, yield events during play.
        events (BoutEvents): Event generator for UI/logging.
    """

    def __init__(
        self,
        red: Strategy,
        blue: Strategy,
        display: Optional[Callable[[int], None]] = None,
        emit_enabled: bool = True,
    ):
        self.strategies: Dict[Player, Strategy] = {Player.RED: red, Player.BLUE: blue}
        self.display = display
        self.emit_enabled: bool = emit_enabled
        self.events: BoutEvents = BoutEvents()

    # ---------- Event Emission ----------
    def emit(self, event: dict) -> Iterator[Dict[str, Any]]:
        """Yield an event if emission is enabled."""
        if self.emit_enabled:
            yield event

    def _fail(self, problem: Problem) -> Iterator[Dict[str, Any]]:
        """Emit a problem event and end the bout."""
        logger.warning("bout ended: %s", problem)
        yield from self.emit(self.events.problem(problem))
        raise BoutProblem(problem)

    # ---------- Game Loop ----------
    def play_game(self, game: Game) -> Iterator[Dict[str, Any]]:
        """
        Play the game to completion, yielding events along the way.

        The game is updated in place.

        Args:
            game (Game): The game to play.

        Yields:
            dict: Bout events describing the game progression.

        Raises:
            BoutProblem: If the game was already over, or a strategy failed to
                produce a legal play.
        """
        if game.finished():
            yield from self._fail(Problem(ProblemKind.RIGHT_OUT_OF_THE_GATE))

        yield from self.emit(self.events.bout_start(game))

        while not game.finished():
            turn = game.turn()
            strategy = self.strategies[turn]
            yield from self.emit(self.events.turn_start(turn, game.current))

            bowl = strategy.play(game.current)
            if bowl is None:
                yield from self._fail(Problem(ProblemKind.NO_PLAY, turn))

            yield from self.emit(self.events.chosen_play(turn, bowl, str(strategy)))
            if self.display:
                self.display(bowl)

            try:
                game.play(bowl)
            except FoulPlay as foul:
                yield from self._fail(Problem(ProblemKind.ILLEGAL_PLAY, turn, foul))

            logger.debug("%s played %s", turn, bowl)
            yield from self.emit(self.events.apply_play(game.history[-1], game.current))

        yield from self.emit(self.events.game_over(game))

    def start(self, game: Game) -> Game:
        """
        Play the game to completion.

        Args:
            game (Game): The game to play.

        Returns:
            Game: The finished game.

        Raises:
            BoutProblem: If the bout could not be completed.
        """
        for _ in self.play_game(game):
            pass
        return game
