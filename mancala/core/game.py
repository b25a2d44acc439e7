# =========================================================
# --- core_game.py ---
# =========================================================

from dataclasses import dataclass
from typing import List, Optional

from .board import DEFAULT_BOWLS, DEFAULT_STONES, Player
from .moves import Play
from .position import Position

# =========================================================

class FoulPlay(Exception):
    """Base class for every way a play can go wrong."""
    pass


class NoStonesInBowl(FoulPlay):
    """
    Raised when a player sows a bowl without stones.

    Attributes:
        player (Player): The player who attempted the play.
        bowl (int): The empty bowl.
    """

    def __init__(self, player: Player, bowl: int):
        super().__init__(f"{player} played empty bowl {bowl}")
        self.player: Player = player
        self.bowl: int = bowl


@dataclass(frozen=True)
class GameConfig:
    """
    Board dimensions of a new game.

    Attributes:
        bowls (int): Number of bowls per side.
        stones (int): Initial number of stones per bowl.
    """
    bowls: int = DEFAULT_BOWLS
    stones: int = DEFAULT_STONES


class GameBuilder:
    """
    Builds fresh Mancala games.

    Defaults to the standard board of 6 bowls with 4 stones each.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config: GameConfig = config or GameConfig()

    def bowls(self, bowls: int) -> "GameBuilder":
        """Return a builder with a different number of bowls per side."""
        return GameBuilder(GameConfig(bowls=bowls, stones=self.config.stones))

    def stones(self, stones: int) -> "GameBuilder":
        """Return a builder with a different number of stones per bowl."""
        return GameBuilder(GameConfig(bowls=self.config.bowls, stones=stones))

    def build(self, debug: bool = False) -> "Game":
        """
        Create a game with the configured number of bowls and stones.

        Args:
            debug (bool): Enable position invariant assertions.

        Returns:
            Game: An unplayed game with RED to move.
        """
        return Game(Position.new(self.config.bowls, self.config.stones, debug=debug))


class Game:
    """
    A Mancala game: the current position and every play that led to it.

    Attributes:
        current (Position): The position to be played next.
        history (List[Play]): Applied plays, oldest first.
    """

    def __init__(self, current: Position, history: Optional[List[Play]] = None):
        self.current: Position = current
        self.history: List[Play] = list(history) if history else []

    def finished(self) -> bool:
        """Check whether the current position is finished."""
        return self.current.finished()

    def turn(self) -> Player:
        """Return the player to move."""
        return self.current.player

    def options(self) -> List[int]:
        """Return the playable bowls of the player to move."""
        return self.current.options()

    def score(self) -> Optional[int]:
        """Return the score relative to the player to move, once finished."""
        return self.current.score()

    def score_for(self, player: Player) -> Optional[int]:
        """
        Return the final score from a fixed player's perspective.

        Args:
            player (Player): The player to report the score for.

        Returns:
            Optional[int]: The score, or None if the game is not finished.
        """
        score = self.score()
        if score is None:
            return None
        return score if self.turn() == player else -score

    def play(self, bowl: int) -> None:
        """
        Play a bowl of the player to move and record it.

        Args:
            bowl (int): Zero-based bowl index.

        Raises:
            NoStonesInBowl: If the bowl is empty; the game is left unchanged.
        """
        player = self.turn()
        position = self.current.play(bowl)
        if position is None:
            raise NoStonesInBowl(player, bowl)
        self.history.append(Play(player, bowl))
        self.current = position

    def __eq__(self, other: object) -> bool:
        """Check equality of position and history."""
        if not isinstance(other, Game):
            return NotImplemented
        return self.current == other.current and self.history == other.history

    def __repr__(self) -> str:
        """Return a formal string representation."""
        return f"Game(current={self.current!r}, history={self.history!r})"
