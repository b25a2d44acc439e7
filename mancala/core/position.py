# =========================================================
# --- core_position.py ---
# =========================================================

import numpy as np
from typing import Any, Iterable, List, Optional, Tuple

from .board import MOVER, OPPONENT, Player
from .position_invariants import assert_position_invariant

# =========================================================

class Position:
    """
    Immutable snapshot of a Mancala board.

    The board is stored relative to the player to move: bowls ``[0, size)``
    belong to the mover, bowls ``[size, 2 * size)`` to the opponent, and
    ``capture[0]`` is the mover's store. Whenever the turn passes, the bowls
    are rotated and the capture pair swapped so this keeps holding.

    Attributes:
        size (int): Number of bowls on each side.
        bowls (np.ndarray): Read-only array of 2 * size stone counts.
        capture (Tuple[int, int]): Stones in the mover's and the opponent's store.
        player (Player): The player whose turn it is.
        debug (bool): Enable invariant assertions after every sow.
    """

    def __init__(
        self,
        bowls: Iterable[int],
        capture: Tuple[int, int] = (0, 0),
        player: Player = Player.RED,
        debug: bool = False,
    ):
        board = np.array(list(bowls), dtype=np.int64)
        if board.ndim != 1 or len(board) == 0 or len(board) % 2 != 0:
            raise ValueError(f"Expected a non-empty, even number of bowls, got {len(board)}")
        if (board < 0).any() or min(capture) < 0:
            raise ValueError("Stone counts must not be negative")
        board.setflags(write=False)

        self.size: int = len(board) // 2
        self.bowls: np.ndarray = board
        self.capture: Tuple[int, int] = (int(capture[MOVER]), int(capture[OPPONENT]))
        self.player: Player = player
        self.debug: bool = debug
        self._assert("__init__")

    # ---------- Setup ----------
    @classmethod
    def new(cls, bowls: int, stones: int, player: Player = Player.RED, debug: bool = False) -> "Position":
        """
        Create a fresh position with the same number of stones in every bowl.

        Args:
            bowls (int): Number of bowls per side.
            stones (int): Number of stones per bowl.
            player (Player): Player to move. Defaults to RED.
            debug (bool): Enable invariant assertions.

        Returns:
            Position: An unplayed position with empty stores.
        """
        if bowls < 1:
            raise ValueError(f"A board needs at least one bowl per side, got {bowls}")
        return cls([stones] * (2 * bowls), (0, 0), player, debug)

    @classmethod
    def from_bowls(
        cls,
        bowls: Iterable[int],
        capture: Tuple[int, int] = (0, 0),
        player: Player = Player.RED,
    ) -> "Position":
        """Create a position from arbitrary bowl contents, mover's side first."""
        return cls(bowls, capture, player)

    # ---------- Properties ----------
    @property
    def mover_bowls(self) -> np.ndarray:
        """Bowls of the player to move, in sowing order."""
        return self.bowls[:self.size]

    @property
    def far_bowls(self) -> np.ndarray:
        """Bowls of the opponent, in sowing order."""
        return self.bowls[self.size:]

    def total(self) -> int:
        """Return the number of stones on the board, stores included."""
        return int(self.bowls.sum()) + self.capture[MOVER] + self.capture[OPPONENT]

    # ---------- Queries ----------
    def options(self) -> List[int]:
        """
        Determine which bowls are playable.

        Returns:
            List[int]: Indices of the mover's non-empty bowls, ascending.
        """
        return np.flatnonzero(self.mover_bowls).tolist()

    def finished(self) -> bool:
        """Check whether the mover has no stones left to sow."""
        return not self.mover_bowls.any()

    def score(self) -> Optional[int]:
        """
        Return the final score from the mover's perspective.

        The score is the mover's stones (bowls and store) minus the opponent's.

        Returns:
            Optional[int]: The score, or None if the position is not finished.
        """
        if not self.finished():
            return None
        mine = int(self.mover_bowls.sum()) + self.capture[MOVER]
        theirs = int(self.far_bowls.sum()) + self.capture[OPPONENT]
        return mine - theirs

    def delta(self) -> int:
        """Return the difference between the mover's and the opponent's store."""
        return self.capture[MOVER] - self.capture[OPPONENT]

    # ---------- Transition ----------
    def play(self, bowl: int) -> Optional["Position"]:
        """
        Sow a bowl of the mover.

        Args:
            bowl (int): Zero-based index into the mover's side.

        Returns:
            Optional[Position]: The resulting position, or None if the bowl is empty.

        Raises:
            ValueError: If the bowl is not on the mover's side.
        """
        if not 0 <= bowl < self.size:
            raise ValueError(f"Bowl {bowl} is not on the mover's side (0-{self.size - 1})")
        if self.bowls[bowl] == 0:
            return None
        return self._sow(bowl)

    def _sow(self, bowl: int) -> "Position":
        """Distribute the stones of a non-empty bowl and settle captures and turn."""
        size = self.size
        tour = 2 * size + 1
        bowls = self.bowls.copy()
        stones = int(bowls[bowl])
        bowls[bowl] = 0

        full_laps, remainder = divmod(stones, tour)
        bowls += full_laps
        store = full_laps

        # slots: [0, size) mover bowls, size mover store, (size, tour) far bowls
        slots = (bowl + np.arange(1, remainder + 1)) % tour
        store += int(np.count_nonzero(slots == size))
        bowls[slots[slots < size]] += 1
        bowls[slots[slots > size] - 1] += 1

        landing = (bowl + remainder) % tour
        if landing < size and bowls[landing] == 1:
            opposite = 2 * size - 1 - landing
            store += int(bowls[opposite])
            bowls[opposite] = 0

        if landing == size:
            result = Position(
                bowls,
                (self.capture[MOVER] + store, self.capture[OPPONENT]),
                self.player,
                self.debug,
            )
        else:
            result = Position(
                np.roll(bowls, -size),
                (self.capture[OPPONENT], self.capture[MOVER] + store),
                self.player.other,
                self.debug,
            )
        if self.debug:
            assert_position_invariant(result, f"_sow({bowl})", self.total())
        return result

    # ---------- Comparison ----------
    def __eq__(self, other: Any) -> bool:
        """Check equality with another Position."""
        if not isinstance(other, Position):
            return NotImplemented
        return (
            np.array_equal(self.bowls, other.bowls) and
            self.capture == other.capture and
            self.player == other.player
        )

    def __hash__(self) -> int:
        """Hash on board contents, stores and player to move."""
        return hash((self.bowls.tobytes(), self.capture, self.player))

    def __repr__(self) -> str:
        """Return a formal string representation."""
        return f"Position(bowls={self.bowls.tolist()}, capture={self.capture}, player={self.player.name})"

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert position invariants if debug mode is active."""
        if self.debug:
            assert_position_invariant(self, where)
