# =========================================================
# --- core_position_invariants.py ---
# =========================================================

from typing import Any, Optional

# =========================================================

def assert_shape_invariant(position: Any, where: str = "") -> None:
    """
    Check that the bowls form two equally sized, non-empty sides.

    Args:
        position: The Position object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the bowl sequence does not have length 2 * size with size >= 1.
    """
    if position.size < 1 or len(position.bowls) != 2 * position.size:
        raise AssertionError(
            f"[BOARD SHAPE] size={position.size}, bowls={len(position.bowls)} at {where}"
        )
    if len(position.capture) != 2:
        raise AssertionError(f"[BOARD SHAPE] capture={position.capture} at {where}")


def assert_stone_invariant(position: Any, expected_total: int, where: str = "") -> None:
    """
    Check that no stone was created or destroyed.

    Stones in the bowls of both sides and in both stores are counted.

    Args:
        position: The Position object to check.
        expected_total: Number of stones the position must hold.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the total number of stones differs from expected_total.
    """
    total = position.total()
    if total != expected_total:
        raise AssertionError(
            f"[STONE LOST] {total}/{expected_total} at {where}\n"
            f"Bowls={position.bowls.tolist()}, Capture={position.capture}"
        )


def assert_position_invariant(position: Any, where: str = "", expected_total: Optional[int] = None) -> None:
    """
    Perform full invariant check for a Mancala position.

    This includes:
    - Board shape consistency
    - Stone conservation (when the expected total is known)

    Args:
        position: The Position object to check.
        where: Optional description of where the check is performed (for debugging).
        expected_total: Stone count carried over from the previous position, if any.

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_shape_invariant(position, where)
    if expected_total is not None:
        assert_stone_invariant(position, expected_total, where)
