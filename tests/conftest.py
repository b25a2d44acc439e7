"""
Shared pytest fixtures for the mancala tests.
"""

import random

import pytest

from mancala.core.position import Position


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random number generator."""
    return random.Random(1234)


@pytest.fixture
def standard_position() -> Position:
    """Fresh standard board: 6 bowls per side, 4 stones each."""
    return Position.new(6, 4)


@pytest.fixture
def small_position() -> Position:
    """Unfinished 3-bowl board whose exact value is 5 for the mover, via bowl 1."""
    return Position([1, 2, 1, 0, 2, 1])
