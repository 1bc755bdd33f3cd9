"""
Pytest configuration and shared fixtures.
"""
import random

import pytest

from minesweeper import Board, GameRegistry, GameSession
from minesweeper.server import create_app


class ScriptedRandom:
    """Stand-in random source returning a fixed sequence from randrange."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def scripted_mines(*positions):
    """Random source that places mines at the given (row, col) positions in order."""
    values = []
    for row, col in positions:
        values.extend([row, col])
    return ScriptedRandom(values)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def strip_board() -> Board:
    """1x5 strip with a single mine in the middle: 0 1 * 1 0."""
    return Board.from_mines(5, 1, [(0, 2)])


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a mine in the top-left corner."""
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def strip_game(strip_board: Board) -> GameSession:
    return GameSession(strip_board)


# ============================================================================
# Registry Fixtures
# ============================================================================

@pytest.fixture
def registry() -> GameRegistry:
    """Registry with a seeded random source."""
    return GameRegistry(rng=random.Random(1234))


@pytest.fixture
def app(registry: GameRegistry):
    app = create_app(registry=registry)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
