"""Server-side Minesweeper engine."""
from minesweeper.board import Board, generate_board
from minesweeper.errors import MinesweeperError, NotFoundError, StateError, ValidationError
from minesweeper.game import GameSession
from minesweeper.registry import GameRegistry
from minesweeper.types import GameConfig, GameStatus, GameView, TurnRequest

__all__ = [
    "Board",
    "generate_board",
    "GameSession",
    "GameRegistry",
    "GameConfig",
    "GameStatus",
    "GameView",
    "TurnRequest",
    "MinesweeperError",
    "NotFoundError",
    "StateError",
    "ValidationError",
]
