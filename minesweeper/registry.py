"""Registry of active Minesweeper games."""
import logging
import random
import threading
import uuid
from typing import Dict, Optional

from minesweeper.board import generate_board
from minesweeper.errors import NotFoundError, StateError, ValidationError
from minesweeper.game import GameSession
from minesweeper.types import GameConfig, GameStatus, GameView, TurnRequest

logger = logging.getLogger(__name__)

MAX_WIDTH = 30
MAX_HEIGHT = 30


class GameRegistry:
    """Owns every game session of the process, keyed by game id.

    Membership is guarded by a registry-wide lock; turns on one game are
    serialized by that game's own lock.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._games: Dict[uuid.UUID, GameSession] = {}
        self._lock = threading.Lock()
        self._rng_lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def create_game(self, config: GameConfig) -> GameView:
        """Validate the configuration, generate a board and start a game."""
        validate_config(config)

        # self.rng is shared between request threads
        with self._rng_lock:
            board = generate_board(config.width, config.height, config.mine_count, self.rng)
        game = GameSession(board)

        with self._lock:
            self._games[game.id] = game

        logger.info(f"Created game {game.id} ({config.width}x{config.height}, {config.mine_count} mines)")
        with game.lock:
            return self.project(game)

    def make_turn(self, request: TurnRequest) -> GameView:
        """Open one cell of an existing game."""
        game = self._get(request.game_id)

        with game.lock:
            if game.completed:
                logger.warning(f"Turn rejected for game {game.id}: already completed")
                raise StateError("Game is already completed")

            if not game.board.in_bounds(request.row, request.col):
                logger.warning(f"Turn rejected for game {game.id}: ({request.row}, {request.col}) out of bounds")
                raise ValidationError(
                    f"row/col out of bounds: row must be in [0, {game.board.height}), "
                    f"col must be in [0, {game.board.width})"
                )

            if game.is_opened(request.row, request.col):
                logger.warning(f"Turn rejected for game {game.id}: cell already opened")
                raise StateError("Cell is already opened")

            game.reveal(request.row, request.col)

            if game.status is GameStatus.LOST:
                logger.info(f"Game {game.id} lost at ({request.row}, {request.col})")
            elif game.status is GameStatus.WON:
                logger.info(f"Game {game.id} won")

            return self.project(game)

    def get_game(self, game_id: uuid.UUID) -> GameView:
        """Get the current view of a game without changing it."""
        game = self._get(game_id)
        with game.lock:
            return self.project(game)

    def _get(self, game_id: uuid.UUID) -> GameSession:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            logger.warning(f"Game {game_id} not found")
            raise NotFoundError("Game not found")
        return game

    @staticmethod
    def project(game: GameSession) -> GameView:
        """Build the externally visible view; unopened cells are blank."""
        return GameView(
            game_id=game.id,
            width=game.board.width,
            height=game.board.height,
            mine_count=game.board.mine_count,
            completed=game.completed,
            field=game.field(),
        )


def validate_config(config: GameConfig) -> None:
    """Reject board sizes and mine counts the generator cannot satisfy."""
    if config.width > MAX_WIDTH or config.height > MAX_HEIGHT:
        raise ValidationError(f"Field dimensions must not exceed {MAX_WIDTH}x{MAX_HEIGHT}")

    if config.width < 1 or config.height < 1:
        raise ValidationError("Field dimensions must be positive")

    if config.mine_count < 0:
        raise ValidationError("Mine count must not be negative")

    max_mines = config.width * config.height - 1
    if config.mine_count > max_mines:
        raise ValidationError(f"Mine count must not exceed {max_mines}")
