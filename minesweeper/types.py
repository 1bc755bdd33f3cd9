"""Type definitions for the Minesweeper game server."""
from dataclasses import dataclass
from enum import Enum
from typing import List
import uuid


# Tokens of the projected field
HIDDEN = ' '
DETONATED = 'X'
DEFUSED = 'M'


class GameStatus(str, Enum):
    """Possible game states."""
    ACTIVE = 'ACTIVE'
    WON = 'WON'
    LOST = 'LOST'

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.ACTIVE


@dataclass
class GameConfig:
    """Configuration for creating a new game."""
    width: int
    height: int
    mine_count: int


@dataclass
class TurnRequest:
    """Request to open one cell of a game."""
    game_id: uuid.UUID
    row: int
    col: int


@dataclass
class GameView:
    """Externally visible state of a game."""
    game_id: uuid.UUID
    width: int
    height: int
    mine_count: int
    completed: bool
    field: List[List[str]]

    def to_dict(self) -> dict:
        """Convert the view to its JSON-serializable wire format."""
        return {
            'game_id': str(self.game_id),
            'width': self.width,
            'height': self.height,
            'mines_count': self.mine_count,
            'completed': self.completed,
            'field': [list(row) for row in self.field],
        }
