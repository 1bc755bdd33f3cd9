"""Game session: opened cells, reveal cascade and win/loss detection."""
import threading
import uuid
from collections import deque
from typing import List, Optional

from minesweeper.board import Board
from minesweeper.types import DEFUSED, DETONATED, HIDDEN, GameStatus


class GameSession:
    """A single Minesweeper game.

    The board never changes after creation. Play only flips entries of the
    opened mask from False to True. Callers must hold ``lock`` while reading
    or mutating the session.
    """

    def __init__(self, board: Board, game_id: Optional[uuid.UUID] = None):
        self.id: uuid.UUID = game_id or uuid.uuid4()
        self.board = board
        self.opened: List[bool] = [False] * board.size
        self.status = GameStatus.ACTIVE
        self.lock = threading.Lock()
        self._safe_opened = 0
        self._safe_total = board.size - board.mine_count

    @property
    def completed(self) -> bool:
        return self.status.is_terminal

    @property
    def opened_count(self) -> int:
        return sum(self.opened)

    def is_opened(self, row: int, col: int) -> bool:
        return self.opened[self.board.index(row, col)]

    def reveal(self, row: int, col: int) -> None:
        """Open a cell.

        Opening a mine loses the game and opens the whole board. Opening a
        safe cell cascades through zero-count neighbors, then the game is won
        once every safe cell is open.
        """
        if self.board.is_mine(row, col):
            self._open_all()
            self.status = GameStatus.LOST
            return

        self._flood_fill(row, col)

        if self._safe_opened == self._safe_total:
            self._open_all()
            self.status = GameStatus.WON

    def _open(self, row: int, col: int) -> bool:
        index = self.board.index(row, col)
        if self.opened[index]:
            return False
        self.opened[index] = True
        self._safe_opened += 1
        return True

    def _flood_fill(self, row: int, col: int) -> None:
        # The opened mask doubles as the visited set
        if not self._open(row, col):
            return
        frontier = deque([(row, col)])
        while frontier:
            r, c = frontier.popleft()
            if self.board.neighbor_mines(r, c) > 0:
                continue
            for nr, nc in self.board.neighbors(r, c):
                if self._open(nr, nc):
                    frontier.append((nr, nc))

    def _open_all(self) -> None:
        for index in range(self.board.size):
            self.opened[index] = True

    def cell_token(self, row: int, col: int) -> str:
        """Visible token of a cell: blank, a count, or a mine marker."""
        if not self.is_opened(row, col):
            return HIDDEN
        if self.board.is_mine(row, col):
            return DEFUSED if self.status is GameStatus.WON else DETONATED
        return str(self.board.neighbor_mines(row, col))

    def field(self) -> List[List[str]]:
        return [
            [self.cell_token(row, col) for col in range(self.board.width)]
            for row in range(self.board.height)
        ]
