"""Board generation: mine placement and neighbor mine counts."""
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

MINE = -1


def neighbors(row: int, col: int, width: int, height: int) -> Iterator[Tuple[int, int]]:
    """Yield the in-bounds positions of the up to 8 cells around (row, col)."""
    for dr in [-1, 0, 1]:
        for dc in [-1, 0, 1]:
            if dr == 0 and dc == 0:
                continue
            new_row = row + dr
            new_col = col + dc
            if 0 <= new_row < height and 0 <= new_col < width:
                yield new_row, new_col


def count_neighbor_mines(mines, row: int, col: int, width: int, height: int) -> int:
    """Count the number of mines in neighboring cells."""
    count = 0
    for new_row, new_col in neighbors(row, col, width, height):
        if mines[new_row * width + new_col]:
            count += 1
    return count


@dataclass(frozen=True)
class Board:
    """Immutable minefield.

    Cells are stored row-major in a flat tuple: ``MINE`` for a mine, otherwise
    the number of mines among the cell's neighbors.
    """
    width: int
    height: int
    cells: Tuple[int, ...]

    @classmethod
    def from_mines(cls, width: int, height: int, mines: Iterable[Tuple[int, int]]) -> 'Board':
        """Build a board with mines at the given (row, col) positions."""
        is_mine = [False] * (width * height)
        for row, col in mines:
            if not (0 <= row < height and 0 <= col < width):
                raise ValueError(f"Mine position ({row}, {col}) is outside a {width}x{height} board")
            is_mine[row * width + col] = True

        cells = []
        for row in range(height):
            for col in range(width):
                if is_mine[row * width + col]:
                    cells.append(MINE)
                else:
                    cells.append(count_neighbor_mines(is_mine, row, col, width, height))

        return cls(width=width, height=height, cells=tuple(cells))

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells if cell == MINE)

    def index(self, row: int, col: int) -> int:
        return row * self.width + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_mine(self, row: int, col: int) -> bool:
        return self.cells[self.index(row, col)] == MINE

    def neighbor_mines(self, row: int, col: int) -> int:
        """Stored neighbor mine count of a safe cell."""
        return self.cells[self.index(row, col)]

    def neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        return neighbors(row, col, self.width, self.height)


def generate_board(width: int, height: int, mine_count: int,
                   rng: Optional[random.Random] = None) -> Board:
    """Create a new board with randomly placed mines.

    Mines are placed by rejection sampling: random positions are drawn until
    ``mine_count`` distinct cells hold a mine. The caller validates that
    ``0 <= mine_count <= width * height - 1``.
    """
    if rng is None:
        rng = random.Random()

    mines = set()
    while len(mines) < mine_count:
        row = rng.randrange(height)
        col = rng.randrange(width)
        mines.add((row, col))

    return Board.from_mines(width, height, mines)
