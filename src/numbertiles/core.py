# core.py
# Board storage and line ordering for the tile engine. No game rules live here.

from enum import Enum
from typing import List, Optional, Tuple

Coord = Tuple[int, int]
CellValue = Optional[int]  # None means the cell is empty


class GameProgressState(Enum):
    """Represents the current progress state of the game."""
    IN_PROGRESS = 1
    GAME_OVER = 2  # Lost
    GAME_WON = 3


class Direction(Enum):
    """Represents the possible move directions."""
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


# --- Board ---

class Board:
    """
    Fixed-size square grid of cell values, stored row-major.
    Out-of-range access is a programming error and trips an assertion.
    """

    def __init__(self, dimension: int):
        assert dimension >= 2, "Board dimension must be at least 2."
        self.dimension = dimension
        self._cells: List[CellValue] = [None] * (dimension * dimension)

    def _index(self, row: int, col: int) -> int:
        assert 0 <= row < self.dimension, f"Row {row} out of range."
        assert 0 <= col < self.dimension, f"Column {col} out of range."
        return row * self.dimension + col

    def get(self, row: int, col: int) -> CellValue:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, value: CellValue) -> None:
        self._cells[self._index(row, col)] = value

    def empty_cells(self) -> List[Coord]:
        """
        Get coordinates of empty cells.
        Returns:
            List[Coord]: (row, col) tuples in row-major order.
        """
        n = self.dimension
        empty_cells = []
        for row in range(n):
            for col in range(n):
                if self._cells[row * n + col] is None:
                    empty_cells.append((row, col))
        return empty_cells

    def fill_all(self, value: CellValue) -> None:
        """Sets every cell to the given value (None clears the board)."""
        for i in range(len(self._cells)):
            self._cells[i] = value

    def occupied_sum(self) -> int:
        return sum(v for v in self._cells if v is not None)

    def rows(self) -> List[List[int]]:
        """
        Snapshot of the board as a list of rows, with empty cells as 0.
        Returns:
            List[List[int]]: A new N x N list of lists.
        """
        n = self.dimension
        return [
            [0 if v is None else v for v in self._cells[r * n:(r + 1) * n]]
            for r in range(n)
        ]


# --- Line Extraction ---

def line_coordinates(direction: Direction, line_index: int, dimension: int) -> List[Coord]:
    """
    Board coordinates of one line, ordered from the leading edge backwards.
    Position 0 of the result is the cell tiles slide towards for `direction`.
    Args:
        direction (Direction): The direction of the move.
        line_index (int): Which column (UP/DOWN) or row (LEFT/RIGHT) to walk.
        dimension (int): The board dimension.
    Returns:
        List[Coord]: `dimension` coordinates in merge-processing order.
    Raises:
        ValueError: If an invalid direction is specified.
    """
    assert 0 <= line_index < dimension, f"Line {line_index} out of range."
    last = dimension - 1

    if direction == Direction.UP:
        return [(i, line_index) for i in range(dimension)]
    elif direction == Direction.DOWN:
        return [(last - i, line_index) for i in range(dimension)]
    elif direction == Direction.LEFT:
        return [(line_index, i) for i in range(dimension)]
    elif direction == Direction.RIGHT:
        return [(line_index, last - i) for i in range(dimension)]
    raise ValueError("Invalid direction specified for line_coordinates.")
