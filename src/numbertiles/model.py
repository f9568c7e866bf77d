# model.py
# The game model: owns the board and score, applies moves line by line and
# reports every elementary change to an observer.

import logging
from typing import List, Optional

from .core import Board, Coord, Direction, GameProgressState, line_coordinates
from .merge import DoubleRelocateOrder, RelocateOrder, merge_line
from .movequeue import Completion, ManualScheduler, MoveCommand, MoveQueue, Scheduler
from .settings import GameSettings

logger = logging.getLogger(__name__)


class GameObserver:
    """
    Receives board and score notifications from a GameModel.
    Every method is a no-op; subclasses override what they care about.
    """

    def score_changed(self, score: int) -> None:
        pass

    def tile_relocated(self, source: Coord, destination: Coord, value: int) -> None:
        pass

    def tiles_merged(self, first_source: Coord, second_source: Coord, destination: Coord, value: int) -> None:
        pass

    def tile_inserted(self, location: Coord, value: int) -> None:
        pass


class GameModel:
    """
    Board state plus the rules that mutate it.

    The model contains no randomness: callers choose where and what to insert.
    Moves can be applied directly with `apply_move` or queued with `queue_move`.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        observer: Optional[GameObserver] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.settings = settings or GameSettings()
        self.observer = observer or GameObserver()
        self.board = Board(self.settings.dimension)
        self._score = 0
        self._queue = MoveQueue(
            self.apply_move,
            scheduler or ManualScheduler(),
            capacity=self.settings.max_commands,
            settle_delay=self.settings.queue_delay,
        )

    @property
    def dimension(self) -> int:
        return self.settings.dimension

    @property
    def threshold(self) -> int:
        return self.settings.threshold

    @property
    def score(self) -> int:
        return self._score

    def _set_score(self, score: int) -> None:
        self._score = score
        self.observer.score_changed(score)

    @property
    def queue(self) -> MoveQueue:
        return self._queue

    def reset(self) -> None:
        """Clears score, board and any queued moves."""
        self._set_score(0)
        self.board.fill_all(None)
        self._queue.clear()
        logger.info("Game reset (%dx%d, threshold %d)", self.dimension, self.dimension, self.threshold)

    # --- Tiles ---

    def insert_tile(self, location: Coord, value: int) -> bool:
        """
        Places a tile in an empty cell. An occupied cell is left alone.
        Args:
            location (Coord): (row, col) of the new tile.
            value (int): The tile value, at least 1.
        Returns:
            bool: True if the tile was inserted.
        """
        assert value >= 1, "Tile values must be positive."
        row, col = location
        if self.board.get(row, col) is not None:
            logger.debug("Insert at %s ignored: cell occupied", location)
            return False

        self.board.set(row, col, value)
        self.observer.tile_inserted(location, value)
        return True

    def empty_cells(self) -> List[Coord]:
        return self.board.empty_cells()

    # --- Moves ---

    def queue_move(self, direction: Direction, completion: Completion) -> bool:
        """Queues a move; returns False when the queue is full and the move was dropped."""
        return self._queue.submit(MoveCommand(direction, completion))

    def apply_move(self, direction: Direction) -> bool:
        """
        Slides every line of the board towards `direction`, merging equal tiles.
        Args:
            direction (Direction): The direction to move.
        Returns:
            bool: True if any tile moved or merged.
        Raises:
            ValueError: If an invalid direction is specified.
        """
        changed = False

        for line_index in range(self.dimension):
            cells = line_coordinates(direction, line_index, self.dimension)
            values = [self.board.get(r, c) for r, c in cells]
            orders = merge_line(values)
            if orders:
                changed = True

            for order in orders:
                if isinstance(order, RelocateOrder):
                    source, destination = cells[order.source], cells[order.destination]
                    if order.merged:
                        self._set_score(self._score + order.value)
                    self.board.set(*source, None)
                    self.board.set(*destination, order.value)
                    self.observer.tile_relocated(source, destination, order.value)

                elif isinstance(order, DoubleRelocateOrder):
                    first, second = cells[order.first_source], cells[order.second_source]
                    destination = cells[order.destination]
                    self._set_score(self._score + order.value)
                    self.board.set(*first, None)
                    self.board.set(*second, None)
                    self.board.set(*destination, order.value)
                    self.observer.tiles_merged(first, second, destination, order.value)

        logger.debug("Move %s changed=%s score=%d", direction.name, changed, self._score)
        return changed

    # --- Game State Checks ---

    def check_win(self, threshold: Optional[int] = None) -> Optional[Coord]:
        """
        Finds the first tile (row-major) at or above the winning value.
        Args:
            threshold (Optional[int]): Winning value; defaults to the settings threshold.
        Returns:
            Optional[Coord]: The tile's coordinate, or None.
        """
        if threshold is None:
            threshold = self.threshold
        n = self.dimension
        for r in range(n):
            for c in range(n):
                value = self.board.get(r, c)
                if value is not None and value >= threshold:
                    return (r, c)
        return None

    def _same_as_neighbour(self, row: int, col: int, value: int) -> bool:
        last = self.dimension - 1
        if row < last and self.board.get(row + 1, col) == value:
            return True
        if col < last and self.board.get(row, col + 1) == value:
            return True
        return False

    def check_game_over(self) -> bool:
        """True only when the board is full and no two neighbours are equal."""
        if self.empty_cells():
            return False

        n = self.dimension
        for r in range(n):
            for c in range(n):
                value = self.board.get(r, c)
                assert value is not None, "Board reported full but has an empty cell."
                if self._same_as_neighbour(r, c, value):
                    return False
        return True

    def progress(self) -> GameProgressState:
        if self.check_win() is not None:
            return GameProgressState.GAME_WON
        if self.check_game_over():
            return GameProgressState.GAME_OVER
        return GameProgressState.IN_PROGRESS
