# __init__.py
# Sliding-tile merge puzzle engine: board, line merge pipeline and game model.

import logging

from .core import Board, Coord, Direction, GameProgressState, line_coordinates
from .merge import DoubleRelocateOrder, RelocateOrder, merge_line
from .model import GameModel, GameObserver
from .movequeue import AsyncioScheduler, ManualScheduler, MoveCommand, MoveQueue, Scheduler
from .settings import GameSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AsyncioScheduler",
    "Board",
    "Coord",
    "Direction",
    "DoubleRelocateOrder",
    "GameModel",
    "GameObserver",
    "GameProgressState",
    "GameSettings",
    "ManualScheduler",
    "MoveCommand",
    "MoveQueue",
    "RelocateOrder",
    "Scheduler",
    "line_coordinates",
    "merge_line",
]
