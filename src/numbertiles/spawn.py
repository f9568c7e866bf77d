# spawn.py
# Caller-side tile spawning. The model itself never picks cells or values.

import random
from typing import Optional

from .core import Coord
from .model import GameModel

STARTING_TILES = 2
STARTING_VALUE = 2


def random_tile_value(rng: random.Random) -> int:
    """90% chance of 2, 10% chance of 4."""
    return 4 if rng.random() < 0.1 else 2


def insert_random_tile(model: GameModel, rng: random.Random, value: Optional[int] = None) -> Optional[Coord]:
    """
    Adds a tile to a random empty cell.
    Args:
        model (GameModel): The game to add to.
        rng (random.Random): Source of randomness.
        value (Optional[int]): Tile value; drawn with `random_tile_value` if omitted.
    Returns:
        Optional[Coord]: Where the tile went, or None if the board is full.
    """
    empty_cells = model.empty_cells()
    if not empty_cells:
        return None

    location = rng.choice(empty_cells)
    model.insert_tile(location, value if value is not None else random_tile_value(rng))
    return location


def start_game(model: GameModel, rng: random.Random) -> None:
    """Resets the model and places the two starting tiles."""
    model.reset()
    for _ in range(STARTING_TILES):
        insert_random_tile(model, rng, STARTING_VALUE)
