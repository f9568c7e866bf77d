"""Shared fixtures for the numbertiles tests."""
from typing import List

import pytest

from numbertiles import GameModel, GameObserver, GameSettings, ManualScheduler


class RecordingObserver(GameObserver):
    """Keeps every notification as a tuple, in order."""

    def __init__(self):
        self.events = []

    def score_changed(self, score):
        self.events.append(("score", score))

    def tile_relocated(self, source, destination, value):
        self.events.append(("relocated", source, destination, value))

    def tiles_merged(self, first_source, second_source, destination, value):
        self.events.append(("merged", first_source, second_source, destination, value))

    def tile_inserted(self, location, value):
        self.events.append(("inserted", location, value))


def load_rows(model: GameModel, rows: List[List[int]]) -> None:
    """Fills the model from a list of rows, 0 meaning empty."""
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value:
                model.insert_tile((r, c), value)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def model(observer, scheduler):
    return GameModel(GameSettings(dimension=4, threshold=2048), observer=observer, scheduler=scheduler)
