"""Tests for GameSettings validation."""
import pytest
from pydantic import ValidationError

from numbertiles import GameSettings


def test_defaults():
    settings = GameSettings()
    assert settings.dimension == 4
    assert settings.threshold == 2048
    assert settings.max_commands == 100
    assert settings.queue_delay == 0.3


@pytest.mark.parametrize("field, value", [("dimension", 1), ("threshold", 0), ("max_commands", 0), ("queue_delay", -1)])
def test_out_of_range_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        GameSettings(**{field: value})


def test_low_threshold_is_raised_to_minimum():
    assert GameSettings(threshold=4).threshold == 8
    assert GameSettings(threshold=64).threshold == 64
