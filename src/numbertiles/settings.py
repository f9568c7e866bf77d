# settings.py
# Validated game settings shared by the model and the terminal driver.

from pydantic import BaseModel, Field, field_validator

MIN_THRESHOLD = 8


class GameSettings(BaseModel):
    """Settings for creating a new game."""
    dimension: int = Field(
        default=4,
        ge=2,  # Board size must be at least 2x2
        description="Size of the N x N game board (e.g., 4 for a 4x4 board)."
    )
    threshold: int = Field(
        default=2048,
        gt=0,
        description="Tile value to reach to win. Values below 8 are raised to 8."
    )
    max_commands: int = Field(
        default=100,
        gt=0,
        description="How many moves may wait in the queue before new ones are dropped."
    )
    queue_delay: float = Field(
        default=0.3,
        ge=0,
        description="Seconds to wait after a board-changing move before draining more moves."
    )

    @field_validator("threshold")
    @classmethod
    def _raise_low_threshold(cls, value: int) -> int:
        return max(value, MIN_THRESHOLD)
