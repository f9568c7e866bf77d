# cli_driver.py
# This file is intended to be run to play the tile game on the CLI

import argparse
import logging
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from .core import Direction, GameProgressState
from .model import GameModel, GameObserver
from .movequeue import ManualScheduler
from .settings import GameSettings
from .spawn import insert_random_tile, start_game

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {'W': Direction.UP, 'A': Direction.LEFT, 'S': Direction.DOWN, 'D': Direction.RIGHT}


class ConsoleObserver(GameObserver):
    """Logs each board change as it happens."""

    def tile_relocated(self, source, destination, value):
        logger.debug("%d moved %s -> %s", value, source, destination)

    def tiles_merged(self, first_source, second_source, destination, value):
        logger.debug("%s + %s merged into %d at %s", first_source, second_source, value, destination)

    def tile_inserted(self, location, value):
        logger.debug("%d inserted at %s", value, location)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the sliding tile game in a terminal")
    parser.add_argument("--size", type=int, default=4, help="Board dimension")
    parser.add_argument("--threshold", type=int, default=2048, help="Tile value needed to win")
    parser.add_argument("--queue-delay", type=float, default=0.3, help="Settle delay between moves, in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for tile spawns")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        settings = GameSettings(dimension=args.size, threshold=args.threshold, queue_delay=args.queue_delay)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    scheduler = ManualScheduler()
    model = GameModel(settings, observer=ConsoleObserver(), scheduler=scheduler)

    # 1. Initialize game
    start_game(model, rng)
    current_progress = model.progress()
    display_board_state(model, current_progress)

    def on_move_done(changed: bool) -> None:
        # A tile is only added if the move changed the board
        if changed:
            insert_random_tile(model, rng)
        else:
            print("Move did not change the board. Try a different direction.")

    # 2. Game Loop
    while current_progress == GameProgressState.IN_PROGRESS:
        move_input = input("Enter move (W/A/S/D for Up/Left/Down/Right, Q to quit): ").strip().upper()

        if move_input == 'Q':
            print("Quitting game.")
            break

        chosen_direction = DIRECTION_KEYS.get(move_input)
        if not chosen_direction:
            print("Invalid input. Use W, A, S, D.")
            continue

        # 3. Process the move, then let the queue settle before the next one
        model.queue_move(chosen_direction, on_move_done)
        scheduler.advance(settings.queue_delay)

        current_progress = model.progress()
        display_board_state(model, current_progress)

    # 4. Game Ended
    if current_progress == GameProgressState.GAME_WON:
        logger.info("Game won with score %d", model.score)
        print(f"Congratulations! You reached the {settings.threshold} tile!")
    elif current_progress == GameProgressState.GAME_OVER:
        logger.info("Game over with score %d", model.score)
        print("No more moves possible. Better luck next time!")
    return 0


# --- Display Function ---
def display_board_state(model: GameModel, progress: GameProgressState) -> None:
    """Prints the board, score, and game status to the console."""
    print(f"\nScore: {model.score}")
    status_message = {
        GameProgressState.IN_PROGRESS: f"Status: {progress.name}",
        GameProgressState.GAME_WON: "YOU WON!",
        GameProgressState.GAME_OVER: "GAME OVER!"
    }
    print(status_message.get(progress, f"Status: {progress.name} (Unknown)"))

    for row in model.board.rows():
        print("\t".join(str(v) if v else "." for v in row))
    print("-" * (model.dimension * 6))


if __name__ == "__main__":
    sys.exit(main())
