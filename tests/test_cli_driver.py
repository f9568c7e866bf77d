"""Tests for the terminal driver."""
from numbertiles import cli_driver


def feed(monkeypatch, keys):
    answers = iter(keys)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def fixed_start(tiles):
    """Replaces the random opening with a known set of tiles."""
    def start(model, rng):
        model.reset()
        for location, value in tiles:
            model.insert_tile(location, value)
    return start


def test_quit_after_a_few_moves(monkeypatch, capsys):
    feed(monkeypatch, ["x", "a", "w", "q"])
    assert cli_driver.main(["--seed", "1", "--queue-delay", "0"]) == 0

    out = capsys.readouterr().out
    assert "Invalid input. Use W, A, S, D." in out
    assert "Quitting game." in out
    assert "Score:" in out


def test_invalid_settings(capsys):
    assert cli_driver.main(["--size", "1"]) == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_game_won_ends_loop(monkeypatch, capsys):
    monkeypatch.setattr(cli_driver, "start_game", fixed_start([((0, 0), 4), ((0, 1), 4)]))
    feed(monkeypatch, ["a"])

    assert cli_driver.main(["--seed", "5", "--size", "2", "--threshold", "8", "--queue-delay", "0"]) == 0

    out = capsys.readouterr().out
    assert "Score: 8" in out
    assert "YOU WON!" in out
    assert "Congratulations! You reached the 8 tile!" in out


def test_stuck_board_is_game_over(monkeypatch, capsys):
    tiles = [((0, 0), 2), ((0, 1), 4), ((1, 0), 4), ((1, 1), 2)]
    monkeypatch.setattr(cli_driver, "start_game", fixed_start(tiles))
    feed(monkeypatch, [])

    assert cli_driver.main(["--size", "2", "--threshold", "8"]) == 0

    out = capsys.readouterr().out
    assert "GAME OVER!" in out
    assert "No more moves possible. Better luck next time!" in out
