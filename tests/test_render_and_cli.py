import os
import re

from conftest import OPEN_5X5, FixedMazeGenerator, ScriptedRandom, config_for
from mazechase.__main__ import main
from mazechase.app import hex_to_rgb, run_headless
from mazechase.config import GameConfig
from mazechase.engine import Game
from mazechase.render import render_lines, render_status


def test_render_lines_marks_every_layer():
    game = Game(config_for(OPEN_5X5), rng=ScriptedRandom(), generator=FixedMazeGenerator(OPEN_5X5))
    game.apply_directional_intent("down")
    lines = render_lines(game.get_snapshot())
    assert lines == [
        "#####",
        "#..G#",
        "#P..#",
        "#G.G#",
        "#####",
    ]
    assert render_status(game.get_snapshot()) == "Score: 10  Dots left: 8"


def test_render_marks_capture():
    game = Game(config_for(OPEN_5X5), rng=ScriptedRandom(), generator=FixedMazeGenerator(OPEN_5X5))
    game.apply_directional_intent("down")
    game.apply_directional_intent("down")
    game.state.game_over = True
    snapshot = game.get_snapshot()
    assert render_lines(snapshot)[3] == "#X.G#"
    assert render_status(snapshot).endswith("GAME OVER")


def test_hex_to_rgb():
    assert hex_to_rgb("#ff0000") == (255, 0, 0)
    assert hex_to_rgb("0000ff") == (0, 0, 255)


def test_run_headless_reports_loop(capsys):
    code = run_headless(GameConfig(width=12, height=10, seed=3), max_ticks=5)
    out = capsys.readouterr().out
    assert code == 0
    assert "Maze Chase (headless)" in out
    match = re.search(r"Loop complete \(ticks=(\d+)\)", out)
    assert match is not None
    assert 1 <= int(match.group(1)) <= 5
    assert "Score: " in out


def test_cli_headless_entrypoint(capsys):
    assert main(["--headless", "--seed", "5", "--width", "9", "--height", "9", "--max-ticks", "3"]) == 0
    out = capsys.readouterr().out
    assert "Loop complete" in out


def test_cli_headless_via_env(monkeypatch, capsys):
    monkeypatch.setenv("MAZECHASE_HEADLESS", "1")
    assert main(["--seed", "1", "--max-ticks", "2"]) == 0
    assert "Maze Chase (headless)" in capsys.readouterr().out


def test_cli_rejects_bad_configuration(capsys):
    assert main(["--headless", "--width", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_gui_flag_wins_over_headless_env(monkeypatch):
    import mazechase.__main__ as cli

    calls = []
    monkeypatch.setenv("MAZECHASE_HEADLESS", "1")
    monkeypatch.setattr(cli, "run_gui", lambda config: calls.append(config) or 0)
    assert cli.main(["--gui", "--seed", "3"]) == 0
    assert len(calls) == 1 and calls[0].seed == 3
    # The flag picks the runner; the process environment is left alone
    assert os.environ["MAZECHASE_HEADLESS"] == "1"


def test_run_auto_defaults_to_gui(monkeypatch):
    import mazechase.app as app

    calls = []
    monkeypatch.setattr(app, "run_gui", lambda config: calls.append("gui") or 0)
    monkeypatch.setattr(app, "run_headless", lambda config, max_ticks=None: calls.append("headless") or 0)
    config = GameConfig(seed=1)
    assert app.run_auto(config) == 0
    monkeypatch.setenv("MAZECHASE_GUI", "1")
    assert app.run_auto(config) == 0
    monkeypatch.setenv("MAZECHASE_HEADLESS", "1")
    assert app.run_auto(config, max_ticks=2) == 0
    assert calls == ["gui", "gui", "headless"]
