import pytest

from conftest import OPEN_5X5, FixedMazeGenerator, config_for
from mazechase.engine import DotField, Position, SessionState, is_valid_move, move_player, new_session
from mazechase.maze import Maze
from mazechase.rng import RNG
from mazechase.config import GameConfig


def _session(lines, player=(1, 1)) -> SessionState:
    maze = Maze.from_lines(lines)
    return SessionState(maze=maze, dots=DotField.initialize(maze), player=Position(*player), adversaries=[])


def test_validator_rejects_walls_and_out_of_bounds():
    maze = Maze.from_lines(OPEN_5X5)
    assert is_valid_move(maze, 1, 1) is True
    assert is_valid_move(maze, 0, 1) is False
    assert is_valid_move(maze, -1, 1) is False
    assert is_valid_move(maze, 5, 1) is False
    assert is_valid_move(maze, 2, 99) is False


def test_move_onto_dot_scores_once():
    state = _session(OPEN_5X5)
    assert move_player(state, 1, 0) is True
    assert state.player == Position(2, 1)
    assert state.score == 10

    # Step away and back: the dot is gone now
    assert move_player(state, -1, 0) is True
    assert move_player(state, 1, 0) is True
    assert state.player == Position(2, 1)
    # (1,1) still had its dot, (2,1) does not
    assert state.score == 20


def test_blocked_move_changes_nothing():
    state = _session(OPEN_5X5)
    dots_before = state.dots.as_rows()
    assert move_player(state, -1, 0) is False
    assert move_player(state, 0, -1) is False
    assert state.player == Position(1, 1)
    assert state.score == 0
    assert state.dots.as_rows() == dots_before


@pytest.mark.parametrize("dx,dy", [(0, 0), (1, 1), (2, 0), (0, -2), (-1, 1)])
def test_non_cardinal_offsets_are_ignored(dx, dy):
    state = _session(OPEN_5X5)
    assert move_player(state, dx, dy) is False
    assert state.player == Position(1, 1)


def test_move_after_game_over_is_ignored():
    state = _session(OPEN_5X5)
    state.game_over = True
    dots_before = state.dots.as_rows()
    assert move_player(state, 1, 0) is False
    assert state.player == Position(1, 1)
    assert state.score == 0
    assert state.dots.as_rows() == dots_before


@pytest.mark.parametrize("seed", range(5))
def test_random_walk_never_leaves_the_floor(seed):
    config = GameConfig(width=21, height=17, seed=seed)
    rng = RNG(seed)
    state = new_session(config, rng)
    offsets = [(0, -1), (0, 1), (-1, 0), (1, 0), (2, 0), (1, 1), (0, 0), (-5, 3)]
    for _ in range(300):
        move_player(state, *rng.choice(offsets))
        assert state.maze.is_walkable(state.player.x, state.player.y)


def test_walk_right_along_top_row_of_open_5x5():
    generator = FixedMazeGenerator(OPEN_5X5)
    state = new_session(config_for(OPEN_5X5), RNG(0), generator)

    results = [move_player(state, 1, 0) for _ in range(3)]

    # (4,1) is the border, so the third step is rejected
    assert results == [True, True, False]
    assert state.player == Position(3, 1)
    assert state.score == 20


def test_walk_right_when_fourth_column_is_floor():
    lines = [
        "######",
        "#....#",
        "#....#",
        "######",
    ]
    state = new_session(config_for(lines), RNG(0), FixedMazeGenerator(lines))
    for _ in range(3):
        assert move_player(state, 1, 0) is True
    assert state.player == Position(4, 1)
    assert state.score == 30


def test_custom_reward():
    state = _session(OPEN_5X5)
    move_player(state, 0, 1, reward=25)
    assert state.score == 25
