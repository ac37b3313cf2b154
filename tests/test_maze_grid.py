import pytest

from mazechase.maze import Maze, Tile


def test_from_lines_and_to_lines_roundtrip():
    ascii_map = [
        "###",
        "#.#",
        "###",
    ]
    maze = Maze.from_lines(ascii_map)

    assert (maze.width, maze.height) == (3, 3)
    assert maze.is_walkable(1, 1) is True
    assert maze.is_walkable(0, 0) is False
    assert maze.to_lines() == ascii_map


def test_is_walkable_and_safe_get_never_raise():
    maze = Maze.from_lines(["###", "#.#", "###"])

    assert maze.is_walkable(-1, 1) is False
    assert maze.is_walkable(1, -1) is False
    assert maze.is_walkable(3, 1) is False
    assert maze.is_walkable(1, 3) is False
    assert maze.safe_get(3, 1) is None

    # get() raises on OOB to catch misuse
    with pytest.raises(IndexError):
        maze.get(-1, 0)


def test_neighbors_stay_in_bounds():
    maze = Maze.from_lines(["..", ".."])
    assert set(maze.neighbors(0, 0)) == {(1, 0), (0, 1)}
    assert set(maze.neighbors(1, 1)) == {(0, 1), (1, 0)}


def test_maze_is_immutable_and_hashable():
    maze = Maze.from_lines(["#.#"])
    with pytest.raises(AttributeError):
        maze.extra = 1
    with pytest.raises(TypeError):
        maze.rows[0][1] = Tile.WALL  # type: ignore[index]
    assert hash(maze) == hash(Maze.from_lines(["#.#"]))
    assert maze.count(Tile.FLOOR) == 1
    assert list(maze.cells(Tile.FLOOR)) == [(1, 0)]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        [""],
        ["##", "#"],
        ["#x#"],
    ],
)
def test_bad_layouts_are_rejected(lines):
    with pytest.raises(ValueError):
        Maze.from_lines(lines)
