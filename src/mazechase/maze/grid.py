from __future__ import annotations

from typing import Dict, Generator, Iterable, List, Optional, Sequence, Tuple

from .tiles import Tile, is_walkable_tile

CARDINAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Maze:
    """An immutable, bounds-checked 2D grid of wall/floor cells.

    Rows are stored as tuples so a maze can be shared freely between the
    session state and any number of snapshots without defensive copies.
    All access goes through methods that never raise on out-of-bounds
    coordinates, except :meth:`get`, which raises to make misuse obvious.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, rows: Iterable[Iterable[Tile]]) -> None:
        tiles = tuple(tuple(row) for row in rows)
        if not tiles or not tiles[0]:
            raise ValueError("Maze dimensions must be positive")
        width = len(tiles[0])
        for i, row in enumerate(tiles):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
            for tile in row:
                if not isinstance(tile, Tile):
                    raise TypeError("maze cells must be Tile enum members")
        self._w = width
        self._h = len(tiles)
        # tiles[y][x]
        self._tiles: Tuple[Tuple[Tile, ...], ...] = tiles

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._tiles

    def is_within(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def get(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y); raises IndexError when out of bounds."""
        if not self.is_within(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for maze {self._w}x{self._h}")
        return self._tiles[y][x]

    def safe_get(self, x: int, y: int) -> Optional[Tile]:
        if not self.is_within(x, y):
            return None
        return self._tiles[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is in-bounds and a floor cell. Never raises."""
        tile = self.safe_get(x, y)
        if tile is None:
            return False
        return is_walkable_tile(tile)

    def neighbors(self, x: int, y: int) -> Generator[Tuple[int, int], None, None]:
        """Yield in-bounds cardinal neighbours of (x, y)."""
        for dx, dy in CARDINAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.is_within(nx, ny):
                yield (nx, ny)

    def cells(self, tile: Tile) -> Generator[Tuple[int, int], None, None]:
        for y, row in enumerate(self._tiles):
            for x, t in enumerate(row):
                if t is tile:
                    yield (x, y)

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self._tiles)

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, Tile]] = None) -> "Maze":
        """Create a Maze from an ASCII layout ('#' wall, '.' floor by default)."""
        if not lines:
            raise ValueError("lines must not be empty")
        mapping = mapping or {".": Tile.FLOOR, "#": Tile.WALL}
        rows: List[List[Tile]] = []
        for y, line in enumerate(lines):
            row: List[Tile] = []
            for x, ch in enumerate(line):
                try:
                    row.append(mapping[ch])
                except KeyError:
                    raise ValueError(f"Unknown maze character {ch!r} at ({x}, {y})") from None
            rows.append(row)
        return cls(rows)

    def to_lines(self, reverse_mapping: Optional[Dict[Tile, str]] = None) -> List[str]:
        reverse_mapping = reverse_mapping or {Tile.FLOOR: ".", Tile.WALL: "#"}
        return ["".join(reverse_mapping.get(t, "?") for t in row) for row in self._tiles]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __repr__(self) -> str:
        return f"Maze(width={self._w}, height={self._h})"
