"""Loading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

_VISITED = "Z"
_ELEMENTS = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})


class MapError(ValueError):
    """Raised when a map file is missing, empty or invalid."""


@dataclass
class GameMap:
    """A validated map and the state of the game played on it."""

    grid: list[list[str]]
    collectibles: int
    player: tuple[int, int]
    moves: int = 0
    finished: bool = False

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)


def check_filename(filename: str | PathLike[str]) -> str:
    """Return ``filename`` as a string if it names a ``.ber`` file."""
    name = str(filename)
    if len(name) < 5 or not name.endswith(".ber"):
        raise MapError("Input MAP as XXX.ber")
    return name


def parse_rows(text: str) -> list[str]:
    """Split map text into its non-empty lines."""
    return [line for line in text.split("\n") if line]


def read_map(filename: str | PathLike[str]) -> list[str]:
    """Read the rows of a map file."""
    try:
        text = Path(filename).read_text(encoding="latin-1")
    except OSError:
        raise MapError("File does not exist") from None
    rows = parse_rows(text)
    if not rows:
        raise MapError("Map is Empty")
    return rows


def check_size(rows: Sequence[str]) -> None:
    """Raise MapError unless every row is as long as the first."""
    if not rows:
        raise MapError("Map is Empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("Map is not rectangular")


def check_walls(rows: Sequence[Sequence[str]]) -> None:
    """Raise MapError unless the map is closed in by walls."""
    if not rows or not rows[0]:
        raise MapError("Map has insufficient walls")
    if any(tile != WALL for tile in rows[0]) or any(tile != WALL for tile in rows[-1]):
        raise MapError("Map has insufficient walls")
    if any(row[0] != WALL or row[-1] != WALL for row in rows[1:-1]):
        raise MapError("Map has insufficient walls")


def count_elements(rows: Sequence[Sequence[str]]) -> tuple[int, int, int]:
    """Return (collectibles, exits, players) after checking every tile is known.

    A map needs at least one collectible, exactly one exit and exactly one
    player.
    """
    collectibles = exits = players = 0
    for row in rows:
        for tile in row:
            if tile not in _ELEMENTS:
                raise MapError("Map has invalid elements")
            if tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
            elif tile == PLAYER:
                players += 1
    if collectibles < 1 or exits != 1 or players != 1:
        raise MapError("Map has invalid elements")
    return collectibles, exits, players


def find_player(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the (x, y) position of the first player tile."""
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                return x, y
    raise ValueError("no player on the map")


def _neighbours(x: int, y: int) -> Iterator[tuple[int, int]]:
    yield x + 1, y
    yield x - 1, y
    yield x, y + 1
    yield x, y - 1


def _inside(grid: list[list[str]], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _gather_collectibles(grid: list[list[str]], start: tuple[int, int]) -> int:
    """Mark every tile reachable without crossing the exit; count collectibles."""
    found = 0
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not _inside(grid, x, y):
            continue
        tile = grid[y][x]
        if tile == COLLECTIBLE:
            found += 1
        elif tile not in (FLOOR, PLAYER):
            continue
        grid[y][x] = _VISITED
        stack.extend(_neighbours(x, y))
    return found


def _reach_exits(grid: list[list[str]], start: tuple[int, int]) -> int:
    """Count exits that touch the area marked by the collectible search."""
    found = 0
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not _inside(grid, x, y):
            continue
        tile = grid[y][x]
        if tile == EXIT:
            found += 1
        elif tile != _VISITED:
            continue
        grid[y][x] = WALL
        stack.extend(_neighbours(x, y))
    return found


def check_valid_path(rows: Sequence[Sequence[str]], collectibles: int, exits: int) -> None:
    """Raise MapError unless the player can reach every collectible and then the exit."""
    grid = [list(row) for row in rows]
    start = find_player(grid)
    missing_collectibles = collectibles - _gather_collectibles(grid, start)
    missing_exits = exits - _reach_exits(grid, start)
    if missing_collectibles or missing_exits:
        raise MapError("No Valid Path")


def load_map(filename: str | PathLike[str]) -> GameMap:
    """Read and validate a map file, returning a fresh game on it."""
    name = check_filename(filename)
    rows = read_map(name)
    check_size(rows)
    check_walls(rows)
    collectibles, exits, _ = count_elements(rows)
    check_valid_path(rows, collectibles, exits)
    return GameMap(
        grid=[list(row) for row in rows],
        collectibles=collectibles,
        player=find_player(rows),
    )