"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Sequence

EXTENSION = ".ber"
WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

BASIC_TILES = frozenset(WALL + FLOOR + COLLECTIBLE + EXIT + PLAYER)
BONUS_TILES = BASIC_TILES | {ENEMY}

Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map file is missing or does not describe a playable map."""


@dataclass
class GameMap:
    """A validated map grid together with the positions found in it."""

    grid: list[list[str]]
    start: Position
    exit: Position
    collectibles: int
    enemy: Position | None = None

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``."""
        return self.grid[y][x]

    def count(self, tile: str) -> int:
        """Return how many cells of the grid hold ``tile``."""
        return sum(row.count(tile) for row in self.grid)


def _scanned_cells(rows: Sequence[str]) -> Iterator[tuple[int, int, str]]:
    """Yield ``(x, y, tile)`` for every cell outside the last row and last column."""
    for y, row in enumerate(rows[:-1]):
        for x, tile in enumerate(row[:-1]):
            yield x, y, tile


def read_rows(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into rows of equal length, without line endings."""
    path = os.fspath(path)
    if os.path.isdir(path):
        raise MapError("Lines size different")
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapError("No map found") from exc

    rows = content.split("\n")
    if rows[-1] == "":
        rows.pop()
    if not rows:
        raise MapError("Lines size different")
    first = len(rows[0])
    if any(len(row) != first for row in rows[1:]):
        raise MapError("Lines size different")
    return rows


def check_map_name(path: str | os.PathLike[str]) -> None:
    """Require a file name of at least five characters ending in ``.ber``."""
    name = os.fspath(path)
    dot = name.rfind(".")
    base = name.rsplit("/", 1)[-1]
    if dot < 0 or len(base) < 5 or name[dot:] != EXTENSION:
        raise MapError(f"File name must end with {EXTENSION}")


def check_size(rows: Sequence[str]) -> None:
    """Reject maps that are too small to play on."""
    height = len(rows)
    # A single-row file never has its width measured.
    width = len(rows[0]) if height > 1 else 0
    if (height < 5 and width < 3) or (height < 3 and width < 5):
        raise MapError("Map too small")


def check_charset(rows: Sequence[str], allowed) -> None:
    """Reject maps holding characters outside ``allowed``."""
    allowed = set(allowed)
    if any(tile not in allowed for _, _, tile in _scanned_cells(rows)):
        raise MapError("Bad mapping")


def check_walls(rows: Sequence[str]) -> None:
    """Require the map border to be made of walls."""
    if len(rows) < 2 or len(rows[0]) < 2:
        return
    top, bottom = rows[0][:-1], rows[-1][:-1]
    sides = [(row[0], row[-1]) for row in rows[:-1]]
    if (
        any(tile != WALL for tile in top)
        or any(tile != WALL for tile in bottom)
        or any(left != WALL or right != WALL for left, right in sides)
    ):
        raise MapError("Map not enclosed/surrounded by walls")


def check_goals(rows: Sequence[str], with_enemies: bool = False) -> int:
    """Check the counts of goal tiles and return the number of collectibles."""
    counts = {COLLECTIBLE: 0, EXIT: 0, PLAYER: 0, ENEMY: 0}
    for _, _, tile in _scanned_cells(rows):
        if tile in counts:
            counts[tile] += 1
    bad = (
        counts[COLLECTIBLE] < 1
        or counts[EXIT] != 1
        or counts[PLAYER] != 1
        or (with_enemies and counts[ENEMY] < 1)
    )
    if bad:
        detail = "or no enemy or just 1 exit" if with_enemies else "or just 1 exit"
        raise MapError(
            f"Map does not have a item to collect, {detail} or just 1 player"
        )
    return counts[COLLECTIBLE]


def find_last(rows: Sequence[str], tile: str) -> Position | None:
    """Return the ``(x, y)`` of the last ``tile`` in scan order, or None."""
    found = None
    for x, y, cell in _scanned_cells(rows):
        if cell == tile:
            found = (x, y)
    return found


def check_path(rows: Sequence[str], start: Position) -> None:
    """Require every collectible and the exit to be reachable from ``start``.

    Walls and enemies block the way; the exit can be reached but not crossed.
    """
    total = sum(1 for _, _, tile in _scanned_cells(rows) if tile == COLLECTIBLE)
    height = len(rows)
    collected = 0
    exit_reached = False
    seen: set[Position] = set()
    queue: deque[Position] = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen or not (0 <= y < height and 0 <= x < len(rows[y])):
            continue
        tile = rows[y][x]
        if tile in (WALL, ENEMY):
            continue
        seen.add((x, y))
        if tile == COLLECTIBLE:
            collected += 1
        elif tile == EXIT:
            exit_reached = True
            continue
        queue.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))
    if collected != total or not exit_reached:
        raise MapError("No path to conclude map")


def load_map(path: str | os.PathLike[str], with_enemies: bool = False) -> GameMap:
    """Read and validate a map file, returning the playable map."""
    rows = read_rows(path)
    check_size(rows)
    check_charset(rows, BONUS_TILES if with_enemies else BASIC_TILES)
    check_walls(rows)
    collectibles = check_goals(rows, with_enemies)
    check_map_name(path)
    start = find_last(rows, PLAYER)
    exit_pos = find_last(rows, EXIT)
    if start is None or exit_pos is None:
        raise MapError("No path to conclude map")
    enemy = find_last(rows, ENEMY) if with_enemies else None
    check_path(rows, start)
    return GameMap(
        grid=[list(row) for row in rows],
        start=start,
        exit=exit_pos,
        collectibles=collectibles,
        enemy=enemy,
    )