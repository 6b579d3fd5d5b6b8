"""Map files: reading, validating and looking up tiles."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, NamedTuple, Sequence, Union

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})
MAP_SUFFIX = ".ber"

PathLike = Union[str, "os.PathLike[str]"]


class MapError(ValueError):
    """Raised when a map file cannot be read or is not a valid map."""


class Position(NamedTuple):
    """A cell on the map, counted from the top-left corner."""

    row: int
    col: int


@dataclass(frozen=True)
class GameMap:
    """A rectangular grid of tiles, one string per row."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def positions(self, char: str) -> Iterator[Position]:
        """Yield every cell holding ``char``, row by row, left to right."""
        for row, line in enumerate(self.rows):
            for col, tile in enumerate(line):
                if tile == char:
                    yield Position(row, col)

    def find(self, char: str) -> Position | None:
        """Return the first cell holding ``char``, or None if there is none."""
        return next(self.positions(char), None)

    def at(self, position: tuple[int, int]) -> str:
        """Return the tile at ``position``; IndexError if it is off the map."""
        row, col = position
        if not (0 <= row < self.height and 0 <= col < len(self.rows[row])):
            raise IndexError(f"position {tuple(position)} is outside the map")
        return self.rows[row][col]

    def _require(self, char: str) -> Position:
        found = self.find(char)
        if found is None:
            raise MapError(f"invalid map: no {char!r} tile")
        return found

    @property
    def player(self) -> Position:
        return self._require(PLAYER)

    @property
    def exit(self) -> Position:
        return self._require(EXIT)

    @property
    def collectibles(self) -> tuple[Position, ...]:
        return tuple(self.positions(COLLECTIBLE))

    @property
    def walls(self) -> tuple[Position, ...]:
        return tuple(self.positions(WALL))


def check_extension(path: PathLike) -> None:
    """Reject a map path that does not mention the map suffix."""
    if MAP_SUFFIX not in str(os.fspath(path)):
        raise MapError(f"invalid map no {MAP_SUFFIX}")


def check_width(lines: Sequence[str]) -> int:
    """Return the common length of ``lines``; MapError if they differ."""
    if not lines:
        return 0
    width = len(lines[0])
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise MapError(
                f"invalid width: line {number} has {len(line)} tiles, expected {width}"
            )
    return width


def check_layout(lines: Sequence[str], height: int, width: int) -> Counter[str]:
    """Check walls, tile set and item counts; return the count of each tile."""
    for row, line in enumerate(lines):
        for col, tile in enumerate(line):
            on_border = row in (0, height - 1) or col in (0, width - 1)
            if on_border and tile != WALL:
                raise MapError(
                    f"invalid map: cell ({row}, {col}) on the border is not a wall"
                )
            if tile not in TILES:
                raise MapError(f"invalid map: unknown tile {tile!r} at ({row}, {col})")
    counts = Counter("".join(lines))
    if counts[EXIT] != 1 or counts[PLAYER] != 1 or counts[COLLECTIBLE] < 1:
        raise MapError(
            "invalid map: needs exactly one exit, exactly one player "
            "and at least one collectible"
        )
    return counts


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_map(text: str) -> GameMap:
    """Validate the text of a map and return it as a GameMap."""
    lines = _split_lines(text)
    width = check_width(lines)
    check_layout(lines, len(lines), width)
    return GameMap(tuple(lines))


def load_map(path: PathLike) -> GameMap:
    """Read, validate and return the map stored at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("invalid path") from exc
    check_extension(path)
    return parse_map(data.decode("latin-1"))