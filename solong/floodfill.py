"""Reachability checks: can the player walk to every open cell of a map?"""

from __future__ import annotations

from typing import Sequence

from solong.maps import EXIT, WALL, GameMap, MapError, Position

_BLOCKING = frozenset({WALL, EXIT})


def flood_fill(grid: Sequence[str], start: tuple[int, int]) -> frozenset[Position]:
    """Return every cell reachable from ``start`` without crossing a wall or the exit.

    Walls and the exit stop the fill, as does the edge of the grid. A start
    cell that is itself blocked or off the grid reaches nothing.
    """
    height = len(grid)
    reached: set[Position] = set()
    pending = [Position(*start)]
    while pending:
        cell = pending.pop()
        if cell in reached:
            continue
        row, col = cell
        if not (0 <= row < height and 0 <= col < len(grid[row])):
            continue
        if grid[row][col] in _BLOCKING:
            continue
        reached.add(cell)
        pending.extend(
            (
                Position(row - 1, col),
                Position(row + 1, col),
                Position(row, col - 1),
                Position(row, col + 1),
            )
        )
    return frozenset(reached)


def unreachable_cells(
    game_map: GameMap, start: tuple[int, int] | None = None
) -> list[Position]:
    """List the open cells the player cannot reach, row by row.

    ``start`` defaults to the player's position on the map.
    """
    origin = game_map.player if start is None else Position(*start)
    reached = flood_fill(game_map.rows, origin)
    return [
        Position(row, col)
        for row, line in enumerate(game_map.rows)
        for col, tile in enumerate(line)
        if tile not in _BLOCKING and (row, col) not in reached
    ]


def check_reachable(
    game_map: GameMap, start: tuple[int, int] | None = None
) -> frozenset[Position]:
    """Return the reachable cells; MapError if any open cell is cut off."""
    origin = game_map.player if start is None else Position(*start)
    missing = unreachable_cells(game_map, origin)
    if missing:
        row, col = missing[0]
        raise MapError(
            f"player cant go for all map: cell ({row}, {col}) "
            f"holding {game_map.rows[row][col]!r} is unreachable"
        )
    return flood_fill(game_map.rows, origin)