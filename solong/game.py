"""Game rules: moving the player, picking up collectibles, reaching the exit."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from solong.maps import EXIT, WALL, GameMap, Position


class Key(enum.IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100


_STEPS = {
    Key.W: (-1, 0),
    Key.S: (1, 0),
    Key.A: (0, -1),
    Key.D: (0, 1),
}


@dataclass(frozen=True)
class MoveResult:
    """What happened when a movement key was pressed."""

    key: Key
    moved: bool
    position: Position
    moves: int
    collected: bool
    exit_opened: bool
    won: bool


@dataclass
class Game:
    """The state of one play-through of a map."""

    game_map: GameMap
    player: Position = field(init=False)
    collectibles: set[Position] = field(init=False)
    moves: int = field(default=0, init=False)
    facing: Key = field(default=Key.S, init=False)
    won: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.player = self.game_map.player
        self.collectibles = set(self.game_map.collectibles)

    @property
    def exit(self) -> Position:
        return self.game_map.exit

    def remaining(self) -> int:
        """Number of collectibles still on the map."""
        return len(self.collectibles)

    def exit_open(self) -> bool:
        """True once every collectible has been picked up."""
        return not self.collectibles

    def _tile(self, position: Position) -> str:
        try:
            return self.game_map.at(position)
        except IndexError:
            return WALL

    def move(self, key: Key | int) -> MoveResult:
        """Press a movement key; every press counts as a move, blocked or not."""
        if self.won:
            raise RuntimeError("the game is already won")
        key = Key(key)
        if key not in _STEPS:
            raise ValueError(f"{key.name} is not a movement key")
        d_row, d_col = _STEPS[key]

        target = Position(self.player.row + d_row, self.player.col + d_col)
        tile = self._tile(target)
        moved = tile != WALL and (tile != EXIT or self.exit_open())
        if moved:
            self.player = target

        collected = self.player in self.collectibles
        if collected:
            self.collectibles.discard(self.player)
        exit_opened = collected and self.exit_open()

        ahead = Position(self.player.row + d_row, self.player.col + d_col)
        self.won = self.exit_open() and (
            self._tile(self.player) == EXIT or self._tile(ahead) == EXIT
        )
        self.moves += 1
        self.facing = key
        return MoveResult(
            key=key,
            moved=moved,
            position=self.player,
            moves=self.moves,
            collected=collected,
            exit_opened=exit_opened,
            won=self.won,
        )