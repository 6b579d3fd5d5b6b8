"""Drawing the game with pygame and running the window's event loop."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Mapping, Sequence, TextIO

import pygame

from solong.floodfill import check_reachable
from solong.game import Game, Key, MoveResult
from solong.maps import GameMap, MapError, PathLike, Position, load_map

TILE_SIZE = 32
WINDOW_TITLE = "so_long"
TEXTURE_DIR = Path("Textures")
TEXTURE_FILES = {
    "player_up": "Gojo.xpm",
    "player_down": "Gojo_back.xpm",
    "player_left": "Gojo_left.xpm",
    "player_right": "Gojo_right.xpm",
    "floor": "Floor.xpm",
    "wall": "Tree.xpm",
    "exit": "exit.xpm",
    "exit_open": "exit_out.xpm",
    "collectible": "Coleccionable.xpm",
}

_FALLBACK_COLOURS = {
    "player_up": (40, 90, 220),
    "player_down": (30, 70, 180),
    "player_left": (60, 110, 230),
    "player_right": (80, 130, 240),
    "floor": (70, 150, 60),
    "wall": (30, 80, 30),
    "exit": (120, 60, 20),
    "exit_open": (240, 200, 40),
    "collectible": (220, 40, 160),
}

# Which picture of the player is shown after each movement key.
_FACING_TEXTURE = {
    Key.W: "player_down",
    Key.S: "player_up",
    Key.A: "player_left",
    Key.D: "player_right",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def _load_textures(directory: Path) -> dict[str, pygame.Surface]:
    """Load every texture, using a plain coloured tile for any that fails."""
    textures: dict[str, pygame.Surface] = {}
    for name, filename in TEXTURE_FILES.items():
        try:
            textures[name] = pygame.image.load(str(directory / filename))
        except (pygame.error, OSError):
            tile = pygame.Surface((TILE_SIZE, TILE_SIZE))
            tile.fill(_FALLBACK_COLOURS[name])
            textures[name] = tile
    return textures


class Renderer:
    """Draws a game onto a surface and turns key presses into moves."""

    def __init__(
        self,
        game: Game,
        surface: pygame.Surface,
        textures: Mapping[str, pygame.Surface] | None = None,
        *,
        texture_dir: PathLike = TEXTURE_DIR,
        out: TextIO | None = None,
    ) -> None:
        self.game = game
        self.surface = surface
        self.textures = (
            dict(textures) if textures is not None else _load_textures(Path(texture_dir))
        )
        self.out = out if out is not None else sys.stdout
        self.running = True

    def _blit(self, name: str, position: Position) -> None:
        row, col = position
        self.surface.blit(self.textures[name], (col * TILE_SIZE, row * TILE_SIZE))

    def _draw_background(self) -> None:
        floor = self.textures["floor"]
        step_x, step_y = floor.get_size()
        if step_x <= 0 or step_y <= 0:
            return
        width, height = self.surface.get_size()
        for y in range(0, height, step_y):
            for x in range(0, width, step_x):
                self.surface.blit(floor, (x, y))

    def draw_all(self) -> None:
        """Draw the floor, the walls, the collectibles, the player and the exit."""
        self._draw_background()
        for wall in self.game.game_map.walls:
            self._blit("wall", wall)
        for item in sorted(self.game.collectibles):
            self._blit("collectible", item)
        self._blit("player_up", self.game.player)
        self._blit("exit_open" if self.game.exit_open() else "exit", self.game.exit)

    def _quit(self) -> None:
        print("You press escape or x", file=self.out)
        self.running = False

    def handle_key(self, key: Key | int) -> MoveResult | None:
        """React to a key; return the move made, or None if nothing moved."""
        try:
            key = Key(key)
        except ValueError:
            return None
        if not self.running:
            return None
        if key is Key.ESC:
            self._quit()
            return None
        previous = self.game.player
        result = self.game.move(key)
        self._blit("floor", previous)
        if result.exit_opened:
            self._blit("exit_open", self.game.exit)
        if result.won:
            print("You win!", file=self.out)
            self.running = False
            return result
        print(f"Movements: {result.moves}", file=self.out)
        self._blit(_FACING_TEXTURE[key], self.game.player)
        return result


def load_game(path: PathLike) -> Game:
    """Load and validate the map at ``path`` and start a game on it."""
    game_map: GameMap = load_map(path)
    check_reachable(game_map)
    return Game(game_map)


def run(path: PathLike) -> int:
    """Open a window on the map at ``path`` and play until it is closed or won."""
    game = load_game(path)
    pygame.init()
    try:
        size = (game.game_map.width * TILE_SIZE, game.game_map.height * TILE_SIZE)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(game, screen)
        renderer.draw_all()
        pygame.display.flip()
        clock = pygame.time.Clock()
        while renderer.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    renderer.handle_key(Key.ESC)
                elif event.type == pygame.KEYDOWN:
                    key = _PYGAME_KEYS.get(event.key)
                    if key is not None:
                        renderer.handle_key(key)
                if not renderer.running:
                    break
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: play the map named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Error\nusage: {WINDOW_TITLE} <map{'.ber'}>")
        return 1
    try:
        return run(args[0])
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1