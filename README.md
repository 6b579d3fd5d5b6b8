# solong

A small top-down puzzle game. You walk a character around a walled map and
pick up every collectible. Once the last one is taken the exit opens, and you
win by stepping onto it or pressing a movement key towards it. Every key press
that moves (or tries to move) the player is counted, and the count is printed
as `Movements: N`.

## Installing

```
pip install .
```

## Playing

```
solong path/to/level.ber
```

Use `W`, `A`, `S` and `D` to move. Press `Esc` or close the window to quit;
the game then prints `You press escape or x`. On reaching the open exit it
prints `You win!` and closes.

The window is sized to the map, 32 pixels per tile. Textures are loaded from
`./Textures/`, relative to the directory you start the game from. Any texture
that cannot be loaded is replaced by a plain coloured tile, so the game runs
without them.

If no map is given, or the map is rejected, the command prints `Error` and the
reason, and exits with status 1.

## Map files

A map is a plain text file whose path contains `.ber`. Each line is one row of
tiles; a trailing `\r` on a line and a final empty line are ignored.

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | empty floor  |
| `P`       | player start |
| `C`       | collectible  |
| `E`       | exit         |

A map is accepted only if:

- every row has the same length;
- the map is enclosed by walls;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- it uses no other characters;
- the player can reach every open tile without passing through the exit.

Example:

```
1111111111
1P0C00C0E1
1111111111
```

## Using it as a library

- `solong.maps.load_map(path)` reads and checks a map file and returns a
  `GameMap`; `solong.maps.parse_map(text)` does the same for a string. Both
  raise `MapError` for an invalid map. `GameMap` offers `positions(char)`,
  `find(char)` and `at(position)`, and the `player`, `exit`, `collectibles`
  and `walls` properties; cells are `Position(row, col)`.
- `solong.floodfill.flood_fill(grid, start)` returns the cells reachable from
  a start cell; `unreachable_cells(game_map)` lists the open cells that cannot
  be reached, and `check_reachable(game_map)` raises `MapError` if there are
  any.
- `solong.game.Game` holds the rules of play: `Game.move(key)` takes a `Key`
  (`W`, `A`, `S`, `D`) and returns a `MoveResult`; `remaining()` and
  `exit_open()` report on the collectibles.
- `solong.display.load_game(path)` loads, checks and starts a game;
  `solong.display.Renderer` draws a `Game` onto a pygame surface and turns key
  presses into moves; `solong.display.run(path)` opens the window and plays.

## What it does not do

It plays one map per run. There are no enemies, no saved progress or scores,
and no level editor.

## Running the tests

```
pip install .[test]
pytest
```