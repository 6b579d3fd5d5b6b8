import pytest

from solong.floodfill import check_reachable, flood_fill, unreachable_cells
from solong.maps import GameMap, MapError, Position, parse_map

OPEN_MAP = "11111\n1P0C1\n10E01\n11111\n"
CUT_OFF = ("1111111", "1P01C01", "1111111")


def test_single_open_cell_reaches_only_itself():
    assert flood_fill(["111", "101", "111"], (1, 1)) == {Position(1, 1)}


def test_start_on_wall_reaches_nothing():
    assert flood_fill(["111", "101", "111"], (0, 0)) == frozenset()


def test_start_off_grid_reaches_nothing():
    assert flood_fill(["111", "101", "111"], (5, 5)) == frozenset()


def test_exit_blocks_the_fill():
    reached = flood_fill(["11111", "1PE01", "11111"], (1, 1))
    assert Position(1, 3) not in reached
    assert Position(1, 2) not in reached
    assert Position(1, 1) in reached


def test_fill_never_contains_walls_or_exit():
    game_map = parse_map(OPEN_MAP)
    reached = flood_fill(game_map.rows, game_map.player)
    assert set(reached) == {
        Position(1, 1),
        Position(1, 2),
        Position(1, 3),
        Position(2, 1),
        Position(2, 3),
    }
    assert game_map.exit not in reached


def test_fill_without_walls_stops_at_grid_edge():
    grid = ["0" * 300] * 300
    reached = flood_fill(grid, (0, 0))
    assert len(reached) == 300 * 300


def test_open_map_has_no_unreachable_cells():
    game_map = parse_map(OPEN_MAP)
    assert unreachable_cells(game_map) == []


def test_check_reachable_returns_every_open_cell():
    game_map = parse_map(OPEN_MAP)
    reached = check_reachable(game_map)
    open_cells = {
        cell
        for char in "0CP"
        for cell in game_map.positions(char)
    }
    assert reached == open_cells


def test_cut_off_cells_are_listed_in_row_order():
    game_map = GameMap(CUT_OFF)
    missing = unreachable_cells(game_map)
    assert missing == sorted(missing)
    assert game_map.find("C") in missing
    assert game_map.player not in missing


def test_check_reachable_raises_for_cut_off_collectible():
    with pytest.raises(MapError, match="player cant go for all map"):
        check_reachable(GameMap(CUT_OFF))


def test_explicit_start_overrides_player():
    game_map = GameMap(CUT_OFF)
    collectible = game_map.find("C")
    missing = unreachable_cells(game_map, collectible)
    assert game_map.player in missing
    assert collectible not in missing