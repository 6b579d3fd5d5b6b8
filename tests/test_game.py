import pytest

from solong.game import Game, Key, MoveResult
from solong.maps import parse_map

CORRIDOR = "1111111\n1P0C0E1\n1111111\n"
ROOM = "11111\n1EP01\n1C001\n11111\n"


def make(text):
    return Game(parse_map(text))


@pytest.mark.parametrize(
    "code, expected",
    [(119, Key.W), (97, Key.A), (115, Key.S), (100, Key.D)],
)
def test_keyboard_codes_map_to_keys(code, expected):
    result = make(CORRIDOR).move(code)
    assert result.key is expected
    assert int(result.key) == code
    assert result.moves == 1


def test_new_game_starts_at_player_with_all_collectibles():
    game = make(CORRIDOR)
    assert game.player == game.game_map.player
    assert game.remaining() == len(game.game_map.collectibles)
    assert game.moves == 0
    assert not game.exit_open()


def test_move_steps_into_open_floor():
    game = make(CORRIDOR)
    start = game.player
    result = game.move(Key.D)
    assert result.moved
    assert result.position == game.player
    assert game.player.col == start.col + 1
    assert game.player.row == start.row
    assert game.facing == Key.D


def test_wall_blocks_but_move_still_counts():
    game = make(ROOM)
    start = game.player
    result = game.move(Key.W)
    assert not result.moved
    assert game.player == start
    assert result.moves == 1


def test_exit_blocks_while_collectibles_remain():
    game = make(ROOM)
    start = game.player
    result = game.move(Key.A)
    assert not result.moved
    assert not result.won
    assert game.player == start


def test_collecting_last_item_opens_exit():
    game = make(CORRIDOR)
    game.move(Key.D)
    result = game.move(Key.D)
    assert result.collected
    assert result.exit_opened
    assert game.remaining() == 0
    assert game.exit_open()
    assert not result.won


def test_facing_exit_with_everything_collected_wins():
    game = make(CORRIDOR)
    results = [game.move(Key.D) for _ in range(3)]
    assert [r.won for r in results] == [False, False, True]
    assert game.won


def test_stepping_onto_exit_after_collecting_wins():
    game = make(ROOM)
    game.move(Key.S)
    assert game.move(Key.A).collected
    result = game.move(Key.W)
    assert result.moved
    assert result.won
    assert game.player == game.exit


def test_moves_count_every_press():
    game = make(ROOM)
    keys = [Key.W, Key.D, Key.W, Key.S]
    results = [game.move(key) for key in keys]
    assert [r.moves for r in results] == list(range(1, len(keys) + 1))


def test_integer_key_codes_are_accepted():
    game = make(CORRIDOR)
    result = game.move(int(Key.D))
    assert isinstance(result, MoveResult) and result.key is Key.D
    assert result.moved


def test_escape_is_not_a_movement_key():
    with pytest.raises(ValueError):
        make(CORRIDOR).move(Key.ESC)


def test_unknown_key_code_is_rejected():
    with pytest.raises(ValueError):
        make(CORRIDOR).move(42)


def test_no_moves_after_winning():
    game = make(CORRIDOR)
    for _ in range(3):
        game.move(Key.D)
    with pytest.raises(RuntimeError):
        game.move(Key.A)


def test_revisiting_a_cell_does_not_collect_twice():
    game = make(ROOM)
    game.move(Key.S)
    game.move(Key.A)
    game.move(Key.D)
    result = game.move(Key.A)
    assert not result.collected
    assert game.remaining() == 0