import pytest

from solong.mapfile import MapError, parse_map
from solong.validate import (
    MapSummary,
    check_map,
    check_path,
    check_walls,
    count_contents,
    flood_fill,
)

VALID = "1111111\n1P0C0E1\n1111111"
VALID_BONUS = "1111111\n1P0C0E1\n10000G1\n1111111"


def _error(func, *args):
    with pytest.raises(MapError) as info:
        func(*args)
    return info.value.message


def test_check_map_valid_summary_matches_map():
    game_map = parse_map(VALID)
    summary = check_map(game_map, False)
    assert summary.player == game_map.find("P")[0]
    assert summary.collectibles == len(game_map.find("C"))
    assert summary.exits == len(game_map.find("E"))
    assert summary.players == len(game_map.find("P"))


def test_check_map_bonus_counts_enemies():
    game_map = parse_map(VALID_BONUS)
    summary = check_map(game_map, True)
    assert summary.enemies == len(game_map.find("G"))
    assert summary.player == game_map.find("P")[0]


def test_first_row_gap():
    message = _error(check_walls, parse_map("1011111\n1P0C0E1\n1111111"))
    assert message == "wall is incomplete in the first row"


def test_missing_top_right_corner_reports_sides():
    message = _error(check_walls, parse_map("1111110\n1P0C0E1\n1111111"))
    assert message == "wall is incomplete in the sides"


def test_last_row_gap():
    message = _error(check_walls, parse_map("1111111\n1P0C0E1\n1110111"))
    assert message == "wall is incomplete in the last row"


def test_side_gap():
    message = _error(check_walls, parse_map("1111111\n0P0C0E1\n1111111"))
    assert message == "wall is incomplete in the sides"


def test_too_small_map():
    message = _error(check_map, parse_map("1111\n1111"), False)
    assert message == "Map has an invalid aaaa"


def test_no_collectible():
    message = _error(check_map, parse_map("1111111\n1P000E1\n1111111"), False)
    assert message == "Must have at least one collectible"


def test_no_enemy_in_bonus():
    message = _error(check_map, parse_map(VALID), True)
    assert message == "Must have at least one enemy"


def test_two_exits():
    message = _error(check_map, parse_map("1111111\n1PEC0E1\n1111111"), False)
    assert message == "Must have just one exit"


def test_two_players():
    message = _error(check_map, parse_map("1111111\n1PPC0E1\n1111111"), False)
    assert message == "Must have just one starting point"


def test_no_player():
    message = _error(check_map, parse_map("1111111\n100C0E1\n1111111"), False)
    assert message == "Must have just one starting point"


def test_count_contents_ignores_border():
    summary = count_contents(parse_map("C111\n1CP1\n1111"))
    assert summary.collectibles == 1
    assert summary.player == (1, 2)


def test_count_contents_empty_interior():
    assert count_contents(parse_map("111\n111\n111")) == MapSummary()


def test_flood_fill_open_room_reaches_all_floor():
    game_map = parse_map(VALID)
    start = game_map.find("P")[0]
    reached = flood_fill(game_map, start, "1X")
    non_walls = {
        pos
        for tile in "0PCE"
        for pos in game_map.find(tile)
    }
    assert reached == non_walls


def test_flood_fill_respects_blockers():
    game_map = parse_map(VALID_BONUS)
    start = game_map.find("P")[0]
    reached = flood_fill(game_map, start, "1XG")
    assert start in reached
    assert not reached & set(game_map.find("G"))
    assert not reached & set(game_map.find("1"))


def test_flood_fill_from_blocker_is_empty():
    game_map = parse_map(VALID)
    assert flood_fill(game_map, (0, 0), "1X") == frozenset()


def test_flood_fill_does_not_change_map():
    game_map = parse_map(VALID)
    before = game_map.copy()
    flood_fill(game_map, game_map.find("P")[0], "1X")
    assert game_map == before


def test_check_path_valid_reaches_exit_and_collectibles():
    game_map = parse_map(VALID)
    reached = check_path(game_map, game_map.find("P")[0], False)
    assert set(game_map.find("E")) <= reached
    assert set(game_map.find("C")) <= reached


def test_check_path_unreachable_collectible():
    game_map = parse_map("1111111\n1P01C01\n1E00111\n1111111")
    message = _error(check_path, game_map, game_map.find("P")[0], False)
    assert message == "Map has an invalid path"


def test_check_path_invalid_character():
    game_map = parse_map("1111111\n1P0Z0E1\n1C00001\n1111111")
    message = _error(check_path, game_map, game_map.find("P")[0], False)
    assert message == "Map has an invalid caracter"


def test_enemy_is_invalid_without_bonus():
    game_map = parse_map("1111111\n1P0CGE1\n1000001\n1111111")
    message = _error(check_path, game_map, game_map.find("P")[0], False)
    assert message == "Map has an invalid caracter"


def test_enemy_blocks_path_in_bonus():
    game_map = parse_map("1111111\n1P0CGE1\n1111111")
    message = _error(check_path, game_map, game_map.find("P")[0], True)
    assert message == "Map has an invalid path"


def test_enemy_accepted_in_bonus_when_avoidable():
    game_map = parse_map(VALID_BONUS)
    reached = check_path(game_map, game_map.find("P")[0], True)
    assert set(game_map.find("E")) <= reached
    assert not reached & set(game_map.find("G"))


def test_check_path_invalid_start():
    game_map = parse_map(VALID)
    assert _error(check_path, game_map, (10, 10), False) == "Map has an invalid start"
    assert _error(check_path, game_map, None, False) == "Map has an invalid start"