from match3.components.tile import Coord, PowerType, TokenType
from match3.systems.board_ops import token_view
from match3.systems.match import classify_power, find_matches
from tests.helpers import board_from_rows, diagonal_stalemate_rows


def _tokens(rows):
    return token_view(board_from_rows(rows))


def test_no_matches_on_stalemate_pattern():
    assert find_matches(_tokens(diagonal_stalemate_rows(9))) == []


def test_horizontal_run_of_three():
    matches = find_matches(_tokens([
        "AAAB",
        "BCDE",
        "CDEF",
        "DEFA",
    ]))
    assert len(matches) == 1
    match = matches[0]
    assert match.token is TokenType.USDC
    assert match.length == 3
    assert match.cells == (Coord(0, 0), Coord(0, 1), Coord(0, 2))
    assert match.power_type is None and match.power_spawn_cell is None


def test_vertical_run_of_four_spawns_column_clear():
    matches = find_matches(_tokens([
        "ABCD",
        "ACDE",
        "ADEF",
        "AEFB",
    ]))
    assert len(matches) == 1
    match = matches[0]
    assert match.length == 4
    assert match.power_type is PowerType.COL
    assert match.power_spawn_cell == Coord(2, 0)


def test_horizontal_run_of_five_spawns_bomb_in_middle():
    matches = find_matches(_tokens([
        "BBBBB",
        "CDECD",
        "DECDE",
        "ECDEC",
        "CDECD",
    ]))
    assert len(matches) == 1
    assert matches[0].power_type is PowerType.BOMB
    assert matches[0].power_spawn_cell == Coord(0, 2)


def test_corner_shape_reports_both_runs():
    # The vertical pass does not consult cells claimed horizontally.
    matches = find_matches(_tokens([
        "AAAB",
        "ACDE",
        "ADEF",
        "BEFC",
    ]))
    assert len(matches) == 2
    horizontal, vertical = matches
    assert horizontal.cells == (Coord(0, 0), Coord(0, 1), Coord(0, 2))
    assert vertical.cells == (Coord(0, 0), Coord(1, 0), Coord(2, 0))
    assert Coord(0, 0) in horizontal.cells and Coord(0, 0) in vertical.cells


def test_horizontal_matches_precede_vertical_ones():
    matches = find_matches(_tokens([
        "BCDE",
        "CDEB",
        "FFFA",
        "DEBA",
        "EBCA",
    ]))
    assert [m.token for m in matches] == [TokenType.ZORA, TokenType.USDC]


def test_empty_cells_never_match():
    tokens = ((None, None, None), (TokenType.USDC, TokenType.AERO, TokenType.OWB), (None, None, None))
    assert find_matches(tokens) == []


def test_classify_power():
    cells = [Coord(0, c) for c in range(6)]
    assert classify_power(cells[:3], True) == (None, None)
    assert classify_power(cells[:4], True) == (PowerType.ROW, Coord(0, 2))
    assert classify_power(cells[:4], False) == (PowerType.COL, Coord(0, 2))
    assert classify_power(cells, False) == (PowerType.BOMB, Coord(0, 3))
