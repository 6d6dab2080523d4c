from match3.components.tile import Coord, Move
from match3.systems.move_oracle import find_hint_move, find_valid_swaps, has_any_valid_move
from tests.helpers import board_from_rows, diagonal_stalemate_rows

HINT_BOARD = [
    "ACABC",
    "CBCDE",
    "EDEFA",
    "AFABC",
    "ABDDE",
]


def test_stalemate_board_has_no_moves():
    board = board_from_rows(diagonal_stalemate_rows(9))
    assert not has_any_valid_move(board)
    assert find_hint_move(board) is None


def test_hint_is_first_swap_in_row_major_order():
    board = board_from_rows(HINT_BOARD)
    assert has_any_valid_move(board)
    assert find_hint_move(board) == Move(Coord(0, 1), Coord(1, 1))


def test_right_neighbour_tried_before_down():
    board = board_from_rows([
        "BACD",
        "ABBE",
        "ACEF",
        "DEFC",
    ])
    # Swapping right completes the A column, swapping down completes the B row.
    assert find_hint_move(board) == Move(Coord(0, 0), Coord(0, 1))
    assert Move(Coord(0, 0), Coord(1, 0)) in list(find_valid_swaps(board))


def test_find_valid_swaps_does_not_mutate_board():
    board = board_from_rows(HINT_BOARD)
    swaps = list(find_valid_swaps(board))
    assert swaps[0] == Move(Coord(0, 1), Coord(1, 1))
    assert board == board_from_rows(HINT_BOARD)
