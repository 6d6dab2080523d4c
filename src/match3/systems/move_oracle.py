from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from match3.components.tile import Coord, Move, Tile, TokenType
from match3.systems.board_ops import token_view
from match3.systems.match import find_matches


def _candidate_swaps(rows: int, cols: int) -> Iterator[Move]:
    # Row-major; at each cell the right neighbour is tried before the one below.
    for row in range(rows):
        for col in range(cols):
            if col + 1 < cols:
                yield Move(Coord(row, col), Coord(row, col + 1))
            if row + 1 < rows:
                yield Move(Coord(row, col), Coord(row + 1, col))


def _swap_creates_match(tokens: List[List[Optional[TokenType]]], move: Move) -> bool:
    (ar, ac), (br, bc) = move
    tokens[ar][ac], tokens[br][bc] = tokens[br][bc], tokens[ar][ac]
    try:
        return bool(find_matches(tokens))
    finally:
        tokens[ar][ac], tokens[br][bc] = tokens[br][bc], tokens[ar][ac]


def find_valid_swaps(board: Sequence[Sequence[Optional[Tile]]]) -> Iterator[Move]:
    """Yield every adjacent swap that produces a match, in hint order."""
    tokens = [list(row) for row in token_view(board)]
    rows = len(tokens)
    cols = len(tokens[0]) if rows else 0
    for move in _candidate_swaps(rows, cols):
        if _swap_creates_match(tokens, move):
            yield move


def find_hint_move(board: Sequence[Sequence[Optional[Tile]]]) -> Optional[Move]:
    return next(find_valid_swaps(board), None)


def has_any_valid_move(board: Sequence[Sequence[Optional[Tile]]]) -> bool:
    return find_hint_move(board) is not None
