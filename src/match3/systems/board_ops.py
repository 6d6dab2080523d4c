from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from match3.components.board import BoardConfig
from match3.components.game_state import TileGrid
from match3.components.resolve_step import TileMovement
from match3.components.tile import Tile, TokenType
from match3.utils.tile_ids import TileIdGenerator

# Mutable working copy used while resolving a swap; None marks an empty cell.
WorkGrid = List[List[Optional[Tile]]]
TokenGrid = Tuple[Tuple[Optional[TokenType], ...], ...]
Position = Tuple[int, int]


def draw_token(rng: random.Random, tokens: Sequence[TokenType]) -> TokenType:
    return rng.choice(tokens)


def _would_complete_run(rows: WorkGrid, row: int, col: int, token: TokenType) -> bool:
    # Only the two nearest cells already placed to the left and above are consulted.
    if col >= 2 and rows[row][col - 1].token == token and rows[row][col - 2].token == token:
        return True
    if row >= 2 and rows[row - 1][col].token == token and rows[row - 2][col].token == token:
        return True
    return False


def create_board(
    rng: random.Random,
    ids: TileIdGenerator,
    config: BoardConfig | None = None,
) -> TileGrid:
    """Fill a board cell by cell so that no placement completes a run of three.

    Each cell redraws up to ``config.max_placement_redraws`` times and then
    keeps its last draw, so a tiny token set can still yield a matching board.
    """
    config = config or BoardConfig()
    rows: WorkGrid = []
    for row in range(config.size):
        rows.append([])
        for col in range(config.size):
            token = draw_token(rng, config.tokens)
            redraws = 0
            while _would_complete_run(rows, row, col, token) and redraws < config.max_placement_redraws:
                token = draw_token(rng, config.tokens)
                redraws += 1
            rows[row].append(ids.new_tile(token))
    return freeze_board(rows)


def in_bounds(board: Sequence[Sequence[object]], coord: Position) -> bool:
    row, col = coord
    size = len(board)
    return 0 <= row < size and 0 <= col < len(board[row])


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def clone_board(board: Sequence[Sequence[Optional[Tile]]]) -> WorkGrid:
    # Tiles are frozen, so a shallow copy of each row is a full clone.
    return [list(row) for row in board]


def freeze_board(grid: Sequence[Sequence[Optional[Tile]]]) -> TileGrid:
    return tuple(tuple(row) for row in grid)


def token_view(board: Sequence[Sequence[Optional[Tile]]]) -> TokenGrid:
    """Strip tile identity, keeping only the token of each cell."""
    return tuple(tuple(tile.token if tile is not None else None for tile in row) for row in board)


def swap_cells(grid: WorkGrid, a: Position, b: Position) -> None:
    (ar, ac), (br, bc) = a, b
    grid[ar][ac], grid[br][bc] = grid[br][bc], grid[ar][ac]


def clear_cells(grid: WorkGrid, cells: Iterable[Position]) -> None:
    for row, col in cells:
        grid[row][col] = None


def apply_gravity(grid: WorkGrid) -> List[TileMovement]:
    """Drop tiles to the bottom of each column, preserving their order.

    Emptied cells collect at the top of the column, ready for ``refill``.
    """
    movements: List[TileMovement] = []
    size = len(grid)
    for col in range(len(grid[0]) if grid else 0):
        write_row = size - 1
        for row in range(size - 1, -1, -1):
            tile = grid[row][col]
            if tile is None:
                continue
            grid[write_row][col] = tile
            if write_row != row:
                movements.append(
                    TileMovement(tile_id=tile.id, col=col, from_row=row, to_row=write_row, is_new=False)
                )
            write_row -= 1
        for row in range(write_row, -1, -1):
            grid[row][col] = None
    return movements


def refill(
    grid: WorkGrid,
    rng: random.Random,
    ids: TileIdGenerator,
    tokens: Sequence[TokenType],
) -> List[TileMovement]:
    """Spawn fresh tiles into the empty run at the top of every column."""
    movements: List[TileMovement] = []
    size = len(grid)
    for col in range(len(grid[0]) if grid else 0):
        spawn_count = 0
        while spawn_count < size and grid[spawn_count][col] is None:
            spawn_count += 1
        for row in range(spawn_count):
            tile = ids.new_tile(draw_token(rng, tokens))
            grid[row][col] = tile
            movements.append(
                TileMovement(tile_id=tile.id, col=col, from_row=-(spawn_count - row), to_row=row, is_new=True)
            )
    return movements
