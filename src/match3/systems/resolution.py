from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from match3.components.board import BoardConfig
from match3.components.game_state import GameState, TileGrid
from match3.components.match_event import MatchEvent
from match3.components.resolve_step import ResolveStep, SwapResult, TileMovement
from match3.components.tile import Coord, PowerType
from match3.systems.board_ops import (
    Position,
    WorkGrid,
    apply_gravity,
    clear_cells,
    clone_board,
    create_board,
    freeze_board,
    in_bounds,
    is_adjacent,
    refill,
    swap_cells,
    token_view,
)
from match3.systems.match import find_matches
from match3.systems.move_oracle import find_hint_move, has_any_valid_move
from match3.systems.scoring import calculate_step_points, points_for_power_activation
from match3.utils.generation_stats import generation_stats
from match3.utils.tile_ids import TileIdGenerator

__all__ = [
    "GenerationResult",
    "apply_swap",
    "create_initial_state",
    "find_hint_move",
    "find_matches",
    "generate_playable_board",
    "has_any_valid_move",
    "is_playable",
    "power_area",
    "reshuffle",
]

logger = logging.getLogger(__name__)

PowerActivation = Tuple[Coord, PowerType]


@dataclass(frozen=True, slots=True)
class GenerationResult:
    board: TileGrid
    attempts: int
    exhausted: bool


def is_playable(board: TileGrid) -> bool:
    """No run of three on the board, and at least one swap that makes one."""
    return not find_matches(token_view(board)) and has_any_valid_move(board)


def generate_playable_board(
    rng_for_attempt: Callable[[int], random.Random],
    ids: TileIdGenerator,
    config: BoardConfig,
) -> GenerationResult:
    """Build boards until one is playable or the attempt cap is reached.

    ``rng_for_attempt`` maps the 0-based attempt number to the generator used
    for that attempt. When every attempt fails the last board is returned
    with ``exhausted=True``; callers accept it as a best effort.
    """
    board: TileGrid = ()
    attempts = 0
    for attempt in range(max(1, config.max_generation_attempts)):
        attempts = attempt + 1
        board = create_board(rng_for_attempt(attempt), ids, config)
        if is_playable(board):
            generation_stats.record(attempts, exhausted=False)
            return GenerationResult(board=board, attempts=attempts, exhausted=False)
    generation_stats.record(attempts, exhausted=True)
    logger.warning(
        "board generation exhausted after %d attempts (size=%d, tokens=%d); accepting best effort",
        attempts,
        config.size,
        len(config.tokens),
    )
    return GenerationResult(board=board, attempts=attempts, exhausted=True)


def create_initial_state(
    seed: Optional[int] = None,
    *,
    config: Optional[BoardConfig] = None,
    rng: Optional[random.Random] = None,
    next_tile_id: int = 0,
) -> GameState:
    """Start a session on a fresh playable board.

    With a seed, attempt ``k`` draws from ``random.Random(seed + k)`` so the
    same seed always yields the same board. Without one, every attempt
    shares ``rng`` (or a fresh unseeded generator). Pass the previous
    session's ``next_tile_id`` to keep tile ids unique across restarts.
    """
    config = config or BoardConfig()
    ids = TileIdGenerator(start=next_tile_id)
    if seed is not None:
        rng_for_attempt = lambda attempt: random.Random(seed + attempt)
    else:
        shared = rng or random.Random()
        rng_for_attempt = lambda attempt: shared
    result = generate_playable_board(rng_for_attempt, ids, config)
    return GameState(
        board=result.board,
        score=0,
        moves=config.initial_moves,
        selected=None,
        next_tile_id=ids.cursor,
    )


def reshuffle(
    state: GameState,
    *,
    rng: Optional[random.Random] = None,
    config: Optional[BoardConfig] = None,
) -> GameState:
    """Replace the board with a freshly generated playable one.

    Not a literal shuffle: every tile is new. Score, moves and selection are
    carried over.
    """
    config = config or BoardConfig(size=state.size)
    rng = rng or random.Random()
    ids = TileIdGenerator(start=state.next_tile_id)
    result = generate_playable_board(lambda attempt: rng, ids, config)
    return replace(state, board=result.board, next_tile_id=ids.cursor)


def power_area(cell: Position, power: PowerType, size: int) -> List[Coord]:
    row, col = cell
    if power is PowerType.ROW:
        return [Coord(row, c) for c in range(size)]
    if power is PowerType.COL:
        return [Coord(r, col) for r in range(size)]
    area: List[Coord] = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            r, c = row + dr, col + dc
            if 0 <= r < size and 0 <= c < size:
                area.append(Coord(r, c))
    return area


def _collect_clear_set(
    grid: WorkGrid,
    matches: Sequence[MatchEvent],
    triggered: Iterable[Tuple[Coord, Coord]],
) -> Tuple[List[Coord], List[PowerActivation]]:
    """Union match cells with the areas of every power tile caught in them.

    ``triggered`` pairs each power tile the player moved with the cell it
    was picked up from and the cell it landed on. Its blast is centred on
    the cell it was picked up from, and the tile itself is spent where it
    landed. Power tiles inside a cleared area fire too, so chains resolve
    in one step.
    """
    size = len(grid)
    cleared: List[Coord] = []
    seen: Set[Coord] = set()
    spent: Set[str] = set()
    pending: deque[PowerActivation] = deque()

    def add(cell: Coord) -> None:
        if cell in seen:
            return
        seen.add(cell)
        cleared.append(cell)
        tile = grid[cell.row][cell.col]
        if tile is not None and tile.power is not None and tile.id not in spent:
            spent.add(tile.id)
            pending.append((cell, tile.power))

    for origin, landing in triggered:
        tile = grid[landing.row][landing.col]
        spent.add(tile.id)
        pending.append((origin, tile.power))
        add(landing)
    for match in matches:
        for cell in match.cells:
            add(cell)

    fired: List[PowerActivation] = []
    while pending:
        cell, power = pending.popleft()
        fired.append((cell, power))
        for affected in power_area(cell, power, size):
            add(affected)
    return cleared, fired


def _spawn_powers(grid: WorkGrid, matches: Sequence[MatchEvent]) -> None:
    # The spawn cell keeps whichever tile landed there; it only gains the power.
    for match in matches:
        if match.power_type is None or match.power_spawn_cell is None:
            continue
        row, col = match.power_spawn_cell
        tile = grid[row][col]
        if tile is not None:
            grid[row][col] = replace(tile, power=match.power_type)


def _rejected(state: GameState) -> SwapResult:
    return SwapResult(
        next_state=replace(state, selected=None),
        steps=(),
        did_consume_move=False,
        did_reshuffle=False,
    )


def apply_swap(
    state: GameState,
    src: Position,
    dst: Position,
    *,
    rng: Optional[random.Random] = None,
    config: Optional[BoardConfig] = None,
) -> SwapResult:
    """Swap two tiles and resolve every cascade the swap sets off.

    A swap is rejected, consuming no move, when no moves are left, either
    cell is off the board, the cells are not orthogonal neighbours, or the
    swap neither forms a run nor moves a power tile. Otherwise each cascade step clears its runs,
    drops and refills the columns and is scored with the step's multiplier.
    A board left without legal moves is regenerated.
    """
    config = config or BoardConfig(size=state.size)
    rng = rng or random.Random()
    if state.moves <= 0:
        return _rejected(state)
    if not (in_bounds(state.board, src) and in_bounds(state.board, dst) and is_adjacent(src, dst)):
        return _rejected(state)
    src, dst = Coord(*src), Coord(*dst)

    # Power tiles fire from where they stood before the swap.
    triggered = [
        (origin, landing)
        for origin, landing in ((src, dst), (dst, src))
        if state.board[origin.row][origin.col].power is not None
    ]
    grid = clone_board(state.board)
    swap_cells(grid, src, dst)
    matches = find_matches(token_view(grid))
    if not matches and not triggered:
        return _rejected(state)

    ids = TileIdGenerator(start=state.next_tile_id)
    steps: List[ResolveStep] = []
    score = state.score
    depth = 1
    while matches or triggered:
        if depth > config.max_cascade_steps:
            logger.warning("cascade cap of %d steps reached; regenerating board", config.max_cascade_steps)
            break
        cleared, fired = _collect_clear_set(grid, matches, triggered)
        points = calculate_step_points(matches, depth)
        points += sum(points_for_power_activation(power) for _, power in fired)

        clear_cells(grid, cleared)
        movements: List[TileMovement] = apply_gravity(grid)
        movements.extend(refill(grid, rng, ids, config.tokens))
        _spawn_powers(grid, matches)

        steps.append(
            ResolveStep(
                matches=tuple(matches),
                cleared_cells=tuple(cleared),
                points_added=points,
                movements=tuple(movements),
                activated_powers=tuple(fired),
            )
        )
        score += points
        triggered = []
        matches = find_matches(token_view(grid))
        depth += 1

    board = freeze_board(grid)
    did_reshuffle = False
    if matches or not has_any_valid_move(board):
        board = generate_playable_board(lambda attempt: rng, ids, config).board
        did_reshuffle = True

    return SwapResult(
        next_state=GameState(
            board=board,
            score=score,
            moves=state.moves - 1,
            selected=None,
            next_tile_id=ids.cursor,
        ),
        steps=tuple(steps),
        did_consume_move=True,
        did_reshuffle=did_reshuffle,
    )
