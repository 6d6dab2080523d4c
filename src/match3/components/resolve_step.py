from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from match3.components.match_event import MatchEvent
from match3.components.tile import Coord, PowerType

if TYPE_CHECKING:
    from match3.components.game_state import GameState


@dataclass(frozen=True, slots=True)
class TileMovement:
    """Where a tile came from during one cascade step.

    ``from_row`` is negative for freshly spawned tiles: the distance above
    the visible grid they start falling from.
    """
    tile_id: str
    col: int
    from_row: int
    to_row: int
    is_new: bool


@dataclass(frozen=True, slots=True)
class ResolveStep:
    matches: tuple[MatchEvent, ...]
    cleared_cells: tuple[Coord, ...]
    points_added: int
    movements: tuple[TileMovement, ...]
    activated_powers: tuple[tuple[Coord, PowerType], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SwapResult:
    next_state: "GameState"
    steps: tuple[ResolveStep, ...]
    did_consume_move: bool
    did_reshuffle: bool
