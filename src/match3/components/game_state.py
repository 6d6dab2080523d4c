from dataclasses import dataclass
from typing import Optional

from match3.components.tile import Coord, Tile

TileGrid = tuple[tuple[Tile, ...], ...]


@dataclass(frozen=True, slots=True)
class GameState:
    """Externally visible snapshot of a play session.

    Replaced wholesale on every player action. ``next_tile_id`` carries the
    session's tile id cursor so ids stay unique without a process-wide counter.
    """
    board: TileGrid
    score: int
    moves: int
    selected: Optional[Coord] = None
    next_tile_id: int = 0

    @property
    def size(self) -> int:
        return len(self.board)
