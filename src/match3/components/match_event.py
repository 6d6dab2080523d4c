from dataclasses import dataclass
from typing import Optional

from match3.components.tile import Coord, PowerType, TokenType


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """One axis-aligned run of three or more identical tokens."""
    token: TokenType
    length: int
    cells: tuple[Coord, ...]
    power_spawn_cell: Optional[Coord] = None
    power_type: Optional[PowerType] = None
