from dataclasses import dataclass
from typing import Optional

from match3.components.board import BoardConfig
from match3.components.game_state import GameState
from match3.components.tile import Move


@dataclass(slots=True)
class Session:
    """Singleton component holding the live play session.

    ``state`` is swapped for a new immutable GameState on every action; the
    counters here are bookkeeping for the score submission summary.
    """
    state: GameState
    config: BoardConfig
    hint: Optional[Move] = None
    hints_used: int = 0
    reshuffles: int = 0
