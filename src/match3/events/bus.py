from blinker import Signal
from typing import Dict

class EventBus:
    """Named blinker signals shared by the board session and its listeners.

    Handlers receive the bus as ``sender`` and the payload as keyword
    arguments. A name with no subscribers is silently dropped on emit.
    """
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # BoardSystem instances are often not stored by their creator.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & SELECTION
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col


# ============================================================================
# SWAP & CASCADE
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src, dst, steps=tuple[ResolveStep]
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src, dst, reason=str
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, step=ResolveStep
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int, points=int
EVENT_BOARD_RESHUFFLED = "board_reshuffled"        # payload: board=TileGrid


# ============================================================================
# SCORE & FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int, moves=int
EVENT_GAME_OVER = "game_over"                      # payload: score=int, moves_used=int, hints_used=int
EVENT_NEW_GAME = "new_game"                        # payload: seed=int|None
EVENT_GAME_STARTED = "game_started"                # payload: state=GameState


# ============================================================================
# HINTS
# ============================================================================
EVENT_HINT_REQUEST = "hint_request"                # payload: None
EVENT_HINT_SHOWN = "hint_shown"                    # payload: src=(r,c), dst=(r,c)
EVENT_HINT_UNAVAILABLE = "hint_unavailable"        # payload: None
EVENT_HINT_CLEARED = "hint_cleared"                # payload: None
