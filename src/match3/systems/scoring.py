import math
from typing import Iterable, Optional

from match3.components.match_event import MatchEvent
from match3.components.tile import PowerType
from match3.constants import (
    BOMB_BONUS,
    CASCADE_MULTIPLIERS,
    EXTRA_TILE_POINTS,
    LINE_CLEAR_BONUS,
    MATCH_POINTS,
)


def points_for_match(length: int) -> int:
    if length in MATCH_POINTS:
        return MATCH_POINTS[length]
    if length > 5:
        return MATCH_POINTS[5] + EXTRA_TILE_POINTS * (length - 5)
    return 0


def cascade_multiplier(step: int) -> float:
    """Multiplier for a 1-indexed cascade step, capped from step 5 on."""
    if step <= 1:
        return CASCADE_MULTIPLIERS[0]
    return CASCADE_MULTIPLIERS[min(step, len(CASCADE_MULTIPLIERS)) - 1]


def calculate_step_points(matches: Iterable[MatchEvent], step: int) -> int:
    base = sum(points_for_match(match.length) for match in matches)
    # Halves round up, so 550 points at step 4 scores 963 rather than 962.
    return math.floor(base * cascade_multiplier(step) + 0.5)


def points_for_power_activation(power: Optional[PowerType]) -> int:
    if power is PowerType.BOMB:
        return BOMB_BONUS
    if power in (PowerType.ROW, PowerType.COL):
        return LINE_CLEAR_BONUS
    return 0
