from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from match3.components.match_event import MatchEvent
from match3.components.tile import Coord, PowerType, TokenType

MIN_RUN = 3


def classify_power(cells: Sequence[Coord], horizontal: bool) -> Tuple[Optional[PowerType], Optional[Coord]]:
    """Return the power tile a run spawns and the cell it spawns on.

    Five or more makes a bomb, exactly four a line clear along the run's
    axis. Either way the spawn cell is the run's middle cell.
    """
    if len(cells) >= 5:
        return PowerType.BOMB, cells[len(cells) // 2]
    if len(cells) == 4:
        return (PowerType.ROW if horizontal else PowerType.COL), cells[len(cells) // 2]
    return None, None


def _build_event(token: TokenType, cells: List[Coord], horizontal: bool) -> MatchEvent:
    power_type, spawn_cell = classify_power(cells, horizontal)
    return MatchEvent(
        token=token,
        length=len(cells),
        cells=tuple(cells),
        power_spawn_cell=spawn_cell,
        power_type=power_type,
    )


def find_matches(tokens: Sequence[Sequence[Optional[TokenType]]]) -> List[MatchEvent]:
    """Detect every maximal run of three or more identical tokens.

    The horizontal pass skips a run when any of its cells was already
    claimed by an earlier horizontal run. The vertical pass reports every
    run without consulting those claims, so an L, T or + shape comes back
    as two events sharing the corner cell.
    """
    matches: List[MatchEvent] = []
    claimed: Set[Coord] = set()
    rows = len(tokens)

    for r in range(rows):
        cols = len(tokens[r])
        c = 0
        while c < cols:
            token = tokens[r][c]
            end = c + 1
            while end < cols and tokens[r][end] == token:
                end += 1
            if token is not None and end - c >= MIN_RUN:
                cells = [Coord(r, col) for col in range(c, end)]
                if not any(cell in claimed for cell in cells):
                    matches.append(_build_event(token, cells, horizontal=True))
                    claimed.update(cells)
            c = end

    cols = len(tokens[0]) if rows else 0
    for c in range(cols):
        r = 0
        while r < rows:
            token = tokens[r][c]
            end = r + 1
            while end < rows and tokens[end][c] == token:
                end += 1
            if token is not None and end - r >= MIN_RUN:
                cells = [Coord(row, c) for row in range(r, end)]
                matches.append(_build_event(token, cells, horizontal=False))
            r = end

    return matches
