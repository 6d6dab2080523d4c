from __future__ import annotations

from dataclasses import dataclass

from esper import World

from match3.components.session import Session


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Figures the leaderboard submission endpoint expects at game over."""
    score: int
    moves_used: int
    hints_used: int


def get_session(world: World) -> Session | None:
    """Return the singleton Session component, if a BoardSystem created one."""
    for _, session in world.get_component(Session):
        return session
    return None


def score_summary(world: World) -> ScoreSummary | None:
    session = get_session(world)
    if session is None:
        return None
    return ScoreSummary(
        score=session.state.score,
        moves_used=session.config.initial_moves - session.state.moves,
        hints_used=session.hints_used,
    )
