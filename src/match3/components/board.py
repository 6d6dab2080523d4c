from dataclasses import dataclass

from match3.constants import (
    GRID_SIZE,
    INITIAL_MOVES,
    MAX_CASCADE_STEPS,
    MAX_GENERATION_ATTEMPTS,
    MAX_PLACEMENT_REDRAWS,
)
from match3.components.tile import ACTIVE_TOKENS, TokenType


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """Per-session board tunables. Defaults come from ``match3.constants``."""
    size: int = GRID_SIZE
    tokens: tuple[TokenType, ...] = ACTIVE_TOKENS
    initial_moves: int = INITIAL_MOVES
    max_generation_attempts: int = MAX_GENERATION_ATTEMPTS
    max_placement_redraws: int = MAX_PLACEMENT_REDRAWS
    max_cascade_steps: int = MAX_CASCADE_STEPS

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        if self.size < 1:
            raise ValueError(f"board size must be positive, got {self.size}")
        if not self.tokens:
            raise ValueError("at least one active token is required")
