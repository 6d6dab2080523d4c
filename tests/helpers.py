from __future__ import annotations

import random
from typing import Iterable, Sequence

from match3.components.game_state import GameState, TileGrid
from match3.components.tile import PowerType, Tile, TokenType

# Single-letter aliases so boards can be drawn as strings in tests.
LETTERS = {
    'A': TokenType.USDC,
    'B': TokenType.AERO,
    'C': TokenType.OWB,
    'D': TokenType.CBBTC,
    'E': TokenType.ETH,
    'F': TokenType.ZORA,
    'G': TokenType.DEGEN,
    'H': TokenType.BRETT,
}


def board_from_rows(rows: Sequence[str], powers: dict[tuple[int, int], PowerType] | None = None) -> TileGrid:
    """Build a board from rows like ``"ABCDE"``; ids are ``t-<row>-<col>``."""
    powers = powers or {}
    return tuple(
        tuple(
            Tile(id=f"t-{r}-{c}", token=LETTERS[ch], power=powers.get((r, c)))
            for c, ch in enumerate(row)
        )
        for r, row in enumerate(rows)
    )


def state_from_rows(rows: Sequence[str], *, score: int = 0, moves: int = 30, powers=None) -> GameState:
    return GameState(board=board_from_rows(rows, powers), score=score, moves=moves)


def tokens_as_letters(board: TileGrid) -> list[str]:
    reverse = {token: letter for letter, token in LETTERS.items()}
    return [''.join(reverse[tile.token] for tile in row) for row in board]


def diagonal_stalemate_rows(size: int) -> list[str]:
    """Three tokens laid out along anti-diagonals: no matches and no valid swaps."""
    pattern = 'ABC'
    return [''.join(pattern[(r + c) % 3] for c in range(size)) for r in range(size)]


class ScriptedRandom:
    """Stand-in rng whose ``choice`` replays scripted tokens, then falls back to a seeded Random."""

    def __init__(self, script: Iterable[str | TokenType] = (), seed: int = 0):
        self.fallback = random.Random(seed)
        self.script = [LETTERS[item] if isinstance(item, str) and item in LETTERS else item for item in script]

    def choice(self, seq):
        if self.script:
            return self.script.pop(0)
        return self.fallback.choice(seq)
