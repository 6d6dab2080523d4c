from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass
class GenerationStats:
    """Process-wide counters for playable-board generation.

    ``exhaustions`` counts how often the attempt cap was hit and a board that
    violates the no-match/has-move invariant was accepted.
    """
    generations: int = 0
    attempts: int = 0
    exhaustions: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, attempts: int, exhausted: bool) -> None:
        with self._lock:
            self.generations += 1
            self.attempts += attempts
            if exhausted:
                self.exhaustions += 1

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {
                "generations": self.generations,
                "attempts": self.attempts,
                "exhaustions": self.exhaustions,
            }

    def reset(self) -> None:
        with self._lock:
            self.generations = 0
            self.attempts = 0
            self.exhaustions = 0


generation_stats = GenerationStats()
