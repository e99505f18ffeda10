"""Deterministic RNG wrapper for reproducible rounds."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import random


@dataclass
class Rng:
    seed: int | None = None

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def fork(self, salt: str) -> "Rng":
        digest = hashlib.sha256(f"{self.seed}:{salt}".encode("ascii")).hexdigest()
        new_seed = int(digest[:16], 16)
        return Rng(new_seed)

    def random(self) -> float:
        return self._random.random()
