"""Weighted outcome sampling by CDF inversion."""

from __future__ import annotations

from typing import Protocol, TypeVar

from probquest.inference.distribution import Distribution
from probquest.util.rng import Rng

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...


def sample(distribution: Distribution[T], rng: RandomSource | None = None) -> T:
    """Draw one outcome from ``distribution``.

    Outcomes are walked in declared order. When float residue leaves the
    draw above the final cumulative total, the last outcome is returned.
    """
    source = rng if rng is not None else Rng()
    pick = source.random()
    cumulative = 0.0
    for outcome, probability in distribution.pairs():
        cumulative += probability
        if pick < cumulative:
            return outcome
    return distribution.outcomes[-1]


def sample_success(probability: float, rng: RandomSource | None = None) -> bool:
    return sample(Distribution([True, False], [probability, 1 - probability]), rng)
