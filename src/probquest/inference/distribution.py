"""Validated discrete probability distributions."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Generic, Iterable, Sequence, TypeVar

from probquest import config
from probquest.domain.errors import EmptyDistributionError, InvalidDistributionError

T = TypeVar("T")


@dataclass(frozen=True)
class ValuedOutcome:
    id: str
    value: float


def validate_probabilities(probabilities: Sequence[float], epsilon: float = config.EPSILON) -> None:
    if not probabilities:
        raise EmptyDistributionError("A distribution needs at least one outcome.")
    for probability in probabilities:
        if math.isnan(probability) or probability < 0:
            raise InvalidDistributionError(f"Negative or undefined probability: {probability}")
    total = math.fsum(probabilities)
    if not (1 - epsilon <= total <= 1 + epsilon):
        raise InvalidDistributionError(f"Probabilities sum to {total}, expected 1.")


@dataclass(frozen=True, init=False)
class Distribution(Generic[T]):
    """Ordered (outcome, probability) pairs summing to 1.

    Instances are immutable; every constructor validates before the object
    exists, so a rejected distribution never leaves partial state behind.
    """

    outcomes: tuple[T, ...]
    probabilities: tuple[float, ...]
    epsilon: float = field(default=config.EPSILON, compare=False)

    def __init__(
        self,
        outcomes: Iterable[T],
        probabilities: Iterable[float],
        epsilon: float = config.EPSILON,
    ) -> None:
        outcome_tuple = tuple(outcomes)
        probability_tuple = tuple(float(p) for p in probabilities)
        if len(outcome_tuple) != len(probability_tuple):
            raise InvalidDistributionError(
                f"{len(outcome_tuple)} outcomes but {len(probability_tuple)} probabilities."
            )
        validate_probabilities(probability_tuple, epsilon)
        object.__setattr__(self, "outcomes", outcome_tuple)
        object.__setattr__(self, "probabilities", probability_tuple)
        object.__setattr__(self, "epsilon", epsilon)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[T, float]], epsilon: float = config.EPSILON
    ) -> "Distribution[T]":
        pair_list = list(pairs)
        return cls(
            [outcome for outcome, _ in pair_list],
            [probability for _, probability in pair_list],
            epsilon,
        )

    @classmethod
    def uniform(cls, outcomes: Iterable[T]) -> "Distribution[T]":
        outcome_list = list(outcomes)
        if not outcome_list:
            raise EmptyDistributionError("A distribution needs at least one outcome.")
        share = 1 / len(outcome_list)
        return cls(outcome_list, [share] * len(outcome_list))

    def __len__(self) -> int:
        return len(self.outcomes)

    def pairs(self) -> list[tuple[T, float]]:
        return list(zip(self.outcomes, self.probabilities))

    def total(self) -> float:
        return math.fsum(self.probabilities)

    def probability_of(self, outcome: T) -> float:
        for candidate, probability in self.pairs():
            if candidate == outcome:
                return probability
        return 0.0

    def support(self) -> list[T]:
        return [outcome for outcome, probability in self.pairs() if probability > 0]

    def argmax(self) -> T:
        best_index = 0
        for index, probability in enumerate(self.probabilities):
            if probability > self.probabilities[best_index]:
                best_index = index
        return self.outcomes[best_index]

    def with_probabilities(self, probabilities: Iterable[float]) -> "Distribution[T]":
        return Distribution(self.outcomes, probabilities, self.epsilon)
