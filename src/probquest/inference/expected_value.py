"""Expected-value helpers and best-choice selection."""

from __future__ import annotations

import math
from typing import Callable, Sequence, TypeVar

from probquest.domain.errors import InvalidDistributionError, InvalidInputError
from probquest.inference.distribution import Distribution, ValuedOutcome

C = TypeVar("C")


def _value_of(outcome) -> float:
    if isinstance(outcome, (int, float)):
        return float(outcome)
    return float(outcome.value)


def compute(distribution: Distribution) -> float:
    """Return the probability-weighted mean of outcome values.

    Outcomes are plain numbers or objects with a ``value`` attribute.
    """
    return math.fsum(
        probability * _value_of(outcome) for outcome, probability in distribution.pairs()
    )


def binary(p_success: float, reward: float, penalty: float) -> float:
    if not 0 <= p_success <= 1:
        raise InvalidDistributionError(f"Success probability out of range: {p_success}")
    return p_success * reward + (1 - p_success) * penalty


def valued(pairs: Sequence[tuple[str, float, float]]) -> Distribution[ValuedOutcome]:
    """Build a distribution from (id, probability, value) triples."""
    return Distribution.from_pairs(
        (ValuedOutcome(id=outcome_id, value=value), probability)
        for outcome_id, probability, value in pairs
    )


def best_choice(choices: Sequence[C], key: Callable[[C], float] = compute) -> int:
    """Index of the highest-EV choice; the first one wins ties."""
    if not choices:
        raise InvalidInputError("No choices to rank.")
    best_index = 0
    best_value = key(choices[0])
    for index, choice in enumerate(choices[1:], start=1):
        value = key(choice)
        if value > best_value:
            best_index, best_value = index, value
    return best_index


def best_choice_id(
    choices: Sequence[C],
    key: Callable[[C], float] = compute,
    id_of: Callable[[C], object] = lambda choice: choice.id,
):
    return id_of(choices[best_choice(choices, key)])
