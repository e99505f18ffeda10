"""Probabilistic inference and sampling engine."""

from probquest.inference import expected_value
from probquest.inference.belief import BeliefUpdater, Investigation
from probquest.inference.distribution import Distribution, ValuedOutcome
from probquest.inference.sampler import sample, sample_success

__all__ = [
    "BeliefUpdater",
    "Distribution",
    "Investigation",
    "ValuedOutcome",
    "expected_value",
    "sample",
    "sample_success",
]
