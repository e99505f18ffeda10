"""Error types raised by the inference engine and game layer."""

from __future__ import annotations


class ProbQuestError(ValueError):
    """Base class for validation failures."""


class InvalidInputError(ProbQuestError):
    """An operation that needs at least one item was given none."""


class InvalidDistributionError(ProbQuestError):
    """Probabilities are negative or do not sum to 1 within tolerance."""


class InvalidStateError(ProbQuestError):
    """A session or game action was attempted out of order."""


class EmptyDistributionError(InvalidInputError, InvalidDistributionError):
    """A distribution was built from no outcomes."""
