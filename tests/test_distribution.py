import pytest

from probquest.domain.errors import InvalidDistributionError, InvalidInputError
from probquest.inference.distribution import Distribution


def test_accepts_probabilities_summing_to_one():
    dist = Distribution(["x", "y", "z"], [0.2, 0.3, 0.5])
    assert dist.total() == pytest.approx(1.0)
    assert dist.pairs() == [("x", 0.2), ("y", 0.3), ("z", 0.5)]
    assert len(dist) == 3


def test_accepts_sum_within_tolerance():
    dist = Distribution(["x", "y"], [0.5, 0.5 + 5e-7])
    assert dist.probability_of("y") == pytest.approx(0.5)


def test_rejects_sum_above_one():
    with pytest.raises(InvalidDistributionError):
        Distribution.from_pairs([("common", 0.6), ("rare", 0.6)])


def test_rejects_sum_below_one():
    with pytest.raises(InvalidDistributionError):
        Distribution(["x", "y"], [0.4, 0.4])


def test_rejects_negative_probability():
    with pytest.raises(InvalidDistributionError):
        Distribution(["x", "y"], [1.5, -0.5])


def test_rejects_empty_outcomes():
    with pytest.raises(InvalidInputError):
        Distribution([], [])
    with pytest.raises(InvalidDistributionError):
        Distribution.from_pairs([])
    with pytest.raises(InvalidDistributionError):
        Distribution.uniform([])


def test_rejects_mismatched_lengths():
    with pytest.raises(InvalidDistributionError):
        Distribution(["x", "y"], [1.0])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Distribution(["x"], [1.2])


def test_failed_copy_leaves_original_untouched():
    dist = Distribution(["x", "y"], [0.5, 0.5])
    with pytest.raises(InvalidDistributionError):
        dist.with_probabilities([0.6, 0.6])
    assert dist.probabilities == (0.5, 0.5)


def test_uniform_splits_mass_evenly():
    dist = Distribution.uniform(["a", "b", "c", "d"])
    assert dist.probabilities == (0.25, 0.25, 0.25, 0.25)


def test_views():
    dist = Distribution(["x", "y", "z"], [0.0, 0.7, 0.3])
    assert dist.support() == ["y", "z"]
    assert dist.argmax() == "y"
    assert dist.probability_of("missing") == 0.0


def test_argmax_prefers_first_on_ties():
    dist = Distribution(["x", "y"], [0.5, 0.5])
    assert dist.argmax() == "x"


def test_copy_keeps_construction_tolerance():
    loose = Distribution(["x", "y"], [0.5, 0.5], epsilon=0.01)
    copy = loose.with_probabilities([0.5, 0.505])
    assert copy.epsilon == 0.01
    with pytest.raises(InvalidDistributionError):
        Distribution(["x", "y"], [0.5, 0.5]).with_probabilities([0.5, 0.505])


def test_tolerance_does_not_affect_equality():
    assert Distribution(["x"], [1.0], epsilon=0.1) == Distribution(["x"], [1.0])
