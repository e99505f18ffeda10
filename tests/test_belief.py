import math

import pytest

from probquest.domain.enums import InvestigationPhase
from probquest.domain.errors import InvalidInputError, InvalidStateError
from probquest.domain.models import Clue, Suspect
from probquest.inference.belief import BeliefUpdater, Investigation


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 10])
def test_initialize_assigns_uniform_prior(n):
    suspects = [Suspect(id=str(i), name=f"S{i}") for i in range(n)]
    dist = BeliefUpdater.initialize(suspects)
    assert len(dist) == n
    assert all(weight == pytest.approx(1 / n) for weight in dist.probabilities)
    assert math.fsum(dist.probabilities) == pytest.approx(1.0)


def test_initialize_without_suspects_fails():
    with pytest.raises(InvalidInputError):
        BeliefUpdater.initialize([])


def test_clue_eliminating_three_of_five_renormalizes_survivors(five_suspects):
    prior = BeliefUpdater.initialize(five_suspects)
    assert list(prior.probabilities) == pytest.approx([0.2] * 5)

    posterior = BeliefUpdater.apply_evidence(prior, Clue(id=1, attribute="hat", expected_value=True))

    assert list(posterior.probabilities) == pytest.approx([0.5, 0.5, 0.0, 0.0, 0.0])
    assert posterior.total() == pytest.approx(1.0)


def test_string_attribute_clue(five_suspects):
    prior = BeliefUpdater.initialize(five_suspects)
    posterior = BeliefUpdater.apply_evidence(
        prior, Clue(id=1, attribute="shoes", expected_value="large")
    )
    assert list(posterior.probabilities) == pytest.approx([1 / 3, 0.0, 1 / 3, 0.0, 1 / 3])


def test_eliminated_suspects_never_regain_weight(five_suspects):
    dist = BeliefUpdater.initialize(five_suspects)
    dist = BeliefUpdater.apply_evidence(dist, Clue(id=1, attribute="hat", expected_value=True))
    # c and e match this clue but were already eliminated.
    dist = BeliefUpdater.apply_evidence(dist, Clue(id=2, attribute="shoes", expected_value="large"))

    assert list(dist.probabilities) == pytest.approx([1.0, 0.0, 0.0, 0.0, 0.0])


def test_contradiction_returns_input_unchanged(five_suspects):
    dist = BeliefUpdater.initialize(five_suspects)
    dist = BeliefUpdater.apply_evidence(dist, Clue(id=1, attribute="hat", expected_value=True))
    contradiction = Clue(id=2, attribute="hat", expected_value=False)

    assert BeliefUpdater.is_contradiction(dist, contradiction)
    assert BeliefUpdater.apply_evidence(dist, contradiction) is dist


def test_missing_attribute_never_matches(five_suspects):
    dist = BeliefUpdater.initialize(five_suspects)
    clue = Clue(id=1, attribute="glasses", expected_value=True)
    assert BeliefUpdater.apply_evidence(dist, clue) is dist


def test_bool_clue_does_not_match_string_value():
    suspects = [
        Suspect(id="a", name="A", attributes={"flag": "true"}),
        Suspect(id="b", name="B", attributes={"flag": True}),
    ]
    dist = BeliefUpdater.apply_evidence(
        BeliefUpdater.initialize(suspects), Clue(id=1, attribute="flag", expected_value=True)
    )
    assert list(dist.probabilities) == pytest.approx([0.0, 1.0])


def test_every_evidence_sequence_keeps_unit_mass(five_suspects):
    clues = [
        Clue(id=1, attribute="shoes", expected_value="large"),
        Clue(id=2, attribute="hat", expected_value=False),
        Clue(id=3, attribute="hat", expected_value=True),
        Clue(id=4, attribute="shoes", expected_value="small"),
    ]
    dist = BeliefUpdater.initialize(five_suspects)
    for clue in clues:
        before = dist
        dist = BeliefUpdater.apply_evidence(dist, clue)
        assert dist is before or dist.total() == pytest.approx(1.0, abs=1e-6)


def test_investigation_walkthrough(small_case):
    investigation = Investigation(small_case)
    assert investigation.phase == InvestigationPhase.NOT_STARTED

    investigation.start()
    assert investigation.phase == InvestigationPhase.IN_PROGRESS
    assert investigation.weight_of("a") == pytest.approx(0.2)

    first = investigation.reveal_next_clue()
    assert first.id == 1
    assert investigation.weight_of("a") == pytest.approx(0.5)
    assert investigation.leader().id == "a"

    investigation.reveal_next_clue()
    assert investigation.all_clues_revealed
    assert investigation.weight_of("a") == pytest.approx(1.0)
    assert investigation.remaining_clues == []

    assert investigation.accuse("a") is True
    assert investigation.phase == InvestigationPhase.CONCLUDED


def test_investigation_rejects_out_of_order_actions(small_case):
    investigation = Investigation(small_case)
    with pytest.raises(InvalidStateError):
        investigation.reveal_next_clue()
    with pytest.raises(InvalidStateError):
        investigation.accuse("a")
    with pytest.raises(InvalidStateError):
        investigation.leader()

    investigation.start()
    with pytest.raises(InvalidStateError):
        investigation.start()

    investigation.reveal_next_clue()
    investigation.reveal_next_clue()
    with pytest.raises(InvalidStateError):
        investigation.reveal_next_clue()

    investigation.accuse("b")
    with pytest.raises(InvalidStateError):
        investigation.accuse("a")


def test_accusing_unknown_suspect_keeps_investigation_open(small_case):
    investigation = Investigation(small_case)
    investigation.start()
    with pytest.raises(InvalidInputError):
        investigation.accuse("nobody")
    assert investigation.phase == InvestigationPhase.IN_PROGRESS
    assert investigation.accused_id is None


def test_contradicting_clue_is_flagged(small_case):
    case = small_case.model_copy(
        update={
            "clues": [
                Clue(id=1, attribute="hat", expected_value=True),
                Clue(id=2, attribute="hat", expected_value=False),
            ]
        }
    )
    investigation = Investigation(case)
    investigation.start()
    investigation.reveal_next_clue()
    assert not investigation.last_clue_contradicted
    before = investigation.distribution

    investigation.reveal_next_clue()
    assert investigation.last_clue_contradicted
    assert investigation.distribution is before
    assert [clue.id for clue in investigation.revealed] == [1, 2]
