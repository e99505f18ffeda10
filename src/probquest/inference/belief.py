"""Belief updating over a finite set of suspects."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Iterable, Protocol

from probquest.domain.enums import InvestigationPhase
from probquest.domain.errors import InvalidInputError, InvalidStateError
from probquest.domain.models import Clue, GameCase, Suspect
from probquest.inference.distribution import Distribution


class Evidence(Protocol):
    def matches(self, hypothesis: Suspect) -> bool: ...


class BeliefUpdater:
    """Hard-elimination Bayesian filter.

    Evidence is binary: a hypothesis either agrees with a clue or it does not.
    Agreeing hypotheses keep their relative weight and are renormalized;
    the rest drop to zero and stay there.
    """

    @staticmethod
    def initialize(hypotheses: Iterable[Suspect]) -> Distribution[Suspect]:
        hypothesis_list = list(hypotheses)
        if not hypothesis_list:
            raise InvalidInputError("Cannot start an investigation without suspects.")
        return Distribution.uniform(hypothesis_list)

    @staticmethod
    def apply_evidence(
        distribution: Distribution[Suspect], evidence: Evidence
    ) -> Distribution[Suspect]:
        matches = [evidence.matches(hypothesis) for hypothesis in distribution.outcomes]
        total_match = math.fsum(
            weight for weight, matched in zip(distribution.probabilities, matches) if matched
        )
        if total_match == 0:
            # Contradiction: nothing still in play agrees with the clue.
            return distribution
        return distribution.with_probabilities(
            weight / total_match if matched else 0.0
            for weight, matched in zip(distribution.probabilities, matches)
        )

    @staticmethod
    def is_contradiction(distribution: Distribution[Suspect], evidence: Evidence) -> bool:
        return not any(
            weight > 0 and evidence.matches(hypothesis)
            for hypothesis, weight in distribution.pairs()
        )


@dataclass
class Investigation:
    """One run through a case: start, reveal clues in order, accuse once."""

    case: GameCase
    phase: InvestigationPhase = InvestigationPhase.NOT_STARTED
    distribution: Distribution[Suspect] | None = None
    revealed: list[Clue] = field(default_factory=list)
    contradictions: list[int] = field(default_factory=list)
    accused_id: str | None = None

    def start(self) -> Distribution[Suspect]:
        if self.phase != InvestigationPhase.NOT_STARTED:
            raise InvalidStateError("Investigation already started.")
        self.distribution = BeliefUpdater.initialize(self.case.suspects)
        self.phase = InvestigationPhase.IN_PROGRESS
        return self.distribution

    @property
    def remaining_clues(self) -> list[Clue]:
        return self.case.clues[len(self.revealed):]

    @property
    def all_clues_revealed(self) -> bool:
        return len(self.revealed) >= len(self.case.clues)

    @property
    def last_clue_contradicted(self) -> bool:
        return bool(self.revealed) and self.revealed[-1].id in self.contradictions

    def reveal_next_clue(self) -> Clue:
        if self.phase != InvestigationPhase.IN_PROGRESS:
            raise InvalidStateError("Clues can only be revealed during an investigation.")
        if self.all_clues_revealed:
            raise InvalidStateError("No clues left to reveal.")
        clue = self.case.clues[len(self.revealed)]
        if BeliefUpdater.is_contradiction(self.distribution, clue):
            self.contradictions.append(clue.id)
        self.distribution = BeliefUpdater.apply_evidence(self.distribution, clue)
        self.revealed.append(clue)
        return clue

    def weight_of(self, suspect_id: str) -> float:
        if self.distribution is None:
            return 0.0
        for suspect, weight in self.distribution.pairs():
            if suspect.id == suspect_id:
                return weight
        return 0.0

    def leader(self) -> Suspect:
        if self.distribution is None:
            raise InvalidStateError("Investigation has not started.")
        return self.distribution.argmax()

    def accuse(self, suspect_id: str) -> bool:
        if self.phase != InvestigationPhase.IN_PROGRESS:
            raise InvalidStateError("Accusations need an investigation in progress.")
        if suspect_id not in {suspect.id for suspect in self.case.suspects}:
            raise InvalidInputError(f"Unknown suspect id: {suspect_id}")
        self.accused_id = suspect_id
        self.phase = InvestigationPhase.CONCLUDED
        return suspect_id == self.case.guilty_suspect_id
