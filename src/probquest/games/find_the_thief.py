"""Find the Thief: narrow the suspects with clues, then accuse."""

from __future__ import annotations

import logging

from probquest import config
from probquest.domain.enums import BadgeType
from probquest.domain.errors import InvalidStateError
from probquest.domain.models import GameCase
from probquest.games.results import Verdict
from probquest.inference.belief import Investigation
from probquest.progress.state import PlayerState

logger = logging.getLogger(__name__)


def open_investigation(case: GameCase) -> Investigation:
    investigation = Investigation(case)
    investigation.start()
    return investigation


def likelihood_lines(investigation: Investigation) -> list[str]:
    if investigation.distribution is None:
        return []
    return [
        f"{suspect.name}: {weight * 100:.1f}%"
        for suspect, weight in investigation.distribution.pairs()
    ]


def accuse(state: PlayerState, investigation: Investigation, suspect_id: str) -> Verdict:
    if not investigation.all_clues_revealed:
        raise InvalidStateError("Reveal every clue before making an accusation.")
    case = investigation.case
    guilty = case.guilty_suspect()
    correct = investigation.accuse(suspect_id)
    if correct:
        points_delta = config.DETECTIVE_REWARD
        badges = [BadgeType.MASTER_DETECTIVE]
        notes = [f"Correct! {guilty.name} is the thief."]
    else:
        points_delta = config.DETECTIVE_PENALTY
        badges = []
        notes = [f"Incorrect. The real thief was {guilty.name}."]

    verdict = Verdict(
        accused_id=suspect_id,
        correct=correct,
        guilty=guilty,
        points_delta=points_delta,
        badges_earned=badges,
        notes=notes,
    )
    state.apply(verdict)
    logger.info("Accusation in %s: %s", case.id, "correct" if correct else "incorrect")
    return verdict
