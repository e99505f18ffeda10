"""Survival Bridge: send adventurers across, trading safety for reward."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

from probquest.domain.enums import AdventurerStatus, BadgeType
from probquest.domain.errors import InvalidInputError
from probquest.domain.models import BridgeConfig, BridgeCrossing
from probquest.games.results import CrossingResult
from probquest.inference import expected_value
from probquest.inference.sampler import RandomSource, sample_success
from probquest.progress.state import PlayerState

logger = logging.getLogger(__name__)


@dataclass
class BridgeParty:
    statuses: list[AdventurerStatus] = field(default_factory=list)

    @classmethod
    def fresh(cls, size: int) -> "BridgeParty":
        return cls([AdventurerStatus.WAITING] * size)

    @property
    def waiting_count(self) -> int:
        return self.statuses.count(AdventurerStatus.WAITING)

    def regroup(self) -> None:
        self.statuses = [AdventurerStatus.WAITING] * len(self.statuses)

    def settle(self, count: int, status: AdventurerStatus) -> None:
        remaining = count
        for index, current in enumerate(self.statuses):
            if remaining == 0:
                break
            if current == AdventurerStatus.WAITING:
                self.statuses[index] = status
                remaining -= 1


def crossing_ev(crossing: BridgeCrossing) -> float:
    return expected_value.binary(crossing.probability, crossing.reward, crossing.penalty)


def best_crossing(crossings: Sequence[BridgeCrossing]) -> BridgeCrossing:
    return crossings[expected_value.best_choice(crossings, key=crossing_ev)]


def cross(
    state: PlayerState,
    party: BridgeParty,
    bridge: BridgeConfig,
    count: int,
    rng: RandomSource,
) -> CrossingResult:
    crossing = bridge.crossing_for(count)
    if crossing is None:
        raise InvalidInputError(f"No crossing configured for {count} adventurers.")
    waiting = party.waiting_count or len(party.statuses)
    if count > waiting:
        raise InvalidInputError(f"Only {waiting} adventurers are waiting to cross.")
    if party.waiting_count == 0:
        party.regroup()

    success = sample_success(crossing.probability, rng)
    points_delta = crossing.reward if success else crossing.penalty
    badges: list[BadgeType] = []
    if success:
        party.settle(count, AdventurerStatus.SAFE)
        notes = [f"All {count} made it across. Earned {points_delta:g} PP."]
        if count == bridge.total_adventurers:
            badges.append(BadgeType.BRIDGE_MASTER)
    else:
        party.settle(count, AdventurerStatus.LOST)
        notes = [f"The bridge gave way under {count}. Lost {abs(points_delta):g} PP."]

    result = CrossingResult(
        count=count,
        success=success,
        points_delta=points_delta,
        statuses=list(party.statuses),
        badges_earned=badges,
        notes=notes,
    )
    state.apply(result)
    logger.info("Crossing with %s: %s", count, "safe" if success else "lost")
    return result
