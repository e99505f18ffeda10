"""Points and badge bookkeeping owned by the caller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from probquest import config
from probquest.domain.enums import BadgeType


class RoundResult(Protocol):
    points_delta: float
    badges_earned: list[BadgeType]


@dataclass
class PlayerState:
    points: float = config.STARTING_POINTS
    badges: list[BadgeType] = field(default_factory=list)

    def update_points(self, amount: float) -> None:
        self.points += amount

    def earn_badge(self, badge: BadgeType) -> bool:
        if badge in self.badges:
            return False
        self.badges.append(badge)
        return True

    def earn_badges(self, badges: Iterable[BadgeType]) -> list[BadgeType]:
        return [badge for badge in badges if self.earn_badge(badge)]

    def has_badge(self, badge: BadgeType) -> bool:
        return badge in self.badges

    def apply(self, result: RoundResult) -> list[BadgeType]:
        """Credit a resolved round and return the badges that were new."""
        self.update_points(result.points_delta)
        return self.earn_badges(result.badges_earned)
