"""Result structures for resolved game rounds."""

from __future__ import annotations

from dataclasses import dataclass, field

from probquest.domain.enums import AdventurerStatus, BadgeType
from probquest.domain.models import LuckyBoxItem, Suspect


@dataclass(frozen=True)
class BoxOpening:
    box_id: int
    item: LuckyBoxItem
    price: int
    points_delta: float
    badges_earned: list[BadgeType] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ShotResult:
    target_id: str
    is_goal: bool
    points_delta: float
    badges_earned: list[BadgeType] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CrossingResult:
    count: int
    success: bool
    points_delta: float
    statuses: list[AdventurerStatus] = field(default_factory=list)
    badges_earned: list[BadgeType] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Verdict:
    accused_id: str
    correct: bool
    guilty: Suspect
    points_delta: float
    badges_earned: list[BadgeType] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
