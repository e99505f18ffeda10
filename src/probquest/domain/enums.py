"""Shared enums for games and progress."""

from __future__ import annotations

from enum import StrEnum


class Game(StrEnum):
    LUCKY_BOX = "Lucky Box Shop"
    FIND_THE_THIEF = "Find the Thief"
    SURVIVAL_BRIDGE = "Survival Bridge"
    GOAL_OR_MISS = "Goal or Miss"


class BadgeType(StrEnum):
    FIRST_WIN = "First Win!"
    HIGH_ROLLER = "High Roller"
    SMART_INVESTOR = "Smart Investor"
    MASTER_DETECTIVE = "Master Detective"
    BRIDGE_MASTER = "Bridge Master"
    GOLDEN_BOOT = "Golden Boot"


class Rarity(StrEnum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


class InvestigationPhase(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"


class AdventurerStatus(StrEnum):
    WAITING = "waiting"
    SAFE = "safe"
    LOST = "lost"
