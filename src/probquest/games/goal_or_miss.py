"""Goal or Miss: pick a target, shoot with its success probability."""

from __future__ import annotations

import logging
from typing import Sequence

from probquest import config
from probquest.domain.enums import BadgeType
from probquest.domain.models import GoalTarget
from probquest.games.results import ShotResult
from probquest.inference import expected_value
from probquest.inference.sampler import RandomSource, sample_success
from probquest.progress.state import PlayerState

logger = logging.getLogger(__name__)


def target_ev(target: GoalTarget) -> float:
    return expected_value.binary(target.probability, target.reward, target.penalty)


def best_target(targets: Sequence[GoalTarget]) -> GoalTarget:
    return targets[expected_value.best_choice(targets, key=target_ev)]


def take_shot(state: PlayerState, target: GoalTarget, rng: RandomSource) -> ShotResult:
    is_goal = sample_success(target.probability, rng)
    points_delta = target.reward if is_goal else target.penalty
    badges: list[BadgeType] = []
    if is_goal and target.id in config.GOLDEN_BOOT_TARGETS:
        badges.append(BadgeType.GOLDEN_BOOT)
    if is_goal:
        notes = [f"Goal! The {target.name} shot earned {points_delta:g} PP."]
    else:
        notes = [f"Missed the {target.name}. Lost {abs(points_delta):g} PP."]

    result = ShotResult(
        target_id=target.id,
        is_goal=is_goal,
        points_delta=points_delta,
        badges_earned=badges,
        notes=notes,
    )
    state.apply(result)
    logger.info("Shot at %s: %s", target.id, "goal" if is_goal else "miss")
    return result
