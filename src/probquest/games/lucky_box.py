"""Lucky Box Shop: pay for a box, draw a prize by its odds."""

from __future__ import annotations

import logging
from typing import Sequence

from probquest import config
from probquest.domain.enums import BadgeType
from probquest.domain.errors import InvalidStateError
from probquest.domain.models import LuckyBox, LuckyBoxItem
from probquest.games.results import BoxOpening
from probquest.inference import expected_value
from probquest.inference.distribution import Distribution
from probquest.inference.sampler import RandomSource, sample
from probquest.progress.state import PlayerState

logger = logging.getLogger(__name__)


def item_distribution(box: LuckyBox) -> Distribution[LuckyBoxItem]:
    return Distribution.from_pairs((item, item.probability) for item in box.items)


def box_ev(box: LuckyBox) -> float:
    return expected_value.compute(item_distribution(box))


def box_profit_ev(box: LuckyBox) -> float:
    return box_ev(box) - box.price


def best_box(boxes: Sequence[LuckyBox]) -> LuckyBox:
    return boxes[expected_value.best_choice(boxes, key=box_ev)]


def open_box(
    state: PlayerState,
    box: LuckyBox,
    boxes: Sequence[LuckyBox],
    rng: RandomSource,
) -> BoxOpening:
    if state.points < box.price:
        raise InvalidStateError(f"Not enough points to open {box.name}.")
    prizes = item_distribution(box)
    smart = best_box(boxes).id == box.id

    item = sample(prizes, rng)
    points_delta = item.value - box.price
    badges: list[BadgeType] = []
    notes = [f"Opened {box.name} and found {item.name} worth {item.value:g} PP."]
    if smart:
        badges.append(BadgeType.SMART_INVESTOR)
        notes.append("This box has the highest expected value.")
    badges.append(BadgeType.FIRST_WIN)
    if state.points + points_delta > config.HIGH_ROLLER_THRESHOLD:
        badges.append(BadgeType.HIGH_ROLLER)

    result = BoxOpening(
        box_id=box.id,
        item=item,
        price=box.price,
        points_delta=points_delta,
        badges_earned=badges,
        notes=notes,
    )
    state.apply(result)
    logger.info("Box %s opened: %s (%+g PP)", box.id, item.name, points_delta)
    return result
