"""Load static game data from YAML and validate it against the engine."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

import yaml

from probquest.domain.errors import InvalidInputError
from probquest.domain.models import BridgeConfig, GameCase, GoalTarget, LuckyBox
from probquest.inference.distribution import validate_probabilities

logger = logging.getLogger(__name__)

_CATALOG_CACHE: dict[Path, dict[str, Any]] = {}


@dataclass(frozen=True)
class LuckyBoxCatalog:
    boxes: list[LuckyBox]
    reveal_delay_ms: int = 0


@dataclass(frozen=True)
class GoalCatalog:
    targets: list[GoalTarget]
    reveal_delay_ms: int = 0


@dataclass(frozen=True)
class BridgeCatalog:
    bridge: BridgeConfig
    reveal_delay_ms: int = 0


def _games_dir() -> Path:
    root = Path(__file__).resolve().parents[3]
    return root / "data" / "games"


def _read(path: Path) -> dict[str, Any]:
    resolved = path.resolve()
    cached = _CATALOG_CACHE.get(resolved)
    if cached is not None:
        return cached
    data = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    logger.debug("Loaded game data from %s", resolved)
    _CATALOG_CACHE[resolved] = data
    return data


def clear_cache() -> None:
    _CATALOG_CACHE.clear()


def load_lucky_boxes(path: Path | None = None) -> LuckyBoxCatalog:
    data = _read(path or _games_dir() / "lucky_boxes.yml")
    boxes = [LuckyBox.model_validate(item) for item in data.get("boxes", []) or []]
    if not boxes:
        raise InvalidInputError("Lucky box catalog has no boxes.")
    for box in boxes:
        validate_probabilities([item.probability for item in box.items])
    return LuckyBoxCatalog(boxes=boxes, reveal_delay_ms=int(data.get("reveal_delay_ms", 0)))


def load_goal_targets(path: Path | None = None) -> GoalCatalog:
    data = _read(path or _games_dir() / "goal_targets.yml")
    targets = [GoalTarget.model_validate(item) for item in data.get("targets", []) or []]
    if not targets:
        raise InvalidInputError("Goal catalog has no targets.")
    return GoalCatalog(targets=targets, reveal_delay_ms=int(data.get("reveal_delay_ms", 0)))


def load_bridge(path: Path | None = None) -> BridgeCatalog:
    data = _read(path or _games_dir() / "survival_bridge.yml")
    bridge = BridgeConfig.model_validate(
        {
            "total_adventurers": data.get("total_adventurers"),
            "crossings": data.get("crossings", []) or [],
        }
    )
    if not bridge.crossings:
        raise InvalidInputError("Bridge catalog has no crossings.")
    return BridgeCatalog(bridge=bridge, reveal_delay_ms=int(data.get("reveal_delay_ms", 0)))


def load_cases(path: Path | None = None) -> list[GameCase]:
    data = _read(path or _games_dir() / "cases.yml")
    return [GameCase.model_validate(item) for item in data.get("cases", []) or []]
