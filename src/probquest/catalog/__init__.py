"""Static game data loading."""

from .loader import (
    BridgeCatalog,
    GoalCatalog,
    LuckyBoxCatalog,
    clear_cache,
    load_bridge,
    load_cases,
    load_goal_targets,
    load_lucky_boxes,
)

__all__ = [
    "BridgeCatalog",
    "GoalCatalog",
    "LuckyBoxCatalog",
    "clear_cache",
    "load_bridge",
    "load_cases",
    "load_goal_targets",
    "load_lucky_boxes",
]
