"""Game rounds built on the shared inference engine."""

from probquest.games.find_the_thief import accuse, likelihood_lines, open_investigation
from probquest.games.goal_or_miss import best_target, take_shot, target_ev
from probquest.games.lucky_box import best_box, box_ev, box_profit_ev, open_box
from probquest.games.results import BoxOpening, CrossingResult, ShotResult, Verdict
from probquest.games.survival_bridge import BridgeParty, best_crossing, cross, crossing_ev

__all__ = [
    "BoxOpening",
    "BridgeParty",
    "CrossingResult",
    "ShotResult",
    "Verdict",
    "accuse",
    "best_box",
    "best_crossing",
    "best_target",
    "box_ev",
    "box_profit_ev",
    "cross",
    "crossing_ev",
    "likelihood_lines",
    "open_box",
    "open_investigation",
    "take_shot",
    "target_ev",
]
