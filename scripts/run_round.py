from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from probquest import config
from probquest.catalog import load_bridge, load_cases, load_goal_targets, load_lucky_boxes
from probquest.domain.enums import Game
from probquest.games import (
    BridgeParty,
    accuse,
    cross,
    likelihood_lines,
    open_box,
    open_investigation,
    take_shot,
)
from probquest.progress.state import PlayerState
from probquest.util.logs import setup_logging
from probquest.util.rng import Rng

GAME_KEYS = {
    "box": Game.LUCKY_BOX,
    "thief": Game.FIND_THE_THIEF,
    "bridge": Game.SURVIVAL_BRIDGE,
    "goal": Game.GOAL_OR_MISS,
}


def _play_box(state: PlayerState, rng: Rng, choice: str | None) -> list[str]:
    catalog = load_lucky_boxes()
    box_id = int(choice) if choice else catalog.boxes[0].id
    box = next(b for b in catalog.boxes if b.id == box_id)
    return open_box(state, box, catalog.boxes, rng).notes


def _play_goal(state: PlayerState, rng: Rng, choice: str | None) -> list[str]:
    targets = load_goal_targets().targets
    target = next(t for t in targets if t.id == (choice or targets[0].id))
    return take_shot(state, target, rng).notes


def _play_bridge(
    state: PlayerState, rng: Rng, choice: str | None, party: BridgeParty
) -> list[str]:
    bridge = load_bridge().bridge
    return cross(state, party, bridge, int(choice or 1), rng).notes


def _play_thief(state: PlayerState, choice: str | None) -> list[str]:
    case = load_cases()[0]
    investigation = open_investigation(case)
    lines = [case.title]
    while not investigation.all_clues_revealed:
        clue = investigation.reveal_next_clue()
        lines.append(f"Clue: {clue.text}")
        if investigation.last_clue_contradicted:
            lines.append("No remaining suspect matches this clue.")
        lines.extend(f"  {line}" for line in likelihood_lines(investigation))
    accused = choice or investigation.leader().id
    lines.extend(accuse(state, investigation, accused).notes)
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Play seeded probability rounds.")
    parser.add_argument("--game", choices=sorted(GAME_KEYS), default="box")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--choice", type=str, default=None)
    parser.add_argument("--rounds", type=int, default=1)
    args = parser.parse_args()

    setup_logging()
    rng = Rng(args.seed)
    state = PlayerState()
    party = BridgeParty.fresh(load_bridge().bridge.total_adventurers)
    game = GAME_KEYS[args.game]

    print(f"{game} (seed {args.seed})")
    for index in range(args.rounds):
        round_rng = rng.fork(f"round-{index}")
        if game == Game.LUCKY_BOX:
            lines = _play_box(state, round_rng, args.choice)
        elif game == Game.GOAL_OR_MISS:
            lines = _play_goal(state, round_rng, args.choice)
        elif game == Game.SURVIVAL_BRIDGE:
            lines = _play_bridge(state, round_rng, args.choice, party)
        else:
            lines = _play_thief(state, args.choice)
        for line in lines:
            print(f"- {line}")
    print(f"Points: {state.points:g}")
    print(f"Badges: {', '.join(state.badges) or 'none'}")


if __name__ == "__main__":
    main()
