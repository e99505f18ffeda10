from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from probquest.catalog import load_bridge, load_goal_targets, load_lucky_boxes
from probquest.games import (
    best_box,
    best_crossing,
    best_target,
    box_ev,
    box_profit_ev,
    crossing_ev,
    target_ev,
)


def _mark(is_best: bool) -> str:
    return " *" if is_best else ""


def main() -> None:
    parser = argparse.ArgumentParser(description="Print expected values for every game choice.")
    parser.parse_args()

    boxes = load_lucky_boxes().boxes
    top_box = best_box(boxes)
    print("Lucky Box Shop")
    for box in boxes:
        print(
            f"  {box.name}: EV {box_ev(box):.2f} PP, "
            f"net {box_profit_ev(box):+.2f} PP{_mark(box.id == top_box.id)}"
        )

    targets = load_goal_targets().targets
    top_target = best_target(targets)
    print("Goal or Miss")
    for target in targets:
        print(f"  {target.name}: EV {target_ev(target):.2f} PP{_mark(target.id == top_target.id)}")

    crossings = load_bridge().bridge.crossings
    top_crossing = best_crossing(crossings)
    print("Survival Bridge")
    for crossing in crossings:
        print(
            f"  {crossing.count} adventurers: EV {crossing_ev(crossing):.2f} PP"
            f"{_mark(crossing.count == top_crossing.count)}"
        )


if __name__ == "__main__":
    main()
