"""Shared fixtures for probquest tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from probquest.catalog import clear_cache, load_bridge, load_cases, load_goal_targets, load_lucky_boxes
from probquest.domain.models import Clue, GameCase, Suspect
from probquest.progress.state import PlayerState


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, draws: Iterable[float]) -> None:
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture(autouse=True)
def _fresh_catalog():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def player() -> PlayerState:
    return PlayerState()


@pytest.fixture
def five_suspects() -> list[Suspect]:
    return [
        Suspect(id="a", name="A", attributes={"hat": True, "shoes": "large"}),
        Suspect(id="b", name="B", attributes={"hat": True, "shoes": "small"}),
        Suspect(id="c", name="C", attributes={"hat": False, "shoes": "large"}),
        Suspect(id="d", name="D", attributes={"hat": False, "shoes": "small"}),
        Suspect(id="e", name="E", attributes={"hat": False, "shoes": "large"}),
    ]


@pytest.fixture
def small_case(five_suspects) -> GameCase:
    return GameCase(
        id="test-case",
        title="Test Case",
        suspects=five_suspects,
        clues=[
            Clue(id=1, attribute="hat", expected_value=True),
            Clue(id=2, attribute="shoes", expected_value="large"),
        ],
        guilty_suspect_id="a",
    )


@pytest.fixture
def boxes():
    return load_lucky_boxes().boxes


@pytest.fixture
def targets():
    return load_goal_targets().targets


@pytest.fixture
def bridge():
    return load_bridge().bridge


@pytest.fixture
def cases():
    return load_cases()
