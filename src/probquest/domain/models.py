"""Static game data models."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from probquest.domain.enums import Rarity


class GameEntity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str


class Suspect(GameEntity):
    avatar: str = ""
    attributes: Dict[str, bool | str] = Field(default_factory=dict)


class Clue(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    text: str = ""
    attribute: str
    expected_value: bool | str

    def matches(self, suspect: Suspect) -> bool:
        if self.attribute not in suspect.attributes:
            return False
        return suspect.attributes[self.attribute] == self.expected_value


class GameCase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    story: str = ""
    suspects: List[Suspect]
    clues: List[Clue] = Field(default_factory=list)
    guilty_suspect_id: str

    @model_validator(mode="after")
    def _guilty_is_a_suspect(self) -> "GameCase":
        if self.guilty_suspect_id not in {suspect.id for suspect in self.suspects}:
            raise ValueError(
                f"Case {self.id} names unknown guilty suspect {self.guilty_suspect_id}."
            )
        return self

    def guilty_suspect(self) -> Suspect:
        for suspect in self.suspects:
            if suspect.id == self.guilty_suspect_id:
                return suspect
        raise ValueError(f"Case {self.id} has no suspect {self.guilty_suspect_id}.")


class LuckyBoxItem(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    value: float
    probability: float = Field(ge=0.0, le=1.0)
    rarity: Rarity = Rarity.COMMON


class LuckyBox(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str
    price: int = Field(ge=0)
    items: List[LuckyBoxItem]
    color: str = ""


class GoalTarget(GameEntity):
    probability: float = Field(ge=0.0, le=1.0)
    reward: float
    penalty: float
    grid_area: str = ""


class BridgeCrossing(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    count: int = Field(ge=1)
    probability: float = Field(ge=0.0, le=1.0)
    reward: float
    penalty: float


class BridgeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    total_adventurers: int = Field(ge=1)
    crossings: List[BridgeCrossing]

    def crossing_for(self, count: int) -> BridgeCrossing | None:
        for crossing in self.crossings:
            if crossing.count == count:
                return crossing
        return None
