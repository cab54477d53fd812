from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from catan_boardgen.domain.board import PlayerCount


class DesertPlacement(str, Enum):
    CENTER = "center"
    RANDOM = "random"


class TerrainPlacement(str, Enum):
    BALANCED = "balanced"
    RANDOM = "random"


class NumberPlacement(str, Enum):
    BALANCED = "balanced"
    RANDOM = "random"


class PortPlacement(str, Enum):
    FIXED = "fixed"
    RANDOM = "random"


_FIELD_ENUMS = {
    "player_count": PlayerCount,
    "desert_placement": DesertPlacement,
    "terrain_placement": TerrainPlacement,
    "number_placement": NumberPlacement,
    "port_placement": PortPlacement,
}


@dataclass(frozen=True)
class BoardConfig:
    player_count: PlayerCount = PlayerCount.SMALL
    desert_placement: DesertPlacement = DesertPlacement.CENTER
    terrain_placement: TerrainPlacement = TerrainPlacement.BALANCED
    number_placement: NumberPlacement = NumberPlacement.BALANCED
    port_placement: PortPlacement = PortPlacement.FIXED

    def __post_init__(self) -> None:
        # Plain strings are accepted and coerced; unknown values raise ValueError.
        for name, enum_cls in _FIELD_ENUMS.items():
            object.__setattr__(self, name, enum_cls(getattr(self, name)))

    @property
    def centers_desert(self) -> bool:
        return self.desert_placement is DesertPlacement.CENTER

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "BoardConfig":
        """Build a config from plain strings; unknown values raise ``ValueError``."""
        return cls(**{name: values[name] for name in _FIELD_ENUMS if name in values})

    def to_dict(self) -> dict[str, str]:
        return {
            "player_count": self.player_count.value,
            "desert_placement": self.desert_placement.value,
            "terrain_placement": self.terrain_placement.value,
            "number_placement": self.number_placement.value,
            "port_placement": self.port_placement.value,
        }


@dataclass(frozen=True)
class AnnealingSchedule:
    iterations: int
    initial_temperature: float = 1.0
    cooling_rate: float = 0.995


TERRAIN_SCHEDULE = AnnealingSchedule(iterations=3000)
NUMBER_SCHEDULE = AnnealingSchedule(iterations=4000)


@dataclass
class AnnealingResult:
    assignment: List
    initial_score: float
    best_score: float
    attempted_swaps: int = 0
    accepted_swaps: int = 0

    @property
    def improvement(self) -> float:
        return self.initial_score - self.best_score


@dataclass
class FairnessReport:
    terrain_score: float
    number_score: float
    pip_totals: dict[str, int]
    high_tokens_separated: bool
    desert_tile_ids: List[int]
    seed: Optional[int] = None
