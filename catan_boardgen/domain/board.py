from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

Coordinate = Tuple[int, int]

AXIAL_DIRECTIONS: Tuple[Coordinate, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)

PIP_VALUES: Dict[int, int] = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}

# Tokens tied for the maximum pip weight (the red 6 and 8).
HIGH_PROBABILITY_TOKENS = frozenset(
    token for token, pips in PIP_VALUES.items() if pips == max(PIP_VALUES.values())
)


class PlayerCount(str, Enum):
    SMALL = "small"
    LARGE = "large"

    @classmethod
    def _missing_(cls, value: object) -> Optional["PlayerCount"]:
        aliases = {"3-4": cls.SMALL, "5-6": cls.LARGE}
        return aliases.get(str(value).strip().lower())


class Terrain(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"
    DESERT = "desert"

    @property
    def label(self) -> str:
        return self.value.capitalize()


NUMBERED_TERRAINS: Tuple[Terrain, ...] = tuple(
    terrain for terrain in Terrain if terrain is not Terrain.DESERT
)


class PortType(str, Enum):
    ANY = "any"
    WOOD = "wood"
    BRICK = "brick"
    WHEAT = "wheat"
    SHEEP = "sheep"
    ORE = "ore"

    @property
    def trade_ratio(self) -> int:
        return 3 if self is PortType.ANY else 2

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} {self.trade_ratio}:1"


def pip_value(token_number: Optional[int]) -> int:
    if token_number is None:
        return 0
    return PIP_VALUES.get(token_number, 0)


def is_high_probability(token_number: Optional[int]) -> bool:
    return token_number in HIGH_PROBABILITY_TOKENS


@dataclass(frozen=True)
class HexTile:
    id: int
    q: int
    r: int
    terrain: Terrain
    number: Optional[int]

    @property
    def coordinate(self) -> Coordinate:
        return (self.q, self.r)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "q": self.q,
            "r": self.r,
            "terrain": self.terrain.value,
            "number": self.number,
        }


@dataclass(frozen=True)
class Port:
    id: int
    q: int
    r: int
    facing: int
    port_type: PortType

    @property
    def rotation(self) -> int:
        """Orientation in degrees for the renderer, one step per facing."""
        return self.facing * 60

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "q": self.q,
            "r": self.r,
            "facing": self.facing,
            "rotation": self.rotation,
            "type": self.port_type.value,
        }


@dataclass(frozen=True)
class Board:
    """Finished layout handed to the renderer: read-only tile and port records."""

    tiles: Tuple[HexTile, ...]
    ports: Tuple[Port, ...]
    player_count: PlayerCount
    seed: Optional[int] = None
    _tile_lookup: Dict[int, HexTile] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        object.__setattr__(self, "ports", tuple(self.ports))
        object.__setattr__(self, "player_count", PlayerCount(self.player_count))
        object.__setattr__(self, "_tile_lookup", {tile.id: tile for tile in self.tiles})

    def get_tile(self, tile_id: int) -> HexTile:
        return self._tile_lookup[tile_id]

    def terrains(self) -> List[Terrain]:
        return [tile.terrain for tile in self.tiles]

    def numbers(self) -> List[Optional[int]]:
        return [tile.number for tile in self.tiles]

    def desert_tiles(self) -> List[HexTile]:
        return [tile for tile in self.tiles if tile.terrain is Terrain.DESERT]

    def signature(self) -> str:
        tile_bits = [
            f"{tile.id}:{tile.terrain.value}:{tile.number if tile.number is not None else 'D'}"
            for tile in sorted(self.tiles, key=lambda item: item.id)
        ]
        port_bits = [
            f"{port.id}:{port.port_type.value}:{port.q},{port.r}/{port.facing}"
            for port in sorted(self.ports, key=lambda item: item.id)
        ]
        return ";".join([*tile_bits, *port_bits])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_count": self.player_count.value,
            "seed": self.seed,
            "tiles": [tile.to_dict() for tile in self.tiles],
            "ports": [port.to_dict() for port in self.ports],
        }
