from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .board import Coordinate, PlayerCount, PortType, Terrain


class BoardTemplateError(ValueError):
    """Raised when template data or a pool built from it has the wrong shape."""


@dataclass(frozen=True)
class PortSlot:
    q: int
    r: int
    facing: int
    port_type: PortType


@dataclass(frozen=True)
class BoardTemplate:
    player_count: PlayerCount
    coordinates: Tuple[Coordinate, ...]
    terrain_counts: Tuple[Tuple[Terrain, int], ...]
    number_tokens: Tuple[int, ...]
    port_slots: Tuple[PortSlot, ...]

    def __post_init__(self) -> None:
        self.validate()

    @property
    def cell_count(self) -> int:
        return len(self.coordinates)

    @property
    def center_index(self) -> int:
        return len(self.coordinates) // 2

    @property
    def desert_count(self) -> int:
        return self.terrain_count_map().get(Terrain.DESERT, 0)

    def terrain_count_map(self) -> Dict[Terrain, int]:
        return {terrain: count for terrain, count in self.terrain_counts}

    def terrain_pool(self) -> List[Terrain]:
        pool: List[Terrain] = []
        for terrain, count in self.terrain_counts:
            pool.extend([terrain] * count)
        return pool

    def port_types(self) -> List[PortType]:
        return [slot.port_type for slot in self.port_slots]

    def validate(self) -> None:
        if len(set(self.coordinates)) != len(self.coordinates):
            raise BoardTemplateError(f"{self.player_count.value} template repeats a coordinate.")

        seen_terrains = [terrain for terrain, _ in self.terrain_counts]
        if len(set(seen_terrains)) != len(seen_terrains):
            raise BoardTemplateError(f"{self.player_count.value} template lists a terrain twice.")

        for terrain, count in self.terrain_counts:
            if count < 0:
                raise BoardTemplateError(f"Negative count {count} for {terrain.value}.")

        terrain_total = sum(count for _, count in self.terrain_counts)
        if terrain_total != self.cell_count:
            raise BoardTemplateError(
                f"Expected {self.cell_count} terrain tiles, template provides {terrain_total}."
            )

        expected_tokens = self.cell_count - self.desert_count
        if len(self.number_tokens) != expected_tokens:
            raise BoardTemplateError(
                f"Expected {expected_tokens} number tokens, template provides {len(self.number_tokens)}."
            )

        for slot in self.port_slots:
            if not 0 <= slot.facing < 6:
                raise BoardTemplateError(f"Port facing {slot.facing} at ({slot.q}, {slot.r}) is not in 0..5.")


def _slots(*entries: Tuple[int, int, int, PortType]) -> Tuple[PortSlot, ...]:
    return tuple(PortSlot(q=q, r=r, facing=facing, port_type=port_type) for q, r, facing, port_type in entries)


def _rows(*rows: Tuple[int, int, int]) -> Tuple[Coordinate, ...]:
    """Expand `(r, first_q, length)` row specs into coordinates, top row first."""
    coords: List[Coordinate] = []
    for r, first_q, length in rows:
        coords.extend((q, r) for q in range(first_q, first_q + length))
    return tuple(coords)


# Rows of 3-4-5-4-3.
SMALL_BOARD = BoardTemplate(
    player_count=PlayerCount.SMALL,
    coordinates=_rows((0, 0, 3), (1, -1, 4), (2, -2, 5), (3, -2, 4), (4, -2, 3)),
    terrain_counts=(
        (Terrain.WOOD, 4),
        (Terrain.BRICK, 3),
        (Terrain.WHEAT, 4),
        (Terrain.SHEEP, 4),
        (Terrain.ORE, 3),
        (Terrain.DESERT, 1),
    ),
    number_tokens=(2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12),
    port_slots=_slots(
        (0, -1, 0, PortType.ANY),
        (2, -1, 0, PortType.WHEAT),
        (3, -1, 1, PortType.ANY),
        (3, 1, 1, PortType.BRICK),
        (2, 3, 2, PortType.WOOD),
        (-1, 5, 3, PortType.ORE),
        (-3, 4, 4, PortType.ANY),
        (-3, 2, 5, PortType.ANY),
        (-1, 0, 5, PortType.SHEEP),
    ),
)

# Rows of 3-4-5-6-5-4-3; the last two slots sit on the frame extensions.
LARGE_BOARD = BoardTemplate(
    player_count=PlayerCount.LARGE,
    coordinates=_rows(
        (0, 0, 3),
        (1, -1, 4),
        (2, -2, 5),
        (3, -3, 6),
        (4, -3, 5),
        (5, -3, 4),
        (6, -3, 3),
    ),
    terrain_counts=(
        (Terrain.WOOD, 6),
        (Terrain.BRICK, 5),
        (Terrain.WHEAT, 6),
        (Terrain.SHEEP, 6),
        (Terrain.ORE, 5),
        (Terrain.DESERT, 2),
    ),
    number_tokens=(
        2, 2, 3, 3, 3, 4, 4, 4, 5, 5, 5, 6, 6, 6,
        8, 8, 8, 9, 9, 9, 10, 10, 10, 11, 11, 11, 12, 12,
    ),
    port_slots=_slots(
        (0, -1, 0, PortType.ANY),
        (2, -1, 0, PortType.WHEAT),
        (3, -1, 1, PortType.ANY),
        (3, 1, 1, PortType.BRICK),
        (1, 5, 2, PortType.WOOD),
        (-2, 7, 3, PortType.ORE),
        (-4, 4, 4, PortType.ANY),
        (-3, 2, 5, PortType.ANY),
        (-1, 0, 5, PortType.SHEEP),
        (3, 2, 1, PortType.ANY),
        (3, 3, 1, PortType.SHEEP),
    ),
)

TEMPLATES: Dict[PlayerCount, BoardTemplate] = {
    PlayerCount.SMALL: SMALL_BOARD,
    PlayerCount.LARGE: LARGE_BOARD,
}


def get_template(player_count: PlayerCount | str) -> BoardTemplate:
    return TEMPLATES[PlayerCount(player_count)]

