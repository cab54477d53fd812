from __future__ import annotations

from typing import Dict, Iterator, Optional, Sequence, Tuple

from catan_boardgen.domain.board import AXIAL_DIRECTIONS, Coordinate


class AdjacencyIndex:
    """Template index -> on-board neighbor indices, built once per coordinate set."""

    def __init__(self, coordinates: Sequence[Coordinate]) -> None:
        self._coordinates: Tuple[Coordinate, ...] = tuple((int(q), int(r)) for q, r in coordinates)
        self._index_lookup: Dict[Coordinate, int] = {
            coordinate: index for index, coordinate in enumerate(self._coordinates)
        }
        self._neighbors: Tuple[Tuple[int, ...], ...] = tuple(
            self._on_board_neighbors(coordinate) for coordinate in self._coordinates
        )

    def __len__(self) -> int:
        return len(self._coordinates)

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        return self._coordinates

    def index_of(self, coordinate: Coordinate) -> Optional[int]:
        return self._index_lookup.get((coordinate[0], coordinate[1]))

    def neighbors(self, index: int) -> Tuple[int, ...]:
        return self._neighbors[index]

    def neighbors_of(self, coordinate: Coordinate) -> Tuple[int, ...]:
        index = self.index_of(coordinate)
        if index is None:
            return self._on_board_neighbors((coordinate[0], coordinate[1]))
        return self._neighbors[index]

    def pairs(self) -> Iterator[Tuple[int, int]]:
        for index, neighbor_ids in enumerate(self._neighbors):
            for neighbor in neighbor_ids:
                if index < neighbor:
                    yield (index, neighbor)

    def _on_board_neighbors(self, coordinate: Coordinate) -> Tuple[int, ...]:
        q, r = coordinate
        found = []
        for dq, dr in AXIAL_DIRECTIONS:
            neighbor = self._index_lookup.get((q + dq, r + dr))
            if neighbor is not None:
                found.append(neighbor)
        return tuple(found)
