from __future__ import annotations

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence

from catan_boardgen.domain.board import (
    Board,
    HexTile,
    Port,
    Terrain,
    is_high_probability,
)
from catan_boardgen.domain.templates import BoardTemplate, BoardTemplateError, get_template

from .adjacency import AdjacencyIndex
from .annealing import anneal
from .scoring import pip_totals_by_terrain, score_numbers, score_terrain
from .types import (
    NUMBER_SCHEDULE,
    TERRAIN_SCHEDULE,
    AnnealingSchedule,
    BoardConfig,
    FairnessReport,
    NumberPlacement,
    PortPlacement,
    TerrainPlacement,
)

logger = logging.getLogger(__name__)


def generate_board(
    config: Optional[BoardConfig] = None,
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Board:
    """Lay out terrain, number tokens and ports for one board.

    Pass ``seed`` for a reproducible board, or ``rng`` to draw from a caller
    owned generator. With neither, every call produces a different board.
    """
    config = config or BoardConfig()
    rng = rng if rng is not None else random.Random(seed)
    template = get_template(config.player_count)
    adjacency = AdjacencyIndex(template.coordinates)

    terrains = generate_terrain(config, template, adjacency, rng)
    numbers = generate_numbers(config, template, terrains, adjacency, rng)
    ports = generate_ports(config, template, rng)

    tiles = tuple(
        HexTile(id=index, q=q, r=r, terrain=terrains[index], number=numbers[index])
        for index, (q, r) in enumerate(template.coordinates)
    )
    return Board(tiles=tiles, ports=tuple(ports), player_count=template.player_count, seed=seed)


def generate_terrain(
    config: BoardConfig,
    template: BoardTemplate,
    adjacency: AdjacencyIndex,
    rng: random.Random,
    *,
    schedule: AnnealingSchedule = TERRAIN_SCHEDULE,
) -> List[Terrain]:
    terrains = template.terrain_pool()
    _require_length("terrain", terrains, template.cell_count)
    rng.shuffle(terrains)

    center_index = template.center_index
    if config.centers_desert:
        _seat_desert_at(terrains, center_index)

    if config.terrain_placement is TerrainPlacement.RANDOM:
        return terrains

    def can_swap(i: int, j: int, current: Sequence[Terrain]) -> bool:
        if current[i] == current[j]:
            return False
        if config.centers_desert and center_index in (i, j):
            return Terrain.DESERT not in (current[i], current[j])
        return True

    result = anneal(
        terrains,
        lambda current: score_terrain(current, adjacency),
        can_swap,
        rng=rng,
        schedule=schedule,
    )
    logger.debug("Terrain layout score %.1f (started at %.1f).", result.best_score, result.initial_score)
    return result.assignment


def generate_numbers(
    config: BoardConfig,
    template: BoardTemplate,
    terrains: Sequence[Terrain],
    adjacency: AdjacencyIndex,
    rng: random.Random,
    *,
    schedule: AnnealingSchedule = NUMBER_SCHEDULE,
) -> List[Optional[int]]:
    numbered_positions = [index for index, terrain in enumerate(terrains) if terrain is not Terrain.DESERT]
    tokens = list(template.number_tokens)
    _require_length("number token", tokens, len(numbered_positions))
    rng.shuffle(tokens)

    numbers: List[Optional[int]] = [None] * len(terrains)
    for position, token in zip(numbered_positions, tokens):
        numbers[position] = token

    if config.number_placement is NumberPlacement.RANDOM:
        return numbers

    fixed_terrains = tuple(terrains)
    result = anneal(
        numbers,
        lambda current: score_numbers(current, fixed_terrains, adjacency),
        lambda i, j, current: current[i] is not None and current[j] is not None,
        rng=rng,
        schedule=schedule,
        positions=numbered_positions,
    )
    logger.debug("Number layout score %.1f (started at %.1f).", result.best_score, result.initial_score)
    return result.assignment


def generate_ports(config: BoardConfig, template: BoardTemplate, rng: random.Random) -> List[Port]:
    port_types = template.port_types()
    if config.port_placement is PortPlacement.RANDOM:
        rng.shuffle(port_types)

    return [
        Port(id=index, q=slot.q, r=slot.r, facing=slot.facing, port_type=port_type)
        for index, (slot, port_type) in enumerate(zip(template.port_slots, port_types))
    ]


def validate_board_counts(board: Board, template: Optional[BoardTemplate] = None) -> bool:
    template = template or get_template(board.player_count)
    if len(board.tiles) != template.cell_count:
        return False

    numbers = []
    for tile in board.tiles:
        if tile.terrain is Terrain.DESERT:
            if tile.number is not None:
                return False
        elif tile.number is None:
            return False
        else:
            numbers.append(tile.number)

    if Counter(board.terrains()) != Counter(template.terrain_count_map()):
        return False
    if sorted(numbers) != sorted(template.number_tokens):
        return False
    return Counter(port.port_type for port in board.ports) == Counter(template.port_types())


def validate_high_token_spacing(board: Board) -> bool:
    adjacency = AdjacencyIndex([tile.coordinate for tile in board.tiles])
    numbers = board.numbers()
    for first, second in adjacency.pairs():
        if is_high_probability(numbers[first]) and is_high_probability(numbers[second]):
            return False
    return True


def board_fairness(board: Board) -> FairnessReport:
    adjacency = AdjacencyIndex([tile.coordinate for tile in board.tiles])
    terrains = board.terrains()
    numbers = board.numbers()
    return FairnessReport(
        terrain_score=score_terrain(terrains, adjacency),
        number_score=score_numbers(numbers, terrains, adjacency),
        pip_totals={terrain.value: total for terrain, total in pip_totals_by_terrain(numbers, terrains).items()},
        high_tokens_separated=validate_high_token_spacing(board),
        desert_tile_ids=[tile.id for tile in board.desert_tiles()],
        seed=board.seed,
    )


def _seat_desert_at(terrains: List[Terrain], center_index: int) -> None:
    if terrains[center_index] is Terrain.DESERT or Terrain.DESERT not in terrains:
        return
    desert_index = terrains.index(Terrain.DESERT)
    terrains[desert_index], terrains[center_index] = terrains[center_index], terrains[desert_index]


def _require_length(label: str, pool: Sequence[object], expected: int) -> None:
    if len(pool) != expected:
        raise BoardTemplateError(f"Expected {expected} {label} values, received {len(pool)}.")
