"""Placement engine: scoring, annealing and board assembly."""

from .adjacency import AdjacencyIndex
from .annealing import anneal
from .assembly import (
    board_fairness,
    generate_board,
    generate_numbers,
    generate_ports,
    generate_terrain,
    validate_board_counts,
    validate_high_token_spacing,
)
from .scoring import (
    duplicate_token_penalty,
    high_token_cap_penalty,
    high_token_cluster_penalty,
    pip_totals_by_terrain,
    pip_variance_penalty,
    score_numbers,
    score_terrain,
)
from .types import (
    NUMBER_SCHEDULE,
    TERRAIN_SCHEDULE,
    AnnealingResult,
    AnnealingSchedule,
    BoardConfig,
    DesertPlacement,
    FairnessReport,
    NumberPlacement,
    PortPlacement,
    TerrainPlacement,
)

__all__ = [
    "AdjacencyIndex",
    "anneal",
    "board_fairness",
    "generate_board",
    "generate_numbers",
    "generate_ports",
    "generate_terrain",
    "validate_board_counts",
    "validate_high_token_spacing",
    "duplicate_token_penalty",
    "high_token_cap_penalty",
    "high_token_cluster_penalty",
    "pip_totals_by_terrain",
    "pip_variance_penalty",
    "score_numbers",
    "score_terrain",
    "NUMBER_SCHEDULE",
    "TERRAIN_SCHEDULE",
    "AnnealingResult",
    "AnnealingSchedule",
    "BoardConfig",
    "DesertPlacement",
    "FairnessReport",
    "NumberPlacement",
    "PortPlacement",
    "TerrainPlacement",
]
