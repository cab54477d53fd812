from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

from catan_boardgen.domain.board import (
    NUMBERED_TERRAINS,
    Terrain,
    is_high_probability,
    pip_value,
)

from .adjacency import AdjacencyIndex

SAME_TERRAIN_PENALTY = 10.0
HIGH_TOKEN_CLUSTER_PENALTY = 100.0
DUPLICATE_TOKEN_PENALTY = 30.0
HIGH_TOKEN_CAP = 2
HIGH_TOKEN_CAP_PENALTY = 50.0
PIP_VARIANCE_WEIGHT = 2.0

# Both scores walk every directed neighbor link, so an unordered pair is
# counted from each endpoint.


def score_terrain(terrains: Sequence[Terrain], adjacency: AdjacencyIndex) -> float:
    score = 0.0
    for index, terrain in enumerate(terrains):
        for neighbor in adjacency.neighbors(index):
            if terrains[neighbor] == terrain:
                score += SAME_TERRAIN_PENALTY
    return score


def high_token_cluster_penalty(numbers: Sequence[Optional[int]], adjacency: AdjacencyIndex) -> float:
    score = 0.0
    for index, number in enumerate(numbers):
        if not is_high_probability(number):
            continue
        for neighbor in adjacency.neighbors(index):
            if is_high_probability(numbers[neighbor]):
                score += HIGH_TOKEN_CLUSTER_PENALTY
    return score


def duplicate_token_penalty(numbers: Sequence[Optional[int]], adjacency: AdjacencyIndex) -> float:
    score = 0.0
    for index, number in enumerate(numbers):
        if number is None:
            continue
        for neighbor in adjacency.neighbors(index):
            if numbers[neighbor] == number:
                score += DUPLICATE_TOKEN_PENALTY
    return score


def high_token_cap_penalty(numbers: Sequence[Optional[int]], terrains: Sequence[Terrain]) -> float:
    high_counts = Counter(
        terrain for terrain, number in zip(terrains, numbers) if is_high_probability(number)
    )
    score = 0.0
    for terrain in NUMBERED_TERRAINS:
        excess = high_counts[terrain] - HIGH_TOKEN_CAP
        if excess > 0:
            score += excess * HIGH_TOKEN_CAP_PENALTY
    return score


def pip_totals_by_terrain(numbers: Sequence[Optional[int]], terrains: Sequence[Terrain]) -> Dict[Terrain, int]:
    totals = {terrain: 0 for terrain in NUMBERED_TERRAINS}
    for terrain, number in zip(terrains, numbers):
        if number is None or terrain not in totals:
            continue
        totals[terrain] += pip_value(number)
    return totals


def pip_variance_penalty(numbers: Sequence[Optional[int]], terrains: Sequence[Terrain]) -> float:
    totals = list(pip_totals_by_terrain(numbers, terrains).values())
    mean = sum(totals) / len(totals)
    variance = sum((total - mean) ** 2 for total in totals) / len(totals)
    return variance * PIP_VARIANCE_WEIGHT


def score_numbers(
    numbers: Sequence[Optional[int]],
    terrains: Sequence[Terrain],
    adjacency: AdjacencyIndex,
) -> float:
    """Penalty for a token layout over a fixed terrain layout; lower is fairer.

    Combines red-token clustering, identical neighbors, too many red tokens on
    one terrain, and the spread of pip totals across the numbered terrains.
    """
    if len(numbers) != len(terrains):
        raise ValueError(f"Expected {len(terrains)} number slots, received {len(numbers)}.")
    return (
        high_token_cluster_penalty(numbers, adjacency)
        + duplicate_token_penalty(numbers, adjacency)
        + high_token_cap_penalty(numbers, terrains)
        + pip_variance_penalty(numbers, terrains)
    )
