from __future__ import annotations

import logging
import math
import random
from typing import Callable, List, Optional, Sequence, TypeVar

from .types import AnnealingResult, AnnealingSchedule

logger = logging.getLogger(__name__)

T = TypeVar("T")

ScoreFn = Callable[[Sequence[T]], float]
SwapPredicate = Callable[[int, int, Sequence[T]], bool]


def anneal(
    initial: Sequence[T],
    score_fn: ScoreFn,
    can_swap: SwapPredicate,
    *,
    rng: random.Random,
    schedule: AnnealingSchedule,
    positions: Optional[Sequence[int]] = None,
) -> AnnealingResult:
    """Improve ``initial`` by random pairwise swaps under a cooling schedule.

    Swaps are drawn from ``positions`` (every index by default). A swap that
    ``can_swap`` rejects is skipped without cooling. Each evaluated swap is
    kept when it lowers the score, or with probability ``exp(-delta / T)``
    otherwise. The best layout seen is returned, so the result never scores
    worse than ``initial``.
    """
    current: List[T] = list(initial)
    candidates = list(range(len(current))) if positions is None else list(positions)

    current_score = score_fn(current)
    best = current[:]
    best_score = current_score
    result = AnnealingResult(assignment=best, initial_score=current_score, best_score=best_score)

    if len(candidates) < 2:
        logger.debug("Nothing to anneal: %d swappable position(s).", len(candidates))
        return result

    temperature = schedule.initial_temperature
    for _ in range(schedule.iterations):
        i, j = rng.sample(candidates, 2)
        if not can_swap(i, j, current):
            continue

        result.attempted_swaps += 1
        current[i], current[j] = current[j], current[i]
        new_score = score_fn(current)

        delta = new_score - current_score
        if delta < 0 or rng.random() < math.exp(-delta / temperature):
            current_score = new_score
            result.accepted_swaps += 1
            if current_score < best_score:
                best = current[:]
                best_score = current_score
        else:
            current[i], current[j] = current[j], current[i]

        temperature *= schedule.cooling_rate

    result.assignment = best
    result.best_score = best_score
    logger.debug(
        "Annealed %d positions: score %.2f -> %.2f (%d/%d swaps accepted).",
        len(candidates),
        result.initial_score,
        best_score,
        result.accepted_swaps,
        result.attempted_swaps,
    )
    return result
