import unittest

from catan_boardgen.domain.board import HIGH_PROBABILITY_TOKENS, Terrain, pip_value
from catan_boardgen.domain.templates import SMALL_BOARD
from catan_boardgen.generation.adjacency import AdjacencyIndex
from catan_boardgen.generation.scoring import (
    duplicate_token_penalty,
    high_token_cap_penalty,
    high_token_cluster_penalty,
    pip_totals_by_terrain,
    pip_variance_penalty,
    score_numbers,
    score_terrain,
)

THREE_COLORS = (Terrain.WOOD, Terrain.BRICK, Terrain.ORE)


def three_colored_terrain():
    # (q - r) mod 3 never matches between axial neighbors.
    return [THREE_COLORS[(q - r) % 3] for q, r in SMALL_BOARD.coordinates]


class PipValueTests(unittest.TestCase):
    def test_pip_weights(self) -> None:
        self.assertEqual(pip_value(None), 0)
        self.assertEqual(pip_value(7), 0)
        self.assertEqual(pip_value(2), 1)
        self.assertEqual(pip_value(6), 5)
        self.assertEqual(pip_value(8), pip_value(6))
        self.assertEqual(pip_value(5), pip_value(9))

    def test_high_probability_tokens_are_six_and_eight(self) -> None:
        self.assertEqual(HIGH_PROBABILITY_TOKENS, frozenset({6, 8}))


class TerrainScoringTests(unittest.TestCase):
    def setUp(self) -> None:
        self.adjacency = AdjacencyIndex(SMALL_BOARD.coordinates)

    def test_three_coloring_scores_zero(self) -> None:
        self.assertEqual(score_terrain(three_colored_terrain(), self.adjacency), 0.0)

    def test_uniform_board_counts_every_pair_twice(self) -> None:
        terrains = [Terrain.WOOD] * SMALL_BOARD.cell_count
        self.assertEqual(score_terrain(terrains, self.adjacency), 42 * 2 * 10.0)

    def test_single_clash_is_counted_from_both_ends(self) -> None:
        terrains = three_colored_terrain()
        # Center normally brick; ore matches three of its neighbors.
        terrains[SMALL_BOARD.center_index] = Terrain.ORE
        self.assertEqual(score_terrain(terrains, self.adjacency), 60.0)


class NumberScoringTests(unittest.TestCase):
    def setUp(self) -> None:
        self.adjacency = AdjacencyIndex(SMALL_BOARD.coordinates)
        self.empty = [None] * SMALL_BOARD.cell_count

    def test_adjacent_red_tokens_are_penalized(self) -> None:
        numbers = list(self.empty)
        numbers[0], numbers[1] = 6, 8
        self.assertEqual(high_token_cluster_penalty(numbers, self.adjacency), 200.0)
        self.assertEqual(duplicate_token_penalty(numbers, self.adjacency), 0.0)

    def test_separated_red_tokens_are_free(self) -> None:
        numbers = list(self.empty)
        numbers[0], numbers[2] = 6, 8
        self.assertEqual(high_token_cluster_penalty(numbers, self.adjacency), 0.0)

    def test_identical_neighbors_are_penalized(self) -> None:
        numbers = list(self.empty)
        numbers[0], numbers[1] = 5, 5
        self.assertEqual(duplicate_token_penalty(numbers, self.adjacency), 60.0)
        self.assertEqual(high_token_cluster_penalty(numbers, self.adjacency), 0.0)

        numbers[0], numbers[1] = 6, 6
        self.assertEqual(duplicate_token_penalty(numbers, self.adjacency), 60.0)
        self.assertEqual(high_token_cluster_penalty(numbers, self.adjacency), 200.0)

    def test_red_token_cap_per_terrain(self) -> None:
        terrains = [Terrain.WOOD] * SMALL_BOARD.cell_count
        numbers = list(self.empty)
        numbers[0], numbers[2] = 6, 8
        self.assertEqual(high_token_cap_penalty(numbers, terrains), 0.0)
        numbers[7] = 6
        self.assertEqual(high_token_cap_penalty(numbers, terrains), 50.0)
        numbers[16] = 8
        self.assertEqual(high_token_cap_penalty(numbers, terrains), 100.0)

    def test_desert_is_ignored_by_cap(self) -> None:
        terrains = [Terrain.DESERT] * SMALL_BOARD.cell_count
        numbers = [6] * SMALL_BOARD.cell_count
        self.assertEqual(high_token_cap_penalty(numbers, terrains), 0.0)

    def test_pip_variance(self) -> None:
        terrains = three_colored_terrain()
        numbers = list(self.empty)
        numbers[0] = 6
        self.assertEqual(pip_totals_by_terrain(numbers, terrains)[Terrain.WOOD], 5)
        # Totals (5, 0, 0, 0, 0): mean 1, variance 4, weighted by 2.
        self.assertAlmostEqual(pip_variance_penalty(numbers, terrains), 8.0)

    def test_total_number_score(self) -> None:
        terrains = three_colored_terrain()
        numbers = list(self.empty)
        numbers[0], numbers[1] = 6, 8
        # 200 for the red pair, variance of (5, 5, 0, 0, 0) is 6 -> 12.
        self.assertAlmostEqual(score_numbers(numbers, terrains, self.adjacency), 212.0)

    def test_empty_layout_scores_zero(self) -> None:
        terrains = three_colored_terrain()
        self.assertEqual(score_numbers(self.empty, terrains, self.adjacency), 0.0)

    def test_length_mismatch_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            score_numbers([None, 6], three_colored_terrain(), self.adjacency)


if __name__ == "__main__":
    unittest.main()
