import unittest
from collections import Counter

from catan_boardgen.domain.board import PlayerCount, PortType, Terrain
from catan_boardgen.domain.templates import (
    LARGE_BOARD,
    SMALL_BOARD,
    BoardTemplate,
    BoardTemplateError,
    PortSlot,
    get_template,
)


class BoardTemplateTests(unittest.TestCase):
    def test_small_template_shape(self) -> None:
        self.assertEqual(SMALL_BOARD.cell_count, 19)
        self.assertEqual(len(SMALL_BOARD.number_tokens), 18)
        self.assertEqual(len(SMALL_BOARD.port_slots), 9)
        self.assertEqual(SMALL_BOARD.desert_count, 1)
        self.assertEqual(SMALL_BOARD.center_index, 9)
        self.assertEqual(SMALL_BOARD.coordinates[SMALL_BOARD.center_index], (0, 2))

    def test_large_template_shape(self) -> None:
        self.assertEqual(LARGE_BOARD.cell_count, 30)
        self.assertEqual(len(LARGE_BOARD.number_tokens), 28)
        self.assertEqual(len(LARGE_BOARD.port_slots), 11)
        self.assertEqual(LARGE_BOARD.desert_count, 2)
        self.assertEqual(LARGE_BOARD.center_index, 15)

    def test_row_lengths_match_board_outline(self) -> None:
        small_rows = Counter(r for _, r in SMALL_BOARD.coordinates)
        large_rows = Counter(r for _, r in LARGE_BOARD.coordinates)
        self.assertEqual([small_rows[r] for r in range(5)], [3, 4, 5, 4, 3])
        self.assertEqual([large_rows[r] for r in range(7)], [3, 4, 5, 6, 5, 4, 3])

    def test_terrain_pool_matches_counts(self) -> None:
        pool = SMALL_BOARD.terrain_pool()
        self.assertEqual(len(pool), 19)
        self.assertEqual(Counter(pool)[Terrain.WOOD], 4)
        self.assertEqual(Counter(pool)[Terrain.ORE], 3)
        self.assertEqual(Counter(pool)[Terrain.DESERT], 1)

    def test_port_types_follow_fixed_binding(self) -> None:
        self.assertEqual(
            SMALL_BOARD.port_types(),
            [
                PortType.ANY,
                PortType.WHEAT,
                PortType.ANY,
                PortType.BRICK,
                PortType.WOOD,
                PortType.ORE,
                PortType.ANY,
                PortType.ANY,
                PortType.SHEEP,
            ],
        )
        self.assertEqual(Counter(LARGE_BOARD.port_types())[PortType.SHEEP], 2)
        self.assertEqual(Counter(LARGE_BOARD.port_types())[PortType.ANY], 5)

    def test_get_template_accepts_labels(self) -> None:
        self.assertIs(get_template(PlayerCount.SMALL), SMALL_BOARD)
        self.assertIs(get_template("large"), LARGE_BOARD)
        self.assertIs(get_template("3-4"), SMALL_BOARD)
        self.assertIs(get_template("5-6"), LARGE_BOARD)

    def test_unknown_player_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            get_template("7-8")

    def test_mismatched_token_count_fails_fast(self) -> None:
        with self.assertRaises(BoardTemplateError):
            BoardTemplate(
                player_count=PlayerCount.SMALL,
                coordinates=((0, 0), (1, 0), (0, 1)),
                terrain_counts=((Terrain.WOOD, 2), (Terrain.DESERT, 1)),
                number_tokens=(6,),
                port_slots=(),
            )

    def test_mismatched_terrain_total_fails_fast(self) -> None:
        with self.assertRaises(BoardTemplateError):
            BoardTemplate(
                player_count=PlayerCount.SMALL,
                coordinates=((0, 0), (1, 0), (0, 1)),
                terrain_counts=((Terrain.WOOD, 3), (Terrain.DESERT, 1)),
                number_tokens=(6, 8, 9),
                port_slots=(),
            )

    def test_invalid_port_facing_fails_fast(self) -> None:
        with self.assertRaises(BoardTemplateError):
            BoardTemplate(
                player_count=PlayerCount.SMALL,
                coordinates=((0, 0), (1, 0)),
                terrain_counts=((Terrain.WOOD, 1), (Terrain.ORE, 1)),
                number_tokens=(6, 8),
                port_slots=(PortSlot(q=0, r=-1, facing=6, port_type=PortType.ANY),),
            )

    def test_repeated_coordinate_fails_fast(self) -> None:
        with self.assertRaises(BoardTemplateError):
            BoardTemplate(
                player_count=PlayerCount.SMALL,
                coordinates=((0, 0), (0, 0)),
                terrain_counts=((Terrain.WOOD, 2),),
                number_tokens=(6, 8),
                port_slots=(),
            )

    def test_port_labels(self) -> None:
        self.assertEqual(PortType.ANY.label, "Any 3:1")
        self.assertEqual(PortType.ORE.label, "Ore 2:1")
        self.assertEqual(Terrain.WHEAT.label, "Wheat")


if __name__ == "__main__":
    unittest.main()
