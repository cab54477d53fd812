"""Domain values and the compiled-in board templates."""

from .board import (
    AXIAL_DIRECTIONS,
    HIGH_PROBABILITY_TOKENS,
    NUMBERED_TERRAINS,
    PIP_VALUES,
    Board,
    Coordinate,
    HexTile,
    PlayerCount,
    Port,
    PortType,
    Terrain,
    is_high_probability,
    pip_value,
)
from .templates import (
    LARGE_BOARD,
    SMALL_BOARD,
    TEMPLATES,
    BoardTemplate,
    BoardTemplateError,
    PortSlot,
    get_template,
)

__all__ = [
    "AXIAL_DIRECTIONS",
    "HIGH_PROBABILITY_TOKENS",
    "NUMBERED_TERRAINS",
    "PIP_VALUES",
    "Board",
    "Coordinate",
    "HexTile",
    "PlayerCount",
    "Port",
    "PortType",
    "Terrain",
    "is_high_probability",
    "pip_value",
    "LARGE_BOARD",
    "SMALL_BOARD",
    "TEMPLATES",
    "BoardTemplate",
    "BoardTemplateError",
    "PortSlot",
    "get_template",
]
