"""
Recipes of the standard catalogue.

Recipes that are unlocked by research (steel smelting, points) are not
module constants; they are handed out by the technology that unlocks them.
"""

from ..simulation.recipe import Recipe
from .resources import (
    COPPER,
    COPPER_ORE,
    COPPER_WIRE,
    ELECTRONIC_CIRCUIT,
    IRON,
    IRON_ORE,
    POINT,
    RED_SCIENCE,
    STEEL,
)

FURNACE = "furnace"
ASSEMBLER = "assembler"

IRON_SMELTING = Recipe.declare(
    "Iron smelting", 10, inputs=[(2, IRON_ORE)], outputs=[(1, IRON)], category=FURNACE
)

COPPER_SMELTING = Recipe.declare(
    "Copper smelting", 10, inputs=[(2, COPPER_ORE)], outputs=[(1, COPPER)], category=FURNACE
)

COPPER_WIRE_RECIPE = Recipe.declare(
    "Copper wire",
    1,
    inputs=[(1, COPPER)],
    outputs=[(2, COPPER_WIRE)],
    category=ASSEMBLER,
    hand_craftable=True,
)

ELECTRONIC_CIRCUIT_RECIPE = Recipe.declare(
    "Electronic circuit",
    5,
    inputs=[(1, IRON), (3, COPPER_WIRE)],
    outputs=[(1, ELECTRONIC_CIRCUIT)],
    category=ASSEMBLER,
    hand_craftable=True,
)

RED_SCIENCE_RECIPE = Recipe.declare(
    "Red science",
    5,
    inputs=[(1, IRON), (1, ELECTRONIC_CIRCUIT)],
    outputs=[(1, RED_SCIENCE)],
    category=ASSEMBLER,
)


def steel_smelting() -> Recipe:
    """Five iron into one steel."""
    return Recipe.declare(
        "Steel smelting", 20, inputs=[(5, IRON)], outputs=[(1, STEEL)], category=FURNACE
    )


def point_recipe() -> Recipe:
    """The recipe you need to win: circuits and steel into points."""
    return Recipe.declare(
        "Point",
        10,
        inputs=[(1, ELECTRONIC_CIRCUIT), (1, STEEL)],
        outputs=[(1, POINT)],
        category=ASSEMBLER,
    )
