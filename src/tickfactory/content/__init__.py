"""Content module - the standard catalogue built on the simulation core."""

from .buildings import Assembler, Building, Furnace, Lab, build_miner
from .gamemodes import (
    STANDARD,
    TUTORIAL,
    GameMode,
    StandardStartingResources,
    TutorialStartingResources,
)
from .recipes import (
    COPPER_SMELTING,
    COPPER_WIRE_RECIPE,
    ELECTRONIC_CIRCUIT_RECIPE,
    IRON_SMELTING,
    RED_SCIENCE_RECIPE,
)
from .research import points_technology, steel_technology

__all__ = [
    "Assembler",
    "Building",
    "COPPER_SMELTING",
    "COPPER_WIRE_RECIPE",
    "ELECTRONIC_CIRCUIT_RECIPE",
    "Furnace",
    "GameMode",
    "IRON_SMELTING",
    "Lab",
    "RED_SCIENCE_RECIPE",
    "STANDARD",
    "StandardStartingResources",
    "TUTORIAL",
    "TutorialStartingResources",
    "build_miner",
    "points_technology",
    "steel_technology",
]
