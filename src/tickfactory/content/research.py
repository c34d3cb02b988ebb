"""Technologies of the standard catalogue."""

from __future__ import annotations

from ..simulation.recipe import Recipe
from ..simulation.research import Technology
from .recipes import point_recipe, steel_smelting
from .resources import RED_SCIENCE

# Every technology turns one red science into one of its points every 5 ticks.
POINT_TIME = 5
POINT_INPUTS = ((1, RED_SCIENCE),)

STEEL_POINT_COST = 20
POINTS_POINT_COST = 50


def points_technology() -> Technology:
    """Unlocks the point recipe."""
    return Technology("Points", POINTS_POINT_COST, POINT_TIME, POINT_INPUTS, unlocks=point_recipe)


def _unlock_steel() -> tuple[Recipe, Technology]:
    return steel_smelting(), points_technology()


def steel_technology() -> Technology:
    """Unlocks steel smelting and the points technology."""
    return Technology("Steel", STEEL_POINT_COST, POINT_TIME, POINT_INPUTS, unlocks=_unlock_steel)
