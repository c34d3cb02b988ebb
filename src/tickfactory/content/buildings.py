"""
Buildings take inputs to produce outputs over time.

To use a building, build it by paying its cost in bundles. Add inputs
through `inputs(clock)`, collect outputs through `outputs(clock)`. A building
runs one recipe of its category; `change_recipe` swaps it, but only while the
building is empty.
"""

from __future__ import annotations

from ..simulation.clock import Clock
from ..simulation.errors import MachineNotEmptyError, SpentTokenError
from ..simulation.machine import Machine
from ..simulation.recipe import Recipe
from ..simulation.research import LAB_CATEGORY, Technology
from ..simulation.resource import Buffer, Bundle, ResourceKind
from ..simulation.territory import Miner, _mint_miner
from .recipes import ASSEMBLER, FURNACE
from .resources import COPPER, COPPER_WIRE, IRON

FURNACE_IRON_COST = 10
ASSEMBLER_COPPER_WIRE_COST = 12
ASSEMBLER_IRON_COST = 6
LAB_IRON_COST = 20
LAB_COPPER_COST = 15
MINER_IRON_COST = 10
MINER_COPPER_COST = 5


def pay(*costs: tuple[Bundle, ResourceKind, int]) -> None:
    """
    Spend bundles as a construction cost.

    Each cost is (bundle, kind, amount) and the bundle must hold exactly that
    amount of that kind. Nothing is spent unless every bundle matches.
    """
    for bundle, kind, amount in costs:
        if bundle.kind is not kind or bundle.amount != amount:
            raise TypeError(f"Expected a bundle of {amount} {kind.name}, got {bundle}")
        if bundle.is_spent:
            raise SpentTokenError(f"{bundle!r} has already been spent")
    for bundle, _, _ in costs:
        bundle._spend()


def build_miner(iron: Bundle, copper: Bundle) -> Miner:
    """Build a miner. Costs 10 iron and 5 copper."""
    pay((iron, IRON, MINER_IRON_COST), (copper, COPPER, MINER_COPPER_COST))
    return _mint_miner()


class Building:
    """A machine restricted to recipes of one category."""

    category: str = ""

    def __init__(self, machine: Machine):
        self._check_recipe(machine.recipe)
        self.machine = machine

    @classmethod
    def _check_recipe(cls, recipe: Recipe) -> None:
        if recipe.category != cls.category:
            raise TypeError(f"{cls.__name__} cannot run {recipe.name} ({recipe.category} recipe)")

    @property
    def recipe(self) -> Recipe:
        return self.machine.recipe

    def inputs(self, clock: Clock) -> tuple[Buffer, ...]:
        """Update internal state and access input buffers."""
        return self.machine.inputs(clock)

    def outputs(self, clock: Clock) -> tuple[Buffer, ...]:
        """Update internal state and access output buffers."""
        return self.machine.outputs(clock)

    def input(self, clock: Clock, slot: int | ResourceKind = 0) -> Buffer:
        return self.machine.input(clock, slot)

    def output(self, clock: Clock, slot: int | ResourceKind = 0) -> Buffer:
        return self.machine.output(clock, slot)

    def change_recipe(self, clock: Clock, recipe: Recipe):
        """
        Switch to another recipe of the same category.

        Raises:
            MachineNotEmptyError: With `machine` set to this (unchanged) building
        """
        self._check_recipe(recipe)
        try:
            machine = self.machine.change_recipe(clock, recipe)
        except MachineNotEmptyError as error:
            raise error.map_machine(lambda _: self) from None
        return type(self)(machine)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.recipe.name!r})"


class Furnace(Building):
    """Smelts ores into base resources."""

    category = FURNACE

    @classmethod
    def build(cls, clock: Clock, recipe: Recipe, iron: Bundle) -> Furnace:
        """Build a furnace. Costs 10 iron."""
        cls._check_recipe(recipe)
        pay((iron, IRON, FURNACE_IRON_COST))
        return cls(Machine(recipe, clock))


class Assembler(Building):
    """Combines intermediate products into more advanced ones."""

    category = ASSEMBLER

    @classmethod
    def build(cls, clock: Clock, recipe: Recipe, copper_wire: Bundle, iron: Bundle) -> Assembler:
        """Build an assembler. Costs 12 copper wire and 6 iron."""
        cls._check_recipe(recipe)
        pay((copper_wire, COPPER_WIRE, ASSEMBLER_COPPER_WIRE_COST), (iron, IRON, ASSEMBLER_IRON_COST))
        return cls(Machine(recipe, clock))


class Lab(Building):
    """Produces research points for one technology at a time."""

    category = LAB_CATEGORY

    @classmethod
    def build(cls, clock: Clock, technology: Technology, iron: Bundle, copper: Bundle) -> Lab:
        """Build a lab researching the given technology. Costs 20 iron and 15 copper."""
        pay((iron, IRON, LAB_IRON_COST), (copper, COPPER, LAB_COPPER_COST))
        return cls(Machine(technology.point_recipe, clock))

    def change_technology(self, clock: Clock, technology: Technology) -> Lab:
        """Switch to producing points for another technology. The lab must be empty."""
        return self.change_recipe(clock, technology.point_recipe)
