"""Machine engine - runs a recipe against input and output buffers."""

from __future__ import annotations

from dataclasses import dataclass

from .clock import TICK_MAX, Clock
from .errors import (
    BufferLocation,
    MachineNotEmptyError,
    SpentTokenError,
    TickOverflowError,
    TimeTravelError,
)
from .recipe import Recipe
from .resource import Buffer, ResourceKind, Token


@dataclass
class MachineStats:
    """Running totals for one machine."""

    cycles_completed: int = 0
    forfeitures: int = 0
    ticks_forfeited: int = 0


class Machine(Token):
    """
    Executes a recipe lazily.

    A machine does no work in the background. Whenever any of its buffers is
    accessed it works out how many cycles fit into the ticks elapsed since the
    last access and applies them all at once:

    1. Elapsed ticks are added to the carried time.
    2. Cycles = min(carried // time, each input // its per-cycle amount).
    3. Inputs lose cycles * per-cycle amount, outputs gain the same.
    4. Carried time loses cycles * time.
    5. If any input is now below its per-cycle amount, carried time is
       forfeited: a machine that runs dry loses its in-progress cycle.

    This makes a jump of any number of ticks cost the same as a jump of one.
    """

    def __init__(self, recipe: Recipe, clock: Clock | int):
        """
        Build a machine at the clock's current tick.

        Args:
            recipe: The recipe to run
            clock: The clock (or a tick number) the machine is built at
        """
        self._spent = False
        self.recipe = recipe
        self._inputs = tuple(Buffer(kind, self) for kind, _ in recipe.inputs)
        self._outputs = tuple(Buffer(kind, self) for kind, _ in recipe.outputs)
        self._tick = int(clock)
        self._carried = 0
        self.stats = MachineStats()

    @property
    def last_tick(self) -> int:
        """The tick the machine was last synced at."""
        return self._tick

    def sync(self, clock: Clock) -> None:
        """Bring the machine up to the clock's current tick."""
        if self._spent:
            raise SpentTokenError(f"Machine running {self.recipe.name} was replaced by a recipe change")
        tick = int(clock)
        if tick < self._tick:
            raise TimeTravelError(
                f"Machine last synced at tick {self._tick}, asked to sync at tick {tick}"
            )
        for buffer in self._inputs + self._outputs:
            buffer._bind(clock)

        carried = self._carried + (tick - self._tick)
        if carried > TICK_MAX:
            raise TickOverflowError(f"Crafting time overflow: {carried}")

        limits = [
            buffer._amount // amount
            for buffer, (_, amount) in zip(self._inputs, self.recipe.inputs)
        ]
        if self.recipe.time > 0:
            limits.append(carried // self.recipe.time)
        cycles = min(limits)

        if cycles:
            for buffer, (_, amount) in zip(self._inputs, self.recipe.inputs):
                buffer._withdraw(cycles * amount)
            for buffer, (_, amount) in zip(self._outputs, self.recipe.outputs):
                buffer._deposit(cycles * amount)
            carried -= cycles * self.recipe.time
            self.stats.cycles_completed += cycles

        if carried and any(
            buffer._amount < amount
            for buffer, (_, amount) in zip(self._inputs, self.recipe.inputs)
        ):
            self.stats.forfeitures += 1
            self.stats.ticks_forfeited += carried
            carried = 0

        self._carried = carried
        self._tick = tick

    def inputs(self, clock: Clock) -> tuple[Buffer, ...]:
        """Sync and return the input buffers, in recipe order."""
        self.sync(clock)
        return self._inputs

    def outputs(self, clock: Clock) -> tuple[Buffer, ...]:
        """Sync and return the output buffers, in recipe order."""
        self.sync(clock)
        return self._outputs

    def input(self, clock: Clock, slot: int | ResourceKind = 0) -> Buffer:
        """Sync and return one input buffer, by position or by kind."""
        return _pick(self.inputs(clock), slot)

    def output(self, clock: Clock, slot: int | ResourceKind = 0) -> Buffer:
        """Sync and return one output buffer, by position or by kind."""
        return _pick(self.outputs(clock), slot)

    def banked_ticks(self, clock: Clock) -> int:
        """Sync and return the progress carried toward the next cycle."""
        self.sync(clock)
        return self._carried

    def change_recipe(self, clock: Clock, recipe: Recipe) -> Machine:
        """
        Replace the recipe, returning a fresh machine at the clock's tick.

        The machine is synced first, so the check sees the buffers as they are
        now. Only allowed while every buffer is empty. This machine is spent on
        success and must not be used again.

        Raises:
            MachineNotEmptyError: Carrying this (unchanged) machine and the first
                nonempty buffer, inputs checked before outputs
        """
        self.sync(clock)
        for location, buffers in (
            (BufferLocation.INPUT, self._inputs),
            (BufferLocation.OUTPUT, self._outputs),
        ):
            for buffer in buffers:
                if buffer._amount > 0:
                    raise MachineNotEmptyError(self, location, buffer.kind.name, buffer._amount)
        self._spend()
        return Machine(recipe, self._tick)

    def __repr__(self) -> str:
        return f"Machine({self.recipe.name!r}, last_tick={self._tick})"


def _pick(buffers: tuple[Buffer, ...], slot: int | ResourceKind) -> Buffer:
    if isinstance(slot, ResourceKind):
        for buffer in buffers:
            if buffer.kind is slot:
                return buffer
        raise KeyError(slot.name)
    return buffers[slot]
