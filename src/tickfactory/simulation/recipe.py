"""Recipe tables - resolved descriptions of a transformation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .clock import Clock
from .errors import SpentTokenError
from .resource import Bundle, ResourceKind, _mint_bundle

Slot = tuple[ResourceKind, int]


def _resolve(pairs: Iterable[tuple[int, ResourceKind]]) -> tuple[Slot, ...]:
    return tuple((kind, amount) for amount, kind in pairs)


@dataclass(frozen=True)
class Recipe:
    """
    A transformation: per-cycle input amounts become per-cycle output amounts.

    A cycle takes `time` ticks. A time of 0 means a machine running this
    recipe is limited only by its inputs.

    `category` names the building that accepts the recipe ("furnace",
    "assembler", "lab"); `hand_craftable` recipes can also be crafted without
    a building through hand_craft().
    """

    name: str
    time: int
    inputs: tuple[Slot, ...]
    outputs: tuple[Slot, ...]
    category: str | None = None
    hand_craftable: bool = False

    def __post_init__(self) -> None:
        if self.time < 0:
            raise ValueError(f"Recipe {self.name}: time must be >= 0, got {self.time}")
        if not self.outputs:
            raise ValueError(f"Recipe {self.name}: needs at least one output")
        if self.time == 0 and not self.inputs:
            raise ValueError(f"Recipe {self.name}: a zero-time recipe needs at least one input")
        for kind, amount in self.inputs + self.outputs:
            if amount <= 0:
                raise ValueError(f"Recipe {self.name}: amount for {kind.name} must be > 0, got {amount}")
        for slots in (self.inputs, self.outputs):
            kinds = [kind for kind, _ in slots]
            if len(set(map(id, kinds))) != len(kinds):
                raise ValueError(f"Recipe {self.name}: a resource kind appears twice on one side")

    @classmethod
    def declare(
        cls,
        name: str,
        time: int,
        inputs: Iterable[tuple[int, ResourceKind]],
        outputs: Iterable[tuple[int, ResourceKind]],
        category: str | None = None,
        hand_craftable: bool = False,
    ) -> Recipe:
        """
        Build a recipe from (amount, kind) pairs.

        Example:
            Recipe.declare("iron smelting", 10, inputs=[(2, IRON_ORE)], outputs=[(1, IRON)])
        """
        return cls(name, time, _resolve(inputs), _resolve(outputs), category, hand_craftable)

    def hand_craft(self, clock: Clock, *inputs: Bundle) -> tuple[Bundle, ...]:
        """
        Craft one cycle by hand, taking the recipe's time.

        Args:
            clock: Advanced by the recipe's time
            inputs: One bundle per input slot, in order, each exactly the per-cycle amount

        Returns:
            One bundle per output slot, in order
        """
        if not self.hand_craftable:
            raise TypeError(f"Recipe {self.name} cannot be crafted by hand")
        if len(inputs) != len(self.inputs):
            raise TypeError(f"Recipe {self.name} takes {len(self.inputs)} input bundles, got {len(inputs)}")
        for bundle, (kind, amount) in zip(inputs, self.inputs):
            if bundle.is_spent:
                raise SpentTokenError(f"{bundle!r} has already been spent")
            if bundle.kind is not kind or bundle.amount != amount:
                raise TypeError(
                    f"Recipe {self.name} needs a bundle of {amount} {kind.name}, got {bundle}"
                )
        for bundle in inputs:
            bundle._spend()
        clock.advance_by(self.time)
        return tuple(_mint_bundle(kind, amount) for kind, amount in self.outputs)

    def input_amount(self, kind: ResourceKind) -> int:
        """Per-cycle amount of an input kind."""
        for slot_kind, amount in self.inputs:
            if slot_kind is kind:
                return amount
        raise KeyError(kind.name)

    def output_amount(self, kind: ResourceKind) -> int:
        """Per-cycle amount of an output kind."""
        for slot_kind, amount in self.outputs:
            if slot_kind is kind:
                return amount
        raise KeyError(kind.name)

    def __str__(self) -> str:
        ins = ", ".join(f"{amount} {kind.name}" for kind, amount in self.inputs) or "nothing"
        outs = ", ".join(f"{amount} {kind.name}" for kind, amount in self.outputs)
        return f"{self.name}: {ins} -> {outs} in {self.time} ticks"
