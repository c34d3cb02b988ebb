"""Errors raised by the simulation core.

Recoverable errors derive from SimulationError and carry enough data for the
caller to retry or report. Fatal errors derive from FatalSimulationError and
are never caught inside the library: they mean an invariant was broken or an
exploit was attempted, and should end the run.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .resource import ResourceKind
    from .territory import Miner


class BufferLocation(Enum):
    """Location of a resource buffer in a machine."""

    INPUT = "input"
    OUTPUT = "output"


class SimulationError(Exception):
    """Base class for recoverable simulation errors."""


class InsufficientResourceError(SimulationError):
    """A checked extraction asked for more than was available."""

    def __init__(self, kind: ResourceKind, requested: int, available: int):
        self.kind = kind
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient {kind.name}: requested {requested}, but only {available} available"
        )


class MachineNotEmptyError(SimulationError):
    """
    A recipe change was attempted on a machine with nonempty buffers.

    Carries the unchanged machine so the caller can keep using it.
    """

    def __init__(self, machine: Any, location: BufferLocation, resource_name: str, amount: int):
        self.machine = machine
        self.location = location
        self.resource_name = resource_name
        self.amount = amount
        super().__init__(
            f"Machine is not empty: machine has {amount} of resource {resource_name} "
            f"in its {location.value} buffer"
        )

    def map_machine(self, wrap) -> MachineNotEmptyError:
        """Return a copy of this error with the machine replaced by wrap(machine)."""
        return MachineNotEmptyError(wrap(self.machine), self.location, self.resource_name, self.amount)


class TerritoryFullError(SimulationError):
    """A miner was added to a territory with no free slots."""

    def __init__(self, max_miners: int, miner: Miner):
        self.max_miners = max_miners
        self.miner = miner
        super().__init__(f"Territory is full: maximum number of miners is {max_miners}")


class FatalSimulationError(Exception):
    """Base class for invariant breaches. Not meant to be handled."""


class TickOverflowError(FatalSimulationError):
    """The clock or a crafting-time counter overflowed."""


class AmountOverflowError(FatalSimulationError):
    """A resource amount overflowed."""


class TimeTravelError(FatalSimulationError):
    """An entity was synced against a tick earlier than one it already observed."""


class RunOnceError(FatalSimulationError):
    """The simulation was started a second time in the same process."""


class SpentTokenError(FatalSimulationError):
    """A bundle, miner or technology was used after being spent."""
