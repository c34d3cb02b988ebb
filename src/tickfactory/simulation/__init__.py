"""Simulation module - pure logic, no content."""

from .clock import TICK_MAX, Clock
from .errors import (
    AmountOverflowError,
    BufferLocation,
    FatalSimulationError,
    InsufficientResourceError,
    MachineNotEmptyError,
    RunOnceError,
    SimulationError,
    SpentTokenError,
    TerritoryFullError,
    TickOverflowError,
    TimeTravelError,
)
from .machine import Machine, MachineStats
from .recipe import Recipe
from .research import LAB_CATEGORY, Technology
from .resource import AMOUNT_MAX, Buffer, Bundle, Resource, ResourceKind
from .stats import ProductionHistory
from .territory import MINING_CADENCE, Miner, Territory

__all__ = [
    "AMOUNT_MAX",
    "AmountOverflowError",
    "Buffer",
    "BufferLocation",
    "Bundle",
    "Clock",
    "FatalSimulationError",
    "InsufficientResourceError",
    "LAB_CATEGORY",
    "MINING_CADENCE",
    "Machine",
    "MachineNotEmptyError",
    "MachineStats",
    "Miner",
    "ProductionHistory",
    "Recipe",
    "Resource",
    "ResourceKind",
    "RunOnceError",
    "SimulationError",
    "SpentTokenError",
    "TICK_MAX",
    "Technology",
    "TerritoryFullError",
    "TickOverflowError",
    "TimeTravelError",
]
