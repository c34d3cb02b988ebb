"""Discrete-time resource chain simulation driven by an explicit logical clock."""

from .config import ClockConfig, Config, HistoryConfig, TerritoryConfig
from .harness import Harness, play
from .simulation import (
    Bundle,
    Clock,
    Machine,
    Miner,
    Recipe,
    Resource,
    ResourceKind,
    Technology,
    Territory,
)

__all__ = [
    "Bundle",
    "Clock",
    "ClockConfig",
    "Config",
    "Harness",
    "HistoryConfig",
    "Machine",
    "Miner",
    "Recipe",
    "Resource",
    "ResourceKind",
    "Technology",
    "TerritoryConfig",
    "Territory",
    "play",
]
