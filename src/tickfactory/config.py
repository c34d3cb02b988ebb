"""Centralized configuration for the simulation."""

from dataclasses import dataclass


@dataclass
class ClockConfig:
    """Configuration for the logical clock."""

    # Print "Tick <n>" after every advance. Never changes results.
    log: bool = True


@dataclass
class TerritoryConfig:
    """Configuration for starting territories."""

    mining_cadence: int = 2  # ticks per unit of ore, per miner or by hand
    tutorial_max_miners: int = 5
    standard_max_miners: int = 20


@dataclass
class HistoryConfig:
    """Configuration for production statistics."""

    max_length: int = 300  # samples kept per machine history


@dataclass
class Config:
    """Main configuration container."""

    clock: ClockConfig
    territory: TerritoryConfig
    history: HistoryConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            clock=ClockConfig(),
            territory=TerritoryConfig(),
            history=HistoryConfig(),
        )
