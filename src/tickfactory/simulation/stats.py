"""Production statistics - samples machine output over time."""

from __future__ import annotations

from collections import deque

import numpy as np

from ..config import HistoryConfig
from .clock import Clock
from .machine import Machine


class ProductionHistory:
    """Tracks a machine's completed cycles over time for throughput estimates."""

    def __init__(self, max_length: int = HistoryConfig.max_length):
        """
        Initialize production history.

        Args:
            max_length: Maximum number of samples to keep
        """
        self.max_length = max_length
        self.ticks: deque[int] = deque(maxlen=max_length)
        self.cycles: deque[int] = deque(maxlen=max_length)

    @classmethod
    def from_config(cls, config: HistoryConfig) -> ProductionHistory:
        """Create a history sized by the given configuration."""
        return cls(max_length=config.max_length)

    def record(self, clock: Clock, machine: Machine) -> None:
        """Sync the machine and record its cycle total at the current tick."""
        machine.sync(clock)
        if self.ticks and self.ticks[-1] == clock.tick:
            self.cycles[-1] = machine.stats.cycles_completed
            return
        self.ticks.append(clock.tick)
        self.cycles.append(machine.stats.cycles_completed)

    def __len__(self) -> int:
        return len(self.ticks)

    def cycles_per_tick(self) -> float:
        """
        Average cycles completed per tick over the recorded window.

        Returns 0.0 until at least two samples at different ticks exist.
        """
        if len(self.ticks) < 2:
            return 0.0
        ticks = np.asarray(self.ticks, dtype=np.float64)
        cycles = np.asarray(self.cycles, dtype=np.float64)
        span = ticks[-1] - ticks[0]
        return float((cycles[-1] - cycles[0]) / span)

    def recent_rates(self) -> np.ndarray:
        """Cycles per tick between consecutive samples."""
        if len(self.ticks) < 2:
            return np.zeros(0)
        return np.diff(np.asarray(self.cycles, dtype=np.float64)) / np.diff(
            np.asarray(self.ticks, dtype=np.float64)
        )

    def utilization(self, recipe_time: int) -> float:
        """Fraction of the window the machine spent completing cycles."""
        if recipe_time <= 0:
            return 0.0
        return float(np.clip(self.cycles_per_tick() * recipe_time, 0.0, 1.0))
