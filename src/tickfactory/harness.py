"""Entry point that runs a player's strategy against a game mode."""

from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn

from .config import Config
from .content.gamemodes import GameMode
from .simulation.clock import Clock
from .simulation.errors import RunOnceError

Strategy = Callable[[Clock, Any], tuple[Clock, Any]]


class Harness:
    """
    Owns the one clock of a run.

    A harness runs exactly once. A second clock advancing in parallel (for
    example from another thread) could finish in fewer observed ticks than an
    honest single run, so the guard is part of the rules, not an optimisation.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def run(self, mode: GameMode, main: Strategy) -> int:
        """
        Run main(clock, starting_resources) and check what it returns.

        Args:
            mode: The game mode to play
            main: The strategy; must return (clock, victory bundle)

        Returns:
            The number of ticks it took to win

        Raises:
            RunOnceError: If this harness already ran, or main returned another clock
            TypeError: If main did not return exactly the victory bundle
        """
        if self._started:
            raise RunOnceError(
                "A run can only be started once per harness, to prevent cheating via multithreading."
            )
        self._started = True

        clock = Clock(log=self.config.clock.log)
        starting_resources = mode.starting_resources(clock, self.config)

        returned_clock, victory = main(clock, starting_resources)
        if returned_clock is not clock:
            raise RunOnceError("The strategy must return the clock it was given")
        if not mode.is_victory(victory):
            raise TypeError(
                f"{mode.name} is won with a bundle of {mode.victory_amount} "
                f"{mode.victory_kind.name}, got {victory!r}"
            )
        victory._spend()

        print(f"You won in {clock.tick} ticks!")
        return clock.tick


_process_harness = Harness()


def play(mode: GameMode, main: Strategy) -> NoReturn:
    """
    Run a strategy through the process-wide harness and exit.

    Can only be called once per process. Any invariant violation propagates
    as an exception and ends the process abnormally.
    """
    _process_harness.run(mode, main)
    sys.exit(0)
