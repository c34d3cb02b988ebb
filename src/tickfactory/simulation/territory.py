"""Territories - passive ore generators worked by miners."""

from __future__ import annotations

from .clock import Clock
from .errors import SpentTokenError, TerritoryFullError, TimeTravelError
from .resource import _MINT, Buffer, Bundle, ResourceKind, Token, _mint_bundle

# Ticks it takes one miner, or one pair of hands, to produce one unit of ore.
MINING_CADENCE = 2


class Miner(Token):
    """
    A uniform miner. Spent when placed in a territory.

    Miners are built from resources (see `build_miner`) or taken back out of
    a territory; they cannot be created directly.
    """

    def __init__(self, _key: object = None) -> None:
        if _key is not _MINT:
            raise TypeError("Miners cannot be created directly; build one from iron and copper")
        self._spent = False

    def __repr__(self) -> str:
        return "Miner(placed)" if self._spent else "Miner()"


class Territory:
    """
    An area holding up to max_miners miners that mine one kind of ore.

    Like machines, territories sync lazily on access. Time is counted in
    mining steps of `cadence` ticks: every miner present adds one ore per
    step crossed since the last sync. There is no partial progress to lose.
    """

    def __init__(
        self,
        ore: ResourceKind,
        clock: Clock | int,
        max_miners: int,
        cadence: int = MINING_CADENCE,
        _key: object = None,
    ):
        """
        Create an empty territory. Territories are handed out by game modes.

        Args:
            ore: The kind of ore mined here
            clock: The clock (or tick number) the territory is created at
            max_miners: Number of miner slots
            cadence: Ticks per mined unit
        """
        if _key is not _MINT:
            raise TypeError("Territories cannot be created directly; they come with the game mode")
        if cadence <= 0:
            raise ValueError(f"Mining cadence must be > 0, got {cadence}")
        if max_miners < 0:
            raise ValueError(f"max_miners must be >= 0, got {max_miners}")
        self.ore = ore
        self.cadence = cadence
        self._max_miners = max_miners
        self._miners = 0
        self._tick = int(clock)
        self._mining_step = self._tick // cadence
        self._resources = Buffer(ore, self)

    @property
    def max_miners(self) -> int:
        """Number of miner slots."""
        return self._max_miners

    @property
    def miners(self) -> int:
        """Number of miners currently working the territory."""
        return self._miners

    def sync(self, clock: Clock) -> None:
        """Credit ore for every mining step crossed since the last sync."""
        tick = int(clock)
        if tick < self._tick:
            raise TimeTravelError(f"Territory last synced at tick {self._tick}, asked to sync at tick {tick}")
        mining_step = tick // self.cadence
        self._resources._bind(clock)
        self._resources._deposit((mining_step - self._mining_step) * self._miners)
        self._mining_step = mining_step
        self._tick = tick

    def resources(self, clock: Clock) -> Buffer:
        """Sync and return the ore mined so far."""
        self.sync(clock)
        return self._resources

    def add_miner(self, clock: Clock, miner: Miner) -> None:
        """
        Put a miner to work.

        Raises:
            TerritoryFullError: If every slot is taken; carries the miner back
        """
        self.sync(clock)
        if miner.is_spent:
            raise SpentTokenError(f"{miner!r} is already working a territory")
        if self._miners >= self._max_miners:
            raise TerritoryFullError(self._max_miners, miner)
        miner._spend()
        self._miners += 1

    def take_miner(self, clock: Clock) -> Miner | None:
        """Remove a miner, or return None if there are none."""
        self.sync(clock)
        if self._miners == 0:
            return None
        self._miners -= 1
        return _mint_miner()

    def hand_mine(self, clock: Clock, amount: int) -> Bundle:
        """
        Mine by hand, advancing the clock by `cadence` ticks per unit.

        This is the way to get ore before any miner exists.
        """
        if amount < 0:
            raise ValueError(f"Cannot hand-mine a negative amount: {amount}")
        mined = _mint_bundle(self.ore, amount)
        self.sync(clock)
        clock.advance_by(amount * self.cadence)
        return mined

    def __repr__(self) -> str:
        return (
            f"Territory({self.ore.name!r}, miners={self._miners}/{self._max_miners}, "
            f"cadence={self.cadence})"
        )


def _mint_miner() -> Miner:
    return Miner(_MINT)


def _open_territory(
    ore: ResourceKind, clock: Clock | int, max_miners: int, cadence: int = MINING_CADENCE
) -> Territory:
    return Territory(ore, clock, max_miners, cadence, _MINT)
