"""
Game modes define the starting resources and the victory condition of a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..config import Config
from ..simulation.clock import Clock
from ..simulation.research import Technology
from ..simulation.resource import Bundle, ResourceKind, _mint_bundle
from ..simulation.territory import Territory, _open_territory
from .research import steel_technology
from .resources import COPPER, COPPER_ORE, IRON, IRON_ORE, POINT

STARTING_IRON = 10


@dataclass
class TutorialStartingResources:
    """Starting resources for the tutorial."""

    iron: Bundle
    iron_territory: Territory
    copper_territory: Territory


@dataclass
class StandardStartingResources:
    """Starting resources for the standard game."""

    iron: Bundle
    iron_territory: Territory
    copper_territory: Territory
    steel_technology: Technology


@dataclass(frozen=True)
class GameMode:
    """A set of starting resources and the bundle that wins the game."""

    name: str
    victory_kind: ResourceKind
    victory_amount: int
    setup: Callable[[Clock, Config], Any]

    def starting_resources(self, clock: Clock, config: Config) -> Any:
        """Create the starting resources. Called once, before play begins."""
        return self.setup(clock, config)

    def is_victory(self, bundle: object) -> bool:
        """Whether bundle is an unspent bundle of exactly the victory resources."""
        return (
            isinstance(bundle, Bundle)
            and not bundle.is_spent
            and bundle.kind is self.victory_kind
            and bundle.amount == self.victory_amount
        )


def _tutorial_setup(clock: Clock, config: Config) -> TutorialStartingResources:
    cadence = config.territory.mining_cadence
    slots = config.territory.tutorial_max_miners
    return TutorialStartingResources(
        iron=_mint_bundle(IRON, STARTING_IRON),
        iron_territory=_open_territory(IRON_ORE, clock, slots, cadence),
        copper_territory=_open_territory(COPPER_ORE, clock, slots, cadence),
    )


def _standard_setup(clock: Clock, config: Config) -> StandardStartingResources:
    cadence = config.territory.mining_cadence
    slots = config.territory.standard_max_miners
    return StandardStartingResources(
        iron=_mint_bundle(IRON, STARTING_IRON),
        iron_territory=_open_territory(IRON_ORE, clock, slots, cadence),
        copper_territory=_open_territory(COPPER_ORE, clock, slots, cadence),
        steel_technology=steel_technology(),
    )


# Very short distance from start to victory, teaches the basics.
TUTORIAL = GameMode("Tutorial", COPPER, 4, _tutorial_setup)

# Goes through the main mechanics: smelting, assembling, research.
STANDARD = GameMode("Standard", POINT, 200, _standard_setup)
