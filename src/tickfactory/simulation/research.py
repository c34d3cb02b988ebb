"""Technologies - unlocks gated behind research points."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from .errors import SpentTokenError
from .recipe import Recipe
from .resource import Bundle, ResourceKind, Token

LAB_CATEGORY = "lab"


class Technology(Token):
    """
    A technology that is researched by spending research points.

    Each technology has its own point kind, so points produced for one
    technology can never be spent on another, even when two technologies
    cost the same. Points are produced by a lab running `point_recipe`.
    """

    def __init__(
        self,
        name: str,
        point_cost: int,
        point_time: int,
        point_inputs: Iterable[tuple[int, ResourceKind]],
        unlocks: Callable[[], Any],
    ):
        """
        Args:
            name: Display name
            point_cost: Research points needed to complete the research
            point_time: Ticks a lab takes to produce one point
            point_inputs: (amount, kind) pairs consumed per point
            unlocks: Called once on completion, returns what the research unlocks
        """
        if point_cost <= 0:
            raise ValueError(f"Technology {name}: point cost must be > 0, got {point_cost}")
        self._spent = False
        self.name = name
        self.point_cost = point_cost
        self.point_kind = ResourceKind(f"{name} research point")
        self.point_recipe = Recipe.declare(
            f"{name} research",
            point_time,
            inputs=point_inputs,
            outputs=[(1, self.point_kind)],
            category=LAB_CATEGORY,
        )
        self._unlocks = unlocks

    def research(self, points: Bundle) -> Any:
        """
        Complete the research, spending the technology and the points.

        The bundle must hold exactly point_cost points of this technology's
        point kind. There is no sufficiency check beyond that: a bundle of the
        right size cannot exist without the points having been produced.

        Returns:
            Whatever the technology unlocks (recipes and/or technologies)
        """
        if points.kind is not self.point_kind:
            raise TypeError(f"{self.name} cannot be researched with {points.kind.name}")
        if points.amount != self.point_cost:
            raise TypeError(
                f"{self.name} needs a bundle of exactly {self.point_cost} points, got {points.amount}"
            )
        if points.is_spent:
            raise SpentTokenError(f"{points!r} has already been spent")
        self._spend()
        points._spend()
        return self._unlocks()

    def __repr__(self) -> str:
        return f"Technology({self.name!r}, point_cost={self.point_cost})"
