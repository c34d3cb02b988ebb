import pytest

from tickfactory.simulation import (
    LAB_CATEGORY,
    Machine,
    Recipe,
    Resource,
    ResourceKind,
    SpentTokenError,
    Technology,
)

SCIENCE = ResourceKind("science")
UNLOCKED = Recipe.declare("unlocked", 1, inputs=[(1, SCIENCE)], outputs=[(1, SCIENCE)])


def make_technology(name: str = "Tech", cost: int = 4) -> Technology:
    return Technology(name, cost, 5, [(1, SCIENCE)], unlocks=lambda: UNLOCKED)


def test_point_recipe_shape():
    technology = make_technology()
    recipe = technology.point_recipe
    assert recipe.time == 5
    assert recipe.inputs == ((SCIENCE, 1),)
    assert recipe.outputs == ((technology.point_kind, 1),)
    assert recipe.category == LAB_CATEGORY


def test_point_kinds_are_unique_per_technology(supply):
    first, second = make_technology("Same"), make_technology("Same")
    assert first.point_kind is not second.point_kind
    with pytest.raises(TypeError):
        Resource(first.point_kind).add(supply(second.point_kind, 1))


def test_research_with_points_from_a_lab(clock, supply):
    technology = make_technology(cost=4)
    lab = Machine(technology.point_recipe, clock)
    lab.input(clock).add(supply(SCIENCE, 10))
    clock.advance_by(20)

    points = lab.output(clock).bundle(4)
    assert lab.input(clock).amount == 6
    assert technology.research(points) is UNLOCKED
    assert technology.is_spent
    assert points.is_spent


def test_research_rejects_points_of_another_technology(supply):
    technology, other = make_technology(), make_technology()
    with pytest.raises(TypeError):
        technology.research(supply(other.point_kind, 4))
    assert not technology.is_spent


def test_research_needs_exactly_the_cost(supply):
    technology = make_technology(cost=4)
    with pytest.raises(TypeError):
        technology.research(supply(technology.point_kind, 5))
    assert not technology.is_spent


def test_technology_can_only_be_researched_once(supply):
    technology = make_technology(cost=2)
    technology.research(supply(technology.point_kind, 2))
    with pytest.raises(SpentTokenError):
        technology.research(supply(technology.point_kind, 2))


def test_spent_points_cannot_be_reused(supply):
    technology = make_technology(cost=2)
    points = supply(technology.point_kind, 2)
    Resource(technology.point_kind).add(points)
    with pytest.raises(SpentTokenError):
        technology.research(points)
    assert not technology.is_spent


def test_invalid_cost():
    with pytest.raises(ValueError):
        make_technology(cost=0)
