import pytest

from tickfactory.content import (
    COPPER_SMELTING,
    COPPER_WIRE_RECIPE,
    ELECTRONIC_CIRCUIT_RECIPE,
    IRON_SMELTING,
    RED_SCIENCE_RECIPE,
    Assembler,
    Furnace,
    Lab,
    build_miner,
    steel_technology,
)
from tickfactory.content.resources import (
    COPPER,
    COPPER_ORE,
    COPPER_WIRE,
    ELECTRONIC_CIRCUIT,
    IRON,
    IRON_ORE,
    RED_SCIENCE,
    STEEL,
)
from tickfactory.simulation import BufferLocation, MachineNotEmptyError, Miner, SpentTokenError


def test_furnace_smelts(clock, supply):
    furnace = Furnace.build(clock, IRON_SMELTING, supply(IRON, 10))
    furnace.input(clock).add(supply(IRON_ORE, 6))
    clock.advance_by(30)
    assert furnace.output(clock).amount == 3
    assert furnace.recipe is IRON_SMELTING


def test_build_cost_must_match_exactly(clock, supply):
    iron = supply(IRON, 9)
    with pytest.raises(TypeError):
        Furnace.build(clock, IRON_SMELTING, iron)
    assert not iron.is_spent


def test_build_cost_is_spent(clock, supply):
    iron = supply(IRON, 10)
    Furnace.build(clock, IRON_SMELTING, iron)
    with pytest.raises(SpentTokenError):
        Furnace.build(clock, IRON_SMELTING, iron)


def test_building_refuses_other_categories(clock, supply):
    with pytest.raises(TypeError):
        Furnace.build(clock, COPPER_WIRE_RECIPE, supply(IRON, 10))
    furnace = Furnace.build(clock, IRON_SMELTING, supply(IRON, 10))
    with pytest.raises(TypeError):
        furnace.change_recipe(clock, RED_SCIENCE_RECIPE)


def test_failed_cost_spends_nothing(clock, supply):
    wire, iron = supply(COPPER_WIRE, 12), supply(IRON, 5)
    with pytest.raises(TypeError):
        Assembler.build(clock, COPPER_WIRE_RECIPE, wire, iron)
    assert not wire.is_spent
    assert not iron.is_spent


def test_change_recipe_keeps_the_building_on_failure(clock, supply):
    furnace = Furnace.build(clock, IRON_SMELTING, supply(IRON, 10))
    furnace.input(clock).add(supply(IRON_ORE, 3))
    with pytest.raises(MachineNotEmptyError) as excinfo:
        furnace.change_recipe(clock, COPPER_SMELTING)
    assert excinfo.value.machine is furnace
    assert excinfo.value.location is BufferLocation.INPUT

    furnace.input(clock).take_all()
    copper_furnace = furnace.change_recipe(clock, COPPER_SMELTING)
    assert isinstance(copper_furnace, Furnace)
    assert copper_furnace.recipe is COPPER_SMELTING
    copper_furnace.input(clock).add(supply(COPPER_ORE, 2))
    clock.advance_by(10)
    assert copper_furnace.output(clock).amount == 1


def test_assembler_chain(clock, supply):
    wire_assembler = Assembler.build(
        clock, COPPER_WIRE_RECIPE, supply(COPPER_WIRE, 12), supply(IRON, 6)
    )
    circuit_assembler = Assembler.build(
        clock, ELECTRONIC_CIRCUIT_RECIPE, supply(COPPER_WIRE, 12), supply(IRON, 6)
    )
    wire_assembler.input(clock).add(supply(COPPER, 3))
    clock.advance_by(3)
    assert wire_assembler.output(clock).amount == 6

    iron_in, wire_in = circuit_assembler.inputs(clock)
    iron_in.add(supply(IRON, 2))
    wire_in.add(wire_assembler.output(clock))
    clock.advance_by(10)
    assert circuit_assembler.output(clock, ELECTRONIC_CIRCUIT).amount == 2
    assert wire_assembler.output(clock).amount == 0


def test_lab_researches_steel(clock, supply):
    steel = steel_technology()
    lab = Lab.build(clock, steel, supply(IRON, 20), supply(COPPER, 15))
    lab.input(clock).add(supply(RED_SCIENCE, steel.point_cost))
    clock.advance_by(steel.point_cost * steel.point_recipe.time)

    steel_smelting, points = steel.research(lab.output(clock).bundle(steel.point_cost))
    assert steel_smelting.outputs == ((STEEL, 1),)

    points_lab = lab.change_technology(clock, points)
    assert points_lab.recipe is points.point_recipe
    points_lab.input(clock).add(supply(RED_SCIENCE, points.point_cost))
    clock.advance_by(points.point_cost * points.point_recipe.time)
    point_recipe = points.research(points_lab.output(clock).bundle(points.point_cost))
    assert point_recipe.category == "assembler"

    steel_furnace = Furnace.build(clock, steel_smelting, supply(IRON, 10))
    steel_furnace.input(clock).add(supply(IRON, 10))
    clock.advance_by(40)
    assert steel_furnace.output(clock).amount == 2


def test_lab_cannot_switch_while_holding_points(clock, supply):
    steel = steel_technology()
    lab = Lab.build(clock, steel, supply(IRON, 20), supply(COPPER, 15))
    lab.input(clock).add(supply(RED_SCIENCE, 1))
    clock.advance_by(5)
    with pytest.raises(MachineNotEmptyError) as excinfo:
        lab.change_technology(clock, steel_technology())
    assert excinfo.value.machine is lab
    assert excinfo.value.location is BufferLocation.OUTPUT
    assert excinfo.value.resource_name == "Steel research point"


def test_build_miner(supply):
    miner = build_miner(supply(IRON, 10), supply(COPPER, 5))
    assert isinstance(miner, Miner)
    with pytest.raises(TypeError):
        build_miner(supply(IRON, 10), supply(IRON, 5))


def test_hand_craft(clock, supply):
    copper = supply(COPPER, 1)
    (wire,) = COPPER_WIRE_RECIPE.hand_craft(clock, copper)
    assert wire.kind is COPPER_WIRE
    assert wire.amount == 2
    assert copper.is_spent
    assert clock.tick == COPPER_WIRE_RECIPE.time


def test_hand_craft_checks_inputs(clock, supply):
    iron = supply(IRON, 1)
    with pytest.raises(TypeError):
        ELECTRONIC_CIRCUIT_RECIPE.hand_craft(clock, iron, supply(COPPER_WIRE, 2))
    assert not iron.is_spent
    with pytest.raises(TypeError):
        IRON_SMELTING.hand_craft(clock, supply(IRON_ORE, 2))
    assert clock.tick == 0
