"""Resource kinds of the standard catalogue."""

from ..simulation.resource import ResourceKind

IRON_ORE = ResourceKind("Iron ore")
IRON = ResourceKind("Iron")
COPPER_ORE = ResourceKind("Copper ore")
COPPER = ResourceKind("Copper")
COPPER_WIRE = ResourceKind("Copper wire")
ELECTRONIC_CIRCUIT = ResourceKind("Electronic circuit")
RED_SCIENCE = ResourceKind("Red science")
STEEL = ResourceKind("Steel")
POINT = ResourceKind("Point")  # what the standard game is won with
