"""Structure categories of the simulated environment.

Usage:
    StructureType.SPAWN                          # "spawn"
    concrete_type_name(StructureType.SPAWN)      # "StructureSpawn"
    concrete_type_name("constructedWall")        # "StructureWall"
"""

from enum import StrEnum


class StructureType(StrEnum):
    """Structure type constants, valued as the environment spells them."""

    EXTENSION = "extension"
    RAMPART = "rampart"
    ROAD = "road"
    SPAWN = "spawn"
    LINK = "link"
    WALL = "constructedWall"
    STORAGE = "storage"
    TOWER = "tower"
    OBSERVER = "observer"
    POWER_SPAWN = "powerSpawn"
    EXTRACTOR = "extractor"
    LAB = "lab"
    TERMINAL = "terminal"
    CONTAINER = "container"
    NUKER = "nuker"
    FACTORY = "factory"
    KEEPER_LAIR = "keeperLair"
    CONTROLLER = "controller"
    POWER_BANK = "powerBank"
    PORTAL = "portal"
    INVADER_CORE = "invaderCore"


CONCRETE_STRUCTURE: dict[str, str] = {
    StructureType.EXTENSION: "StructureExtension",
    StructureType.RAMPART: "StructureRampart",
    StructureType.ROAD: "StructureRoad",
    StructureType.SPAWN: "StructureSpawn",
    StructureType.LINK: "StructureLink",
    StructureType.WALL: "StructureWall",
    StructureType.STORAGE: "StructureStorage",
    StructureType.TOWER: "StructureTower",
    StructureType.OBSERVER: "StructureObserver",
    StructureType.POWER_SPAWN: "StructurePowerSpawn",
    StructureType.EXTRACTOR: "StructureExtractor",
    StructureType.LAB: "StructureLab",
    StructureType.TERMINAL: "StructureTerminal",
    StructureType.CONTAINER: "StructureContainer",
    StructureType.NUKER: "StructureNuker",
    StructureType.FACTORY: "StructureFactory",
    StructureType.KEEPER_LAIR: "StructureKeeperLair",
    StructureType.CONTROLLER: "StructureController",
    StructureType.POWER_BANK: "StructurePowerBank",
    StructureType.PORTAL: "StructurePortal",
    StructureType.INVADER_CORE: "StructureInvaderCore",
}


def concrete_type_name(structure_type: str) -> str:
    """Get the concrete class name for a structure type.

    Args:
        structure_type: StructureType member or its string value.

    Returns:
        Concrete class name, or "Structure" for unknown categories.
    """
    return CONCRETE_STRUCTURE.get(structure_type, "Structure")
