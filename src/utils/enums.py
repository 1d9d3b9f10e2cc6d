from enum import Enum, auto


class EntityType(Enum):
    """
    Enumeration of all entity types.
    """

    PLAYER = auto()
    PROJECTILE = auto()
    PARTICLE = auto()


class Action(Enum):
    """
    Logical actions the keyboard can trigger.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPECIAL = auto()
