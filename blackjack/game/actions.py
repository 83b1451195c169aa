"""Player decisions."""

from enum import Enum, auto


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()

    def __str__(self) -> str:
        return self.name.title()
