"""Static content shown by the popovers."""

from dataclasses import dataclass
from enum import Enum


class CostumeKind(Enum):
    """Costumes Jack can pick up on the board."""
    DWARF = "dwarf"
    LASERMAN = "laserman"
    GHOST = "ghost"


@dataclass(frozen=True)
class CostumeContent:
    """What the reveal popover shows for a costume."""
    display_name: str
    sprite_id: str
    caption: str


COSTUME_CONTENT: dict[CostumeKind, CostumeContent] = {
    CostumeKind.DWARF: CostumeContent(
        display_name="DWARF",
        sprite_id='images/dwarf-red.png',
        caption="Rocks were meant for smashing.",
    ),
    CostumeKind.LASERMAN: CostumeContent(
        display_name="LASERMAN",
        sprite_id='images/glasses-blue.png',
        caption="Lasers shmasers.",
    ),
    CostumeKind.GHOST: CostumeContent(
        display_name="GHOST",
        sprite_id='images/ghost-costume.png',
        caption="100% Believeable.",
    ),
}


POPOVER_COLORS = {
    "blue_gray": (71, 70, 81),
    "gray": (186, 186, 186),
    "orange": (255, 184, 6),
    "green": (171, 252, 170),
    "white": (255, 255, 255),
}


@dataclass
class Point:
    """Mutable 2D position."""
    x: float = 0.0
    y: float = 0.0
