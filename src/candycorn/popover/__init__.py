"""Popover overlays for CANDYCORN."""

from candycorn.popover.content import (
    COSTUME_CONTENT,
    POPOVER_COLORS,
    CostumeContent,
    CostumeKind,
    Point,
)
from candycorn.popover.fireworks import Fireworks, FireworkParticle, FIREWORK_PALETTE
from candycorn.popover.manager import CostumeData, PopoverManager

__all__ = [
    "COSTUME_CONTENT",
    "POPOVER_COLORS",
    "CostumeContent",
    "CostumeKind",
    "Point",
    "Fireworks",
    "FireworkParticle",
    "FIREWORK_PALETTE",
    "CostumeData",
    "PopoverManager",
]
