"""Villain archetypes and flop holding classification."""

from .archetypes import VillainType, draw_villain, get_exploits
from .holdings import build_holding, classify_holding

__all__ = [
    "VillainType",
    "draw_villain",
    "get_exploits",
    "build_holding",
    "classify_holding",
]
