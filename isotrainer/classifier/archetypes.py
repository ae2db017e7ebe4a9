"""Villain archetypes used by the postflop drills."""

import random
from enum import Enum
from typing import Optional


class VillainType(Enum):
    """
    Fixed opponent labels for postflop drills.

    These archetypes capture the playing styles the drills are built on:
    - Passive Station: calls too much, rarely raises without the nuts
    - Maniac: raises with a very wide range, bluffs far too often
    - Nit: only continues with strong hands
    """
    PASSIVE_STATION = "Passive Station"
    MANIAC = "Maniac"
    NIT = "Nit"
    UNKNOWN = "Unknown"

    def description(self) -> str:
        """Human-readable description of archetype."""
        descriptions = {
            VillainType.PASSIVE_STATION: "Passive Station - calls a lot, raises only with it",
            VillainType.MANIAC: "Maniac - extremely aggressive, overbluffs",
            VillainType.NIT: "Nit - tight-passive, only premium hands",
            VillainType.UNKNOWN: "Unknown - no read",
        }
        return descriptions[self]

    @property
    def raises_for_value_only(self) -> bool:
        """Whether a raise from this player means a strong hand."""
        return self in (VillainType.PASSIVE_STATION, VillainType.NIT)


def get_exploits(villain: VillainType) -> list[str]:
    """
    Get exploitation strategies for an archetype.

    Args:
        villain: Villain archetype

    Returns:
        List of exploitation recommendations
    """
    exploits = {
        VillainType.PASSIVE_STATION: [
            "Value bet wider - they call too much",
            "Never bluff - they call down light",
            "Respect their raises - they have it",
        ],
        VillainType.NIT: [
            "Steal blinds aggressively",
            "Fold one-pair hands to their raises",
            "Give up on bluffs if they continue",
        ],
        VillainType.MANIAC: [
            "Trap with strong hands",
            "Call down very wide",
            "Don't try to bluff",
        ],
    }

    return exploits.get(villain, ["No read - play straightforward"])


def draw_villain(
    rng: random.Random,
    weights: Optional[dict[VillainType, int]] = None,
) -> VillainType:
    """
    Pick a villain archetype by weight.

    Args:
        rng: Random source
        weights: Relative weights; defaults to 3:1:1 station/maniac/nit

    Returns:
        The drawn archetype
    """
    if weights is None:
        weights = {
            VillainType.PASSIVE_STATION: 3,
            VillainType.MANIAC: 1,
            VillainType.NIT: 1,
        }
    villains = list(weights)
    return rng.choices(villains, weights=[weights[v] for v in villains], k=1)[0]
