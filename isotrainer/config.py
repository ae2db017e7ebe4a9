"""Tunable constants for scenario generation and evaluation."""

from dataclasses import dataclass, field

from isotrainer.classifier.archetypes import VillainType
from isotrainer.game.models import Holding


@dataclass
class TrainerConfig:
    """Configuration for the scenario generator and the preflop judge."""
    straddle_probability: float = 0.3        # Tables above heads-up only
    playable_hand_share: float = 0.5         # Share of hands drawn from the range table
    limper_reroll_probability: float = 0.8   # Chance a zero-limper draw becomes one limper
    heads_up_limp_probability: float = 0.5   # Chance the SB limps into a BB hero
    max_sampling_attempts: int = 100         # Bound on rejection sampling

    base_stack: float = 100.0
    straddle_stack: float = 50.0             # Straddle halves the effective stack

    postflop_pot: float = 20.0
    postflop_stack: float = 100.0

    # Iso-raise sizing: 4-5bb + 1bb per limper + 1bb out of position
    raise_min_base: float = 4.0
    raise_max_base: float = 5.0
    sizing_tolerance: float = 2.0            # Allowed overshoot above the max

    villain_weights: dict[VillainType, int] = field(default_factory=lambda: {
        VillainType.PASSIVE_STATION: 3,
        VillainType.MANIAC: 1,
        VillainType.NIT: 1,
    })

    # Used for textures without a fixed menu of hands
    ladder_weights: dict[Holding, float] = field(default_factory=lambda: {
        Holding.OVERPAIR: 0.3,
        Holding.TOP_PAIR_TOP_KICKER: 0.2,
        Holding.SET: 0.2,
        Holding.COMBO_DRAW: 0.3,  # Any draw; tagged with the draw it forms
    })

    def __post_init__(self):
        for name in (
            "straddle_probability",
            "playable_hand_share",
            "limper_reroll_probability",
            "heads_up_limp_probability",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.max_sampling_attempts < 1:
            raise ValueError("max_sampling_attempts must be at least 1")
        if self.raise_min_base > self.raise_max_base:
            raise ValueError("raise_min_base cannot exceed raise_max_base")


DEFAULT_CONFIG = TrainerConfig()
