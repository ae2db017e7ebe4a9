"""Scenario generation and action evaluation."""

from .generator import (
    HOLDING_MENUS,
    TEXTURE_BOARDS,
    generate_postflop_scenario,
    generate_scenario,
    sample_hand_in_range,
)
from .evaluator import PreflopDecision, evaluate_action, preflop_decision

__all__ = [
    "HOLDING_MENUS",
    "TEXTURE_BOARDS",
    "generate_postflop_scenario",
    "generate_scenario",
    "sample_hand_in_range",
    "PreflopDecision",
    "evaluate_action",
    "preflop_decision",
]
