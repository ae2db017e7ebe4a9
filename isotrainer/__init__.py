"""
isotrainer: Preflop Isolation and Flop Defense Trainer

Deals random live-poker spots (limped pots, straddles, flop check-raises)
and judges the action you pick against a fixed, hand-authored strategy
written in standard range notation.
"""

__version__ = "0.1.0"

from isotrainer.game.cards import Card, Hand
from isotrainer.game.models import (
    ActionType,
    EvaluationResult,
    GameAction,
    PlayerCount,
    Position,
    Scenario,
    Stage,
)
from isotrainer.game.ranges import is_hand_in_range
from isotrainer.trainer.generator import generate_postflop_scenario, generate_scenario
from isotrainer.trainer.evaluator import evaluate_action

__all__ = [
    "Card",
    "Hand",
    "ActionType",
    "EvaluationResult",
    "GameAction",
    "PlayerCount",
    "Position",
    "Scenario",
    "Stage",
    "is_hand_in_range",
    "generate_scenario",
    "generate_postflop_scenario",
    "evaluate_action",
]
