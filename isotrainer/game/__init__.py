"""Cards, table models and range notation."""

from .cards import Card, Hand, Deck, Rank, Suit, parse_hand, parse_board, random_hand
from .models import (
    ActionType,
    BoardTexture,
    EvaluationResult,
    GameAction,
    Holding,
    PlayerCount,
    Position,
    Scenario,
    Stage,
)
from .ranges import (
    RANGE_TABLE,
    RangeCategory,
    RangeForm,
    expand_range,
    is_hand_in_range,
    range_form,
)

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "Rank",
    "Suit",
    "parse_hand",
    "parse_board",
    "random_hand",
    "ActionType",
    "BoardTexture",
    "EvaluationResult",
    "GameAction",
    "Holding",
    "PlayerCount",
    "Position",
    "Scenario",
    "Stage",
    "RANGE_TABLE",
    "RangeCategory",
    "RangeForm",
    "expand_range",
    "is_hand_in_range",
    "range_form",
]
