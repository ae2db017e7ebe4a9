"""Data models shared by the scenario generator and the evaluator."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING, Optional, Union

from .cards import Card, Hand

if TYPE_CHECKING:
    from isotrainer.classifier.archetypes import VillainType


class PlayerCount(IntEnum):
    """Supported table sizes."""
    HEADS_UP = 2
    SIX_MAX = 6
    FULL_RING = 9

    @classmethod
    def coerce(cls, value: Union[int, "PlayerCount"]) -> "PlayerCount":
        """Accept a plain seat count and return the matching member."""
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(f"Unsupported player count: {value}") from None

    @property
    def max_limpers(self) -> int:
        """Most limpers that can enter the pot before hero acts."""
        return {
            PlayerCount.HEADS_UP: 1,
            PlayerCount.SIX_MAX: 3,
            PlayerCount.FULL_RING: 5,
        }[self]


class Position(Enum):
    """Seats at the table, in preflop action order."""
    UTG = "UTG"
    UTG1 = "UTG+1"
    UTG2 = "UTG+2"
    MP = "MP"
    MP1 = "MP+1"
    CO = "CO"     # Cutoff
    BTN = "BTN"   # Button
    SB = "SB"     # Small Blind
    BB = "BB"     # Big Blind

    @classmethod
    def for_table(cls, player_count: Union[int, PlayerCount]) -> list["Position"]:
        """Seats used at a table of the given size, first to act first."""
        count = PlayerCount.coerce(player_count)
        if count == PlayerCount.HEADS_UP:
            return [cls.SB, cls.BB]
        if count == PlayerCount.SIX_MAX:
            return [cls.UTG, cls.MP, cls.CO, cls.BTN, cls.SB, cls.BB]
        return [
            cls.UTG, cls.UTG1, cls.UTG2, cls.MP, cls.MP1,
            cls.CO, cls.BTN, cls.SB, cls.BB,
        ]

    @classmethod
    def from_string(cls, s: str) -> "Position":
        """Parse position from a label such as 'BTN' or 'Big Blind'."""
        s = s.upper().strip()

        mapping = {
            "UTG": cls.UTG,
            "UTG+1": cls.UTG1,
            "UTG+2": cls.UTG2,
            "MP": cls.MP,
            "MP+1": cls.MP1,
            "CO": cls.CO,
            "CUTOFF": cls.CO,
            "BTN": cls.BTN,
            "BUTTON": cls.BTN,
            "DEALER": cls.BTN,
            "SB": cls.SB,
            "SMALL BLIND": cls.SB,
            "BB": cls.BB,
            "BIG BLIND": cls.BB,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown position: {s}")

    @property
    def is_late(self) -> bool:
        return self in (Position.CO, Position.BTN)

    @property
    def is_out_of_position(self) -> bool:
        """Blinds act first on every postflop street."""
        return self in (Position.SB, Position.BB)

    def __str__(self) -> str:
        return self.value


class Stage(Enum):
    """Street the decision is taken on."""
    PREFLOP = "preflop"
    FLOP = "flop"


class BoardTexture(Enum):
    """Flop textures the postflop drills are built around."""
    DRY = "dry"
    WET = "wet"
    PAIRED = "paired"
    MONOTONE = "monotone"


class Holding(Enum):
    """What hero holds on the flop, as far as the postflop drills care."""
    OVERPAIR = "Overpair"
    TOP_PAIR_TOP_KICKER = "Top Pair Top Kicker"
    SET = "Set"
    COMBO_DRAW = "Combo Draw"
    WEAK_DRAW = "Weak Draw"

    @property
    def is_draw(self) -> bool:
        return self in (Holding.COMBO_DRAW, Holding.WEAK_DRAW)


class ActionType(Enum):
    """Types of player actions."""
    FOLD = auto()
    CHECK = auto()
    CALL = auto()
    RAISE = auto()

    @classmethod
    def from_string(cls, s: str) -> "ActionType":
        """Parse action type from string. 'limp' is a preflop call."""
        s = s.lower().strip()
        mapping = {
            "fold": cls.FOLD,
            "f": cls.FOLD,
            "check": cls.CHECK,
            "x": cls.CHECK,
            "call": cls.CALL,
            "limp": cls.CALL,
            "c": cls.CALL,
            "raise": cls.RAISE,
            "r": cls.RAISE,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown action type: {s}")


@dataclass(frozen=True)
class GameAction:
    """A decision submitted by the user."""
    action_type: ActionType
    amount: Optional[float] = None  # Raise size in BBs

    def __repr__(self) -> str:
        if self.amount is not None:
            return f"{self.action_type.name} {self.amount:g}bb"
        return self.action_type.name


@dataclass(frozen=True)
class Scenario:
    """
    One training spot, built once by the generator and read-only after.

    Preflop scenarios have an empty board. Flop scenarios carry exactly
    three board cards plus the villain's profile and action, and normally
    the holding tag the generator dealt hero.
    """
    hero_position: Position
    hero_hand: Hand
    limpers: int
    is_straddled: bool
    pot_size: float   # In BBs
    stack_size: float  # Effective stack in BBs
    player_count: PlayerCount
    description: str
    stage: Stage = Stage.PREFLOP
    board: tuple[Card, ...] = field(default_factory=tuple)

    # Flop only
    villain_type: Optional["VillainType"] = None
    villain_action: Optional[str] = None
    board_texture: Optional[BoardTexture] = None
    holding: Optional[Holding] = None

    def __post_init__(self):
        object.__setattr__(self, "player_count", PlayerCount.coerce(self.player_count))
        object.__setattr__(self, "board", tuple(self.board))

        expected_board = 0 if self.stage == Stage.PREFLOP else 3
        if len(self.board) != expected_board:
            raise ValueError(
                f"{self.stage.value} scenario needs {expected_board} board cards, "
                f"got {len(self.board)}"
            )
        if self.pot_size < 0 or self.stack_size < 0:
            raise ValueError("Pot and stack sizes must be non-negative")
        if not 0 <= self.limpers <= self.player_count.max_limpers:
            raise ValueError(
                f"{self.limpers} limpers not possible at a "
                f"{int(self.player_count)}-handed table"
            )
        if set(self.board) & set(self.hero_hand.cards):
            raise ValueError("Board and hero hand share a card")
        if len(set(self.board)) != len(self.board):
            raise ValueError("Duplicate board cards")


@dataclass(frozen=True)
class EvaluationResult:
    """Verdict on one submitted action."""
    is_correct: bool
    feedback: str
    citation: Optional[str] = None


