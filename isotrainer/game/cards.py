"""Card and hand representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional
import random


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. The integer values carry no ordering meaning."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOL = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __post_init__(self):
        # Accept plain ints but store the enum members
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def pretty(self) -> str:
        """Rank followed by the suit symbol, e.g. 'A♠'."""
        return f"{RANK_STR[self.rank]}{SUIT_SYMBOL[self.suit]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=Rank(STR_RANK[rank_char]), suit=Suit(STR_SUIT[suit_char]))


@dataclass(frozen=True, init=False)
class Hand:
    """
    A two-card starting hand.

    The cards are stored high card first, so two hands holding the same
    cards compare equal whatever order they were dealt in.
    """
    high: Card
    low: Card

    def __init__(self, card1: Card, card2: Card):
        if card1 == card2:
            raise ValueError(f"Hand cannot hold the same card twice: {card1}")
        # Ensure high has higher or equal rank; break pair ties by suit
        if (card1.rank, card1.suit) < (card2.rank, card2.suit):
            card1, card2 = card2, card1
        object.__setattr__(self, "high", card1)
        object.__setattr__(self, "low", card2)

    @property
    def cards(self) -> tuple[Card, Card]:
        return (self.high, self.low)

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.high.rank == self.low.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.high.suit == self.low.suit

    @property
    def gap(self) -> int:
        """Rank distance between the two cards (1 for connectors)."""
        return self.high.rank - self.low.rank

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This groups equivalent hands regardless of specific suits.
        """
        r1 = RANK_STR[self.high.rank]
        r2 = RANK_STR[self.low.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __str__(self) -> str:
        return f"{self.high}{self.low}"

    def __repr__(self) -> str:
        return f"Hand({self.high}, {self.low})"

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from string like 'AsKh' or 'AKs'."""
        if len(s) == 4:
            # Specific cards: 'AsKh'
            return parse_hand(s)
        elif len(s) == 2:
            # Pair: 'AA'
            if s[0].upper() != s[1].upper():
                raise ValueError(f"Invalid hand string: {s}")
            rank = STR_RANK[s[0].upper()]
            return cls(
                Card(rank, Suit.SPADES),
                Card(rank, Suit.HEARTS)
            )
        elif len(s) == 3:
            # Suited or offsuit: 'AKs' or 'AKo'
            r1 = STR_RANK[s[0].upper()]
            r2 = STR_RANK[s[1].upper()]
            suited = s[2].lower() == 's'

            if suited:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.SPADES))
            else:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.HEARTS))
        else:
            raise ValueError(f"Invalid hand string: {s}")


def parse_hand(s: str) -> Hand:
    """Parse a specific two-card hand like 'AhKs'."""
    if len(s) != 4:
        raise ValueError(f"Invalid hand string: {s}")
    return Hand(Card.from_string(s[:2]), Card.from_string(s[2:]))


def parse_board(s: str) -> tuple[Card, ...]:
    """Parse board cards from 'KsTd2c' or 'Ks Td 2c'."""
    board_str = s.replace(" ", "")
    if len(board_str) % 2:
        raise ValueError(f"Invalid board string: {s}")
    return tuple(
        Card.from_string(board_str[i:i + 2])
        for i in range(0, len(board_str), 2)
    )


def full_deck() -> list[Card]:
    """All 52 cards, ordered by rank then suit."""
    return [
        Card(rank, suit)
        for rank in Rank
        for suit in Suit
    ]


class Deck:
    """A standard 52-card deck."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = full_deck()

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self.rng.shuffle(self.cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the deck."""
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def remove(self, cards: list[Card]) -> None:
        """Remove specific cards from the deck."""
        for card in cards:
            if card in self.cards:
                self.cards.remove(card)

    def __len__(self) -> int:
        return len(self.cards)


def random_card(rng: random.Random) -> Card:
    """Draw one card uniformly, independent of any deck state."""
    return Card(rng.choice(list(Rank)), rng.choice(list(Suit)))


def random_hand(rng: random.Random) -> Hand:
    """
    Draw a uniformly random two-card hand.

    Both cards are drawn independently; the impossible draw of the same
    card twice is simply re-drawn.
    """
    while True:
        card1 = random_card(rng)
        card2 = random_card(rng)
        if card1 != card2:
            return Hand(card1, card2)


def get_all_hands() -> list[str]:
    """Generate all 169 unique starting hands in canonical form."""
    hands = []
    ranks = "AKQJT98765432"

    # Pairs
    for r in ranks:
        hands.append(f"{r}{r}")

    # Non-pairs
    for i, r1 in enumerate(ranks):
        for r2 in ranks[i+1:]:
            hands.append(f"{r1}{r2}s")  # Suited
            hands.append(f"{r1}{r2}o")  # Offsuit

    return hands
