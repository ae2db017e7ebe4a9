"""Flop holding classification.

Sorts hero's two cards into the handful of holdings the postflop drills
are written for. This is rank and suit arithmetic only; nothing here
ranks five-card hands.
"""

from collections import Counter
from typing import Optional, Sequence

from isotrainer.game.cards import Card, Deck, Hand, Rank, Suit
from isotrainer.game.models import Holding

# Preferred suit order when building hands, so built one-pair hands keep
# clear of the board's flush suit where possible
SUIT_PREFERENCE = (Suit.SPADES, Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS)


def _has_straight(ranks: set[int]) -> bool:
    ranks = set(ranks)
    if Rank.ACE in ranks:
        ranks.add(1)  # Wheel
    return any(
        all(low + i in ranks for i in range(5))
        for low in range(1, 11)
    )


def straight_outs(hand: Hand, board: Sequence[Card]) -> set[int]:
    """
    Ranks that would complete a straight using at least one hole card.

    Empty when the straight is already made or there is no draw.
    """
    board_ranks = {c.rank for c in board}
    ranks = board_ranks | {c.rank for c in hand.cards}
    if _has_straight(ranks):
        return set()

    outs = set()
    for rank in Rank:
        if rank in ranks:
            continue
        if _has_straight(ranks | {rank}) and not _has_straight(board_ranks | {rank}):
            outs.add(int(rank))
    return outs


def has_flush_draw(hand: Hand, board: Sequence[Card]) -> bool:
    """Four to a flush, with hero contributing at least one of them."""
    counts = Counter(c.suit for c in (*hand.cards, *board))
    return any(
        count == 4 and any(c.suit == suit for c in hand.cards)
        for suit, count in counts.items()
    )


def best_kicker(board: Sequence[Card]) -> Rank:
    """Highest rank that does not appear on the board."""
    board_ranks = {c.rank for c in board}
    return max(rank for rank in Rank if rank not in board_ranks)


def classify_holding(hand: Hand, board: Sequence[Card]) -> Optional[Holding]:
    """
    Classify hero's flop holding.

    Checked in order: set, overpair, top pair top kicker, combo draw,
    weak draw. A combo draw is a flush draw with either a straight draw or
    two overcards alongside it.

    Args:
        hand: Hero's hole cards
        board: The three flop cards

    Returns:
        The holding, or None for hands outside the drills (underpairs,
        weak top pairs, air, made straights and flushes)
    """
    if len(board) < 3:
        return None

    board_ranks = [c.rank for c in board]
    top = max(board_ranks)

    if hand.is_pair:
        if hand.high.rank in board_ranks:
            return Holding.SET
        if hand.high.rank > top:
            return Holding.OVERPAIR
    else:
        kicker = best_kicker(board)
        for paired, other in ((hand.high, hand.low), (hand.low, hand.high)):
            if paired.rank == top and other.rank == kicker:
                return Holding.TOP_PAIR_TOP_KICKER

    flush_draw = has_flush_draw(hand, board)
    outs = straight_outs(hand, board)
    overcards = sum(1 for c in hand.cards if c.rank > top)

    if flush_draw and (outs or overcards == 2):
        return Holding.COMBO_DRAW
    if flush_draw or outs:
        return Holding.WEAK_DRAW
    return None


def _free_suits(rank: int, deck: Deck) -> list[Suit]:
    return [s for s in SUIT_PREFERENCE if Card(rank, s) in deck.cards]


def build_holding(holding: Holding, board: Sequence[Card]) -> Optional[Hand]:
    """
    Build a representative hand of the given holding against a board.

    Draw holdings are built as two big cards in the board's most common
    suit; whether that lands as a combo or weak draw depends on the board,
    so callers should classify the result.

    Returns:
        A hand using cards not on the board, or None if the holding cannot
        be made on this board (e.g. an overpair to an ace-high flop)
    """
    deck = Deck()
    deck.remove(list(board))
    board_ranks = sorted({c.rank for c in board}, reverse=True)
    top = board_ranks[0]

    if holding == Holding.OVERPAIR:
        if top == Rank.ACE:
            return None
        suits = _free_suits(top + 1, deck)
        return Hand(Card(top + 1, suits[0]), Card(top + 1, suits[1]))

    if holding == Holding.TOP_PAIR_TOP_KICKER:
        paired = Card(top, _free_suits(top, deck)[0])
        kicker_rank = best_kicker(board)
        kicker_suit = next(s for s in _free_suits(kicker_rank, deck) if s != paired.suit)
        return Hand(paired, Card(kicker_rank, kicker_suit))

    if holding == Holding.SET:
        for rank in board_ranks:
            suits = _free_suits(rank, deck)
            if len(suits) >= 2:
                return Hand(Card(rank, suits[0]), Card(rank, suits[1]))
        return None

    # Draws
    suit = Counter(c.suit for c in board).most_common(1)[0][0]
    ranks = [
        rank for rank in sorted(Rank, reverse=True)
        if rank not in board_ranks and Card(rank, suit) in deck.cards
    ]
    if len(ranks) < 2:
        return None
    return Hand(Card(ranks[0], suit), Card(ranks[1], suit))
