"""Hand range notation and the strategy's range table.

Range expressions are kept as plain strings and matched on demand. Four
shapes are understood:

    "QQ", "AKs", "AJo"      exact hand class
    "QQ+", "AJo+"           pairs upward / kicker climbing to the high card
    "22-77"                 pairs between two ranks
    "A2s-A9s", "45s-78s"    fixed high card, or fixed gap between the cards

Anything else simply matches nothing.
"""

import logging
from enum import Enum, auto
from typing import Iterable, Optional, Sequence, Union

from .cards import Card, Hand, STR_RANK, get_all_hands

logger = logging.getLogger(__name__)


class RangeForm(Enum):
    """Grammar branch a range expression belongs to."""
    EXACT_PAIR = auto()
    EXACT = auto()
    PLUS_PAIR = auto()
    PLUS = auto()
    DASH_PAIR = auto()
    DASH_FIXED_HIGH = auto()
    DASH_FIXED_GAP = auto()


def _parse_term(term: str) -> Optional[tuple[int, int, str]]:
    """
    Split a single hand class like 'QQ', 'AJo' or '45s' into (high, low, suffix).

    The ranks come back high card first whichever order they were written
    in. Suffix is '' for pairs and 's'/'o' otherwise. Returns None when the
    term is not a hand class.
    """
    if len(term) == 2:
        if term[0] not in STR_RANK or term[0] != term[1]:
            return None
        rank = STR_RANK[term[0]]
        return rank, rank, ""

    if len(term) == 3:
        first, second, suffix = term[0], term[1], term[2]
        if first not in STR_RANK or second not in STR_RANK or suffix not in "so":
            return None
        if first == second:
            return None
        r1, r2 = STR_RANK[first], STR_RANK[second]
        return max(r1, r2), min(r1, r2), suffix

    return None


def _as_hand(hand: Union[Hand, Sequence[Card]]) -> Hand:
    if isinstance(hand, Hand):
        return hand
    card1, card2 = hand
    return Hand(card1, card2)


def _suffix_matches(hand: Hand, suffix: str) -> bool:
    return hand.is_suited == (suffix == "s")


def is_hand_in_range(hand: Union[Hand, Sequence[Card]], range_expr: str) -> bool:
    """
    Check whether a concrete hand belongs to a range expression.

    Args:
        hand: A Hand, or any pair of distinct Cards in either order
        range_expr: Range notation such as 'QQ+', 'AJo+', '22-77'

    Returns:
        True if the hand is covered. Malformed expressions never match.
    """
    hand = _as_hand(hand)
    expr = range_expr.strip()
    high = hand.high.rank
    low = hand.low.rank

    # Exact: "AKs", "QQ"
    if expr == hand.canonical:
        return True

    # Plus: "QQ+", "AJo+"
    if expr.endswith("+"):
        base = _parse_term(expr[:-1])
        if base is None:
            return False
        base_high, base_low, suffix = base

        if not suffix:
            return hand.is_pair and high >= base_high

        # The high card is fixed; only the kicker climbs
        if hand.is_pair or high != base_high:
            return False
        return _suffix_matches(hand, suffix) and low >= base_low

    # Dash: "22-77", "A2s-A9s", "45s-78s"
    if "-" in expr:
        parts = expr.split("-")
        if len(parts) != 2:
            return False
        start, end = _parse_term(parts[0]), _parse_term(parts[1])
        if start is None or end is None:
            return False
        start_high, start_low, suffix = start
        end_high, end_low, end_suffix = end
        if suffix != end_suffix:
            return False

        if not suffix:
            return hand.is_pair and start_high <= high <= end_high

        if hand.is_pair or not _suffix_matches(hand, suffix):
            return False

        if start_high == end_high:
            return high == start_high and start_low <= low <= end_low

        # Gap is taken from the start term
        if hand.gap != start_high - start_low:
            return False
        return start_low <= low <= end_low

    return False


def range_form(range_expr: str) -> Optional[RangeForm]:
    """
    Report which grammar branch an expression parses under.

    Stricter than matching: a dash must run low to high, a fixed-gap dash
    must have the same gap on both ends, and an exact term must be written
    high card first (it is compared against the canonical form). Range
    terms such as '45s-78s' may name either card first. Returns None for
    anything that would not be safe to put in a range table.
    """
    expr = range_expr.strip()

    if expr.endswith("+"):
        base = _parse_term(expr[:-1])
        if base is None:
            return None
        return RangeForm.PLUS if base[2] else RangeForm.PLUS_PAIR

    if "-" in expr:
        parts = expr.split("-")
        if len(parts) != 2:
            return None
        start, end = _parse_term(parts[0]), _parse_term(parts[1])
        if start is None or end is None:
            return None
        if start[2] != end[2]:
            return None
        if not start[2]:
            return RangeForm.DASH_PAIR if start[0] <= end[0] else None
        if start[0] == end[0]:
            return RangeForm.DASH_FIXED_HIGH if start[1] <= end[1] else None
        if start[0] - start[1] != end[0] - end[1] or start[1] > end[1]:
            return None
        return RangeForm.DASH_FIXED_GAP

    term = _parse_term(expr)
    if term is None or STR_RANK[expr[0]] < STR_RANK[expr[1]]:
        return None
    return RangeForm.EXACT if term[2] else RangeForm.EXACT_PAIR


def expand_range(range_expr: str) -> list[str]:
    """
    List the canonical hand classes an expression covers.

    Examples:
        "QQ+" -> ["AA", "KK", "QQ"]
        "45s-78s" -> ["87s", "76s", "65s", "54s"]
    """
    return [
        canonical
        for canonical in get_all_hands()
        if is_hand_in_range(Hand.from_string(canonical), range_expr)
    ]


class RangeCategory(Enum):
    """Named groups of hands the preflop strategy is written in."""
    ISOLATION_VALUE = "Isolation: Value"
    ISOLATION_MEDIUM = "Isolation: Medium Pairs"
    ISOLATION_SUITED_BROADWAY = "Isolation: Suited Broadways"
    ISOLATION_SPECULATIVE = "Isolation: Speculative (CO/BTN)"
    OVERLIMP_SMALL_PAIR = "Over-limp: Small Pairs"
    OVERLIMP_SUITED_CONNECTOR = "Over-limp: Suited Connectors"
    OVERLIMP_NUT_FLUSH = "Over-limp: Weak Suited Aces"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_raise(self) -> bool:
        return self in RAISE_CATEGORIES

    @property
    def is_limp(self) -> bool:
        return self in LIMP_CATEGORIES


# Priority order matters: the evaluator takes the first raise category a
# hand falls in.
RAISE_CATEGORIES = (
    RangeCategory.ISOLATION_VALUE,
    RangeCategory.ISOLATION_MEDIUM,
    RangeCategory.ISOLATION_SUITED_BROADWAY,
    RangeCategory.ISOLATION_SPECULATIVE,
)

LIMP_CATEGORIES = (
    RangeCategory.OVERLIMP_SMALL_PAIR,
    RangeCategory.OVERLIMP_SUITED_CONNECTOR,
    RangeCategory.OVERLIMP_NUT_FLUSH,
)

RANGE_TABLE: dict[RangeCategory, tuple[str, ...]] = {
    # Premium pairs and strong broadways
    RangeCategory.ISOLATION_VALUE: ("QQ+", "JJ", "TT", "AJs+", "AJo+", "KQs", "KQo"),
    RangeCategory.ISOLATION_MEDIUM: ("88", "99"),
    RangeCategory.ISOLATION_SUITED_BROADWAY: ("KQs", "QJs", "JTs"),
    # Late position only
    RangeCategory.ISOLATION_SPECULATIVE: ("A5s", "98s"),
    RangeCategory.OVERLIMP_SMALL_PAIR: ("22-77",),
    RangeCategory.OVERLIMP_SUITED_CONNECTOR: ("45s-78s",),
    RangeCategory.OVERLIMP_NUT_FLUSH: ("A2s-A9s",),
}


def hand_in_category(hand: Union[Hand, Sequence[Card]], category: RangeCategory) -> bool:
    """True if any expression of the category covers the hand."""
    return any(is_hand_in_range(hand, expr) for expr in RANGE_TABLE[category])


def categories_for(hand: Union[Hand, Sequence[Card]]) -> list[RangeCategory]:
    """All categories covering a hand, in table order."""
    return [category for category in RANGE_TABLE if hand_in_category(hand, category)]


def all_playable_expressions() -> list[str]:
    """Flatten the range table into one list of expressions."""
    return [expr for exprs in RANGE_TABLE.values() for expr in exprs]


def validate_range_table(
    table: Optional[dict[RangeCategory, Iterable[str]]] = None,
) -> list[str]:
    """
    Find expressions that do not parse cleanly or cover no hands.

    Returns:
        The offending expressions; empty when the table is sound
    """
    table = RANGE_TABLE if table is None else table
    bad = []
    for category, exprs in table.items():
        for expr in exprs:
            if range_form(expr) is None or not expand_range(expr):
                logger.warning("Range %r in %s matches no grammar", expr, category.name)
                bad.append(expr)
    return bad
