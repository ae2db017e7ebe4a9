"""Judge a submitted action against the trainer's strategy.

Preflop spots are judged against the range table: isolation raises with
strong hands, over-limps with speculative hands in deep unstraddled pots,
folds otherwise. Flop spots are judged against the villain's archetype
and the holding hero was dealt.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from isotrainer.classifier.archetypes import VillainType
from isotrainer.classifier.holdings import classify_holding
from isotrainer.config import DEFAULT_CONFIG, TrainerConfig
from isotrainer.game.models import (
    ActionType,
    EvaluationResult,
    GameAction,
    Holding,
    Scenario,
    Stage,
)
from isotrainer.game.ranges import RangeCategory, hand_in_category

logger = logging.getLogger(__name__)

SIZING_CITATION = (
    "Iso-Raise Formula: 4bb to 5bb + 1bb per limper + 1bb for being out of position."
)

UNKNOWN_ACTION = EvaluationResult(is_correct=False, feedback="Unknown action.")
UNKNOWN_SCENARIO = EvaluationResult(is_correct=False, feedback="Unknown scenario.")


@dataclass(frozen=True)
class PreflopDecision:
    """The strategy's answer to a preflop spot, before any action is judged."""
    should_raise: bool
    should_limp: bool
    raise_category: Optional[RangeCategory]
    limp_category: Optional[RangeCategory]
    raise_reason: str
    limp_reason: str
    min_size: float
    max_size: float


def _raise_reason(category: RangeCategory, limpers: int) -> str:
    if category == RangeCategory.ISOLATION_VALUE:
        if limpers > 0:
            return ("Premium Pairs and Strong Top-Pair Hands (AK, AQ, AJ, KQ) "
                    "must isolate limpers for value.")
        return "Premium Hands (AK, AQ, AJ, KQ) should Open Raise for value."

    if category == RangeCategory.ISOLATION_MEDIUM:
        if limpers == 0:
            return "Medium Pairs (88, 99) are strong enough to Open Raise for value."
        if limpers > 1:
            return ("Medium Pairs (88, 99) should be raised to thin the field and "
                    "build a pot for when you hit a set.")
        return ("Medium Pairs (88, 99) are strong enough to isolate a single limper "
                "and create set-mining potential.")

    if category == RangeCategory.ISOLATION_SUITED_BROADWAY:
        if limpers > 0:
            return ("Suited Broadways (KQs, QJs, JTs) have excellent playability "
                    "and retain equity when called.")
        return "Suited Broadways (KQs, QJs, JTs) are strong enough to Open Raise."

    if limpers > 0:
        return ("Speculative hands (A5s, 98s) can isolate from late position (CO, BTN) "
                "to utilize positional advantage.")
    return ("Speculative hands (A5s, 98s) are good candidates to Open Raise from "
            "late position to steal the blinds.")


LIMP_REASONS = {
    RangeCategory.OVERLIMP_SMALL_PAIR:
        "Small Pocket Pairs (22-77) are ideal for over-limping to set-mine cheaply.",
    RangeCategory.OVERLIMP_SUITED_CONNECTOR:
        "Low Suited Connectors (45s-78s) want multi-way pots. "
        "Raising isolates against dominating ranges.",
    RangeCategory.OVERLIMP_NUT_FLUSH:
        "Weak Suited Aces (A2s-A9s) are powerful in multi-way pots for nut-flush "
        "potential but dangerous to raise.",
}

STRADDLE_REASONS = {
    RangeCategory.OVERLIMP_SMALL_PAIR:
        "A Straddle halves the effective stack, so speculative hands like small pairs and "
        "connectors lose value due to reduced implied odds.",
    RangeCategory.OVERLIMP_SUITED_CONNECTOR:
        "A Straddle halves the effective stack, so speculative hands like small pairs and "
        "connectors lose value due to reduced implied odds.",
    RangeCategory.OVERLIMP_NUT_FLUSH:
        "Straddle reduces implied odds, devaluing speculative flush draws.",
}


def preflop_decision(
    scenario: Scenario,
    config: TrainerConfig = DEFAULT_CONFIG,
) -> PreflopDecision:
    """
    Work out what the strategy wants in a preflop spot.

    Raise categories are tried in priority order and the first match wins;
    speculative hands only raise from the cutoff or button. Limp categories
    only apply in unstraddled pots: a straddle cuts the implied odds those
    hands rely on, so they are downgraded to folds.
    """
    hand = scenario.hero_hand
    limpers = scenario.limpers

    raise_category = None
    for category in (
        RangeCategory.ISOLATION_VALUE,
        RangeCategory.ISOLATION_MEDIUM,
        RangeCategory.ISOLATION_SUITED_BROADWAY,
    ):
        if hand_in_category(hand, category):
            raise_category = category
            break
    else:
        if (scenario.hero_position.is_late
                and hand_in_category(hand, RangeCategory.ISOLATION_SPECULATIVE)):
            raise_category = RangeCategory.ISOLATION_SPECULATIVE

    limp_category = None
    for category in (
        RangeCategory.OVERLIMP_SMALL_PAIR,
        RangeCategory.OVERLIMP_SUITED_CONNECTOR,
        RangeCategory.OVERLIMP_NUT_FLUSH,
    ):
        if hand_in_category(hand, category):
            limp_category = category
            break

    if limp_category is None:
        limp_reason = ""
    elif scenario.is_straddled:
        limp_reason = STRADDLE_REASONS[limp_category]
    else:
        limp_reason = LIMP_REASONS[limp_category]

    oop = 1 if scenario.hero_position.is_out_of_position else 0
    return PreflopDecision(
        should_raise=raise_category is not None,
        should_limp=limp_category is not None and not scenario.is_straddled,
        raise_category=raise_category,
        limp_category=limp_category,
        raise_reason=_raise_reason(raise_category, limpers) if raise_category else "",
        limp_reason=limp_reason,
        min_size=config.raise_min_base + limpers + oop,
        max_size=config.raise_max_base + limpers + oop,
    )


def _fmt_bb(amount: float) -> str:
    return f"{amount:g}"


def evaluate_preflop(
    scenario: Scenario,
    action: GameAction,
    config: TrainerConfig = DEFAULT_CONFIG,
) -> EvaluationResult:
    """Judge a preflop action."""
    decision = preflop_decision(scenario, config)

    if action.action_type == ActionType.RAISE:
        if not decision.should_raise:
            if decision.should_limp:
                return EvaluationResult(
                    is_correct=False,
                    feedback=("Incorrect. " + decision.limp_reason
                              + " Raising bloats the pot and isolates you against "
                              "stronger ranges."),
                )
            return EvaluationResult(
                is_correct=False,
                feedback="Incorrect. This hand is not strong enough to isolate. You should Fold.",
            )

        amount = action.amount
        # No size (None or 0bb) is judged on direction only
        if amount and (
            amount < decision.min_size
            or amount > decision.max_size + config.sizing_tolerance
        ):
            return EvaluationResult(
                is_correct=False,
                feedback=(
                    "Right move, wrong size. Formula: 4-5bb + 1bb/limper + 1bb OOP. "
                    f"Target: {_fmt_bb(decision.min_size)}-{_fmt_bb(decision.max_size)}bb. "
                    f"You bet {_fmt_bb(amount)}bb."
                ),
                citation=SIZING_CITATION,
            )
        return EvaluationResult(is_correct=True, feedback="Correct! " + decision.raise_reason)

    if action.action_type == ActionType.CALL:
        if decision.should_raise:
            return EvaluationResult(
                is_correct=False,
                feedback=("Incorrect. " + decision.raise_reason
                          + " Limping lets opponents see a cheap flop."),
            )
        if decision.should_limp:
            return EvaluationResult(is_correct=True, feedback="Correct! " + decision.limp_reason)
        if decision.limp_category is not None:
            # Straddled pot: the limp hand has been devalued
            return EvaluationResult(
                is_correct=False,
                feedback="Incorrect. " + decision.limp_reason + " You should Fold.",
            )
        return EvaluationResult(
            is_correct=False,
            feedback="Incorrect. This hand is too weak to play. You should Fold.",
        )

    if action.action_type == ActionType.FOLD:
        if decision.should_raise:
            return EvaluationResult(
                is_correct=False,
                feedback=("Incorrect. You missed a value isolation opportunity. "
                          + decision.raise_reason),
            )
        if decision.should_limp:
            return EvaluationResult(
                is_correct=False,
                feedback=("Incorrect. You missed a profitable over-limp spot. "
                          + decision.limp_reason),
            )
        if decision.limp_category is not None:
            return EvaluationResult(is_correct=True, feedback="Correct. " + decision.limp_reason)
        return EvaluationResult(is_correct=True, feedback="Correct. Trash hand, trash it.")

    return UNKNOWN_ACTION


def _holding_for(scenario: Scenario) -> Optional[Holding]:
    if scenario.holding is not None:
        return scenario.holding
    return classify_holding(scenario.hero_hand, scenario.board)


def _evaluate_vs_value_raiser(
    villain: VillainType,
    holding: Holding,
    action: GameAction,
) -> EvaluationResult:
    """A check-raise from a passive player or a nit is almost always strong."""
    who = villain.value
    one_pair = holding in (Holding.OVERPAIR, Holding.TOP_PAIR_TOP_KICKER)

    if action.action_type == ActionType.FOLD:
        if one_pair or holding == Holding.WEAK_DRAW:
            return EvaluationResult(
                is_correct=True,
                feedback=(f"Correct. A {who} rarely check-raises without two pair or better. "
                          f"Your {holding.value} is beat too often to continue."),
            )
        if holding == Holding.SET:
            return EvaluationResult(
                is_correct=False,
                feedback="Incorrect. You hold a Set, one of the best hands on this board. Never fold it here.",
            )
        return EvaluationResult(
            is_correct=False,
            feedback=("Incorrect. A Combo Draw has too much equity to fold. "
                      "Raise and use your fold equity."),
        )

    if action.action_type == ActionType.RAISE:
        if holding == Holding.SET:
            return EvaluationResult(
                is_correct=True,
                feedback="Correct! Fast-play your Set and get stacks in against their strong range.",
            )
        if holding == Holding.COMBO_DRAW:
            return EvaluationResult(
                is_correct=True,
                feedback="Correct! Your Combo Draw has strong equity; re-raising adds fold equity.",
            )
        if one_pair:
            return EvaluationResult(
                is_correct=False,
                feedback=(f"Incorrect. Re-raising a {who} with one pair only gets called "
                          "by better. You should Fold."),
            )
        return EvaluationResult(
            is_correct=False,
            feedback="Incorrect. A Weak Draw has neither the equity nor the fold equity to raise. You should Fold.",
        )

    if action.action_type == ActionType.CALL:
        if holding == Holding.SET:
            return EvaluationResult(
                is_correct=True,
                feedback="Correct. Calling with a Set keeps their bluffs and worse value hands in.",
            )
        if holding == Holding.COMBO_DRAW:
            return EvaluationResult(
                is_correct=False,
                feedback="Incorrect. With a Combo Draw you should Raise to add fold equity.",
            )
        return EvaluationResult(
            is_correct=False,
            feedback=(f"Incorrect. Calling a {who}'s check-raise with a {holding.value} "
                      "pays off their strong range. You should Fold."),
        )

    return UNKNOWN_ACTION


def _evaluate_vs_maniac(holding: Optional[Holding], action: GameAction) -> EvaluationResult:
    """A maniac check-raises with a wide range full of bluffs, whatever hero holds."""
    if action.action_type == ActionType.FOLD:
        hand = f"Your {holding.value}" if holding is not None else "Your hand"
        return EvaluationResult(
            is_correct=False,
            feedback=(f"Incorrect. A Maniac check-raises with a very wide range. "
                      f"{hand} is far too strong to fold."),
        )
    if action.action_type == ActionType.CALL:
        return EvaluationResult(
            is_correct=True,
            feedback="Correct. Calling down lets the Maniac keep bluffing into you.",
        )
    if action.action_type == ActionType.RAISE:
        return EvaluationResult(
            is_correct=True,
            feedback="Correct. Re-raising isolates the Maniac while you are ahead of their range.",
        )
    return UNKNOWN_ACTION


def evaluate_postflop(scenario: Scenario, action: GameAction) -> EvaluationResult:
    """Judge a response to the villain's flop check-raise."""
    villain = scenario.villain_type
    if villain == VillainType.MANIAC:
        return _evaluate_vs_maniac(_holding_for(scenario), action)
    if villain is None or not villain.raises_for_value_only:
        return UNKNOWN_SCENARIO

    holding = _holding_for(scenario)
    if holding is None:
        return EvaluationResult(
            is_correct=False,
            feedback="Unknown holding. This hand is outside the flop drills.",
        )
    return _evaluate_vs_value_raiser(villain, holding, action)


def evaluate_action(
    scenario: Scenario,
    action: GameAction,
    config: Optional[TrainerConfig] = None,
) -> EvaluationResult:
    """
    Judge an action in a generated scenario.

    Args:
        scenario: The spot hero is facing
        action: The submitted action
        config: Sizing constants; defaults to DEFAULT_CONFIG

    Returns:
        Verdict with feedback. Sizing mistakes also carry a citation.
    """
    config = config or DEFAULT_CONFIG
    if scenario.stage == Stage.PREFLOP:
        result = evaluate_preflop(scenario, action, config)
    elif scenario.stage == Stage.FLOP:
        result = evaluate_postflop(scenario, action)
    else:
        result = UNKNOWN_SCENARIO

    logger.debug("%r in %r -> %s", action, scenario.description, result.is_correct)
    return result
