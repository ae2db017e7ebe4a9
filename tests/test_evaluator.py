"""Tests for action evaluation."""

import pytest

from isotrainer.classifier.archetypes import VillainType
from isotrainer.config import TrainerConfig
from isotrainer.game.models import ActionType, GameAction, Holding
from isotrainer.game.ranges import RangeCategory
from isotrainer.trainer.evaluator import (
    SIZING_CITATION,
    evaluate_action,
    preflop_decision,
)

FOLD = GameAction(ActionType.FOLD)
CALL = GameAction(ActionType.CALL)
CHECK = GameAction(ActionType.CHECK)


def raise_to(amount=None):
    return GameAction(ActionType.RAISE, amount)


class TestPreflopDecision:
    def test_value_hand(self, make_preflop):
        decision = preflop_decision(make_preflop("AsKs", "BTN", limpers=1))
        assert decision.should_raise
        assert decision.raise_category == RangeCategory.ISOLATION_VALUE
        assert (decision.min_size, decision.max_size) == (5, 6)

    def test_out_of_position_sizing(self, make_preflop):
        decision = preflop_decision(make_preflop("AsKs", "SB", limpers=2))
        assert (decision.min_size, decision.max_size) == (7, 8)

    def test_speculative_needs_late_position(self, make_preflop):
        assert preflop_decision(make_preflop("As5s", "CO")).should_raise
        assert preflop_decision(make_preflop("9h8h", "BTN")).should_raise
        early = preflop_decision(make_preflop("As5s", "UTG"))
        assert not early.should_raise
        assert early.limp_category == RangeCategory.OVERLIMP_NUT_FLUSH

    def test_straddle_blocks_limp(self, make_preflop):
        decision = preflop_decision(make_preflop("5h5c", "BTN", limpers=1, straddled=True))
        assert not decision.should_raise
        assert not decision.should_limp
        assert decision.limp_category == RangeCategory.OVERLIMP_SMALL_PAIR

    def test_custom_sizing(self, make_preflop):
        config = TrainerConfig(raise_min_base=3, raise_max_base=3.5)
        decision = preflop_decision(make_preflop("QhQd", "BTN", limpers=1), config)
        assert (decision.min_size, decision.max_size) == (4, 4.5)


class TestPreflopEvaluation:
    def test_iso_raise_correct(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), raise_to(5))
        assert result.is_correct
        assert result.feedback.startswith("Correct!")
        assert result.citation is None

    def test_raise_within_tolerance(self, make_preflop):
        assert evaluate_action(make_preflop("AsKs", "BTN", limpers=1), raise_to(8)).is_correct

    def test_raise_too_big(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), raise_to(12))
        assert not result.is_correct
        assert "wrong size" in result.feedback
        assert "Target: 5-6bb" in result.feedback
        assert "You bet 12bb" in result.feedback
        assert result.citation == SIZING_CITATION

    def test_raise_too_small_out_of_position(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "SB", limpers=2), raise_to(6))
        assert not result.is_correct
        assert result.citation == SIZING_CITATION

    def test_raise_without_amount(self, make_preflop):
        assert evaluate_action(make_preflop("AsKs", "BTN", limpers=1), raise_to()).is_correct

    def test_fold_value_hand(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), FOLD)
        assert not result.is_correct
        assert "isolation" in result.feedback

    def test_limp_value_hand(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), CALL)
        assert not result.is_correct
        assert "Limping" in result.feedback

    def test_small_pair_overlimp(self, make_preflop):
        scenario = make_preflop("5h5c", "BTN", limpers=2)
        assert evaluate_action(scenario, CALL).is_correct
        assert not evaluate_action(scenario, FOLD).is_correct
        raised = evaluate_action(scenario, raise_to(7))
        assert not raised.is_correct
        assert "bloats the pot" in raised.feedback

    @pytest.mark.parametrize("hand", ["5h4h", "6h5h", "7h6h", "8h7h"])
    def test_suited_connector_overlimp(self, make_preflop, hand):
        scenario = make_preflop(hand, "BTN", limpers=2)
        call = evaluate_action(scenario, CALL)
        assert call.is_correct
        assert "Suited Connectors" in call.feedback
        assert not evaluate_action(scenario, FOLD).is_correct

    def test_zero_raise_is_unsized(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), raise_to(0))
        assert result.is_correct
        assert result.citation is None

    def test_straddled_small_pair(self, make_preflop):
        scenario = make_preflop("5h5c", "BTN", limpers=1, straddled=True)

        call = evaluate_action(scenario, CALL)
        assert not call.is_correct
        assert "Straddle" in call.feedback

        assert not evaluate_action(scenario, raise_to(6)).is_correct

        fold = evaluate_action(scenario, FOLD)
        assert fold.is_correct
        assert "Straddle" in fold.feedback

    def test_straddled_weak_ace(self, make_preflop):
        scenario = make_preflop("Ah3h", "MP", limpers=1, straddled=True)
        assert evaluate_action(scenario, FOLD).is_correct
        assert "implied odds" in evaluate_action(scenario, CALL).feedback

    def test_trash(self, make_preflop):
        scenario = make_preflop("7c2d", "BTN", limpers=1)
        fold = evaluate_action(scenario, FOLD)
        assert fold.is_correct
        assert fold.feedback == "Correct. Trash hand, trash it."
        assert not evaluate_action(scenario, CALL).is_correct
        assert not evaluate_action(scenario, raise_to(6)).is_correct

    def test_speculative_from_early_position(self, make_preflop):
        assert not evaluate_action(make_preflop("9h8h", "UTG"), raise_to(4)).is_correct
        assert evaluate_action(make_preflop("9h8h", "UTG"), FOLD).is_correct
        assert evaluate_action(make_preflop("As5s", "UTG", limpers=1), CALL).is_correct

    def test_speculative_from_button(self, make_preflop):
        scenario = make_preflop("As5s", "BTN", limpers=1)
        assert evaluate_action(scenario, raise_to(5)).is_correct
        assert not evaluate_action(scenario, CALL).is_correct

    def test_check_is_unknown(self, make_preflop):
        result = evaluate_action(make_preflop("AsKs", "BTN", limpers=1), CHECK)
        assert not result.is_correct
        assert result.feedback == "Unknown action."

    def test_deterministic(self, make_preflop):
        scenario = make_preflop("JhTh", "CO", limpers=2)
        assert evaluate_action(scenario, raise_to(6)) == evaluate_action(scenario, raise_to(6))

    def test_heads_up_big_blind(self, make_preflop):
        scenario = make_preflop("QsQd", "BB", limpers=1, players=2)
        assert evaluate_action(scenario, raise_to(6)).is_correct
        assert not evaluate_action(scenario, raise_to(5)).is_correct


VALUE_RAISERS = [VillainType.PASSIVE_STATION, VillainType.NIT]

FLOP_SPOTS = {
    Holding.OVERPAIR: ("AhAd", "Ks7d2c"),
    Holding.TOP_PAIR_TOP_KICKER: ("AcKh", "Ks7d2c"),
    Holding.SET: ("7h7c", "Ks7d2c"),
    Holding.COMBO_DRAW: ("Ah9h", "JhTh8c"),
    Holding.WEAK_DRAW: ("Th5c", "Qh8h3h"),
}


class TestPostflopEvaluation:
    @pytest.mark.parametrize("villain", VALUE_RAISERS)
    @pytest.mark.parametrize("holding, fold, call, raise_", [
        (Holding.OVERPAIR, True, False, False),
        (Holding.TOP_PAIR_TOP_KICKER, True, False, False),
        (Holding.SET, False, True, True),
        (Holding.COMBO_DRAW, False, False, True),
        (Holding.WEAK_DRAW, True, False, False),
    ])
    def test_against_value_raisers(self, make_flop, villain, holding, fold, call, raise_):
        hand, board = FLOP_SPOTS[holding]
        scenario = make_flop(hand, board, villain, holding)
        assert evaluate_action(scenario, FOLD).is_correct is fold
        assert evaluate_action(scenario, CALL).is_correct is call
        assert evaluate_action(scenario, raise_to(60)).is_correct is raise_

    @pytest.mark.parametrize("holding", list(FLOP_SPOTS))
    def test_against_maniac(self, make_flop, holding):
        hand, board = FLOP_SPOTS[holding]
        scenario = make_flop(hand, board, VillainType.MANIAC, holding)
        fold = evaluate_action(scenario, FOLD)
        assert not fold.is_correct
        assert "wide range" in fold.feedback
        assert evaluate_action(scenario, CALL).is_correct
        assert evaluate_action(scenario, raise_to(60)).is_correct

    def test_feedback_names_villain(self, make_flop):
        scenario = make_flop("AhAd", "Ks7d2c", VillainType.NIT, Holding.OVERPAIR)
        assert "Nit" in evaluate_action(scenario, FOLD).feedback

    def test_unknown_villain(self, make_flop):
        scenario = make_flop("AhAd", "Ks7d2c", VillainType.UNKNOWN, Holding.OVERPAIR)
        result = evaluate_action(scenario, FOLD)
        assert not result.is_correct
        assert result.feedback == "Unknown scenario."

    def test_check_is_unknown(self, make_flop):
        scenario = make_flop("7h7c", "Ks7d2c", VillainType.MANIAC, Holding.SET)
        assert evaluate_action(scenario, CHECK).feedback == "Unknown action."

    def test_untagged_holding_is_classified(self, make_flop):
        scenario = make_flop("7h7c", "Ks7d2c", VillainType.NIT)
        assert evaluate_action(scenario, raise_to(60)).is_correct
        assert not evaluate_action(scenario, FOLD).is_correct

    def test_tag_takes_precedence(self, make_flop):
        # Kh9c is weak top pair, but the tag is what the drill dealt
        scenario = make_flop("Kh9c", "Ks7d2c", VillainType.NIT, Holding.SET)
        assert not evaluate_action(scenario, FOLD).is_correct

    def test_maniac_ignores_unclassifiable_hand(self, make_flop):
        scenario = make_flop("9c4d", "Ks7d2c", VillainType.MANIAC)
        assert evaluate_action(scenario, CALL).is_correct
        assert evaluate_action(scenario, raise_to(60)).is_correct
        fold = evaluate_action(scenario, FOLD)
        assert not fold.is_correct
        assert "Your hand" in fold.feedback

    def test_unknown_villain_with_unclassifiable_hand(self, make_flop):
        scenario = make_flop("9c4d", "Ks7d2c", VillainType.UNKNOWN)
        assert evaluate_action(scenario, CALL).feedback == "Unknown scenario."

    def test_unclassifiable_hand(self, make_flop):
        scenario = make_flop("4h3c", "KsTd8c", VillainType.PASSIVE_STATION)
        result = evaluate_action(scenario, FOLD)
        assert not result.is_correct
        assert result.feedback.startswith("Unknown holding")
