"""Tests for villain archetypes and flop holding classification."""

import random
from collections import Counter

import pytest

from isotrainer.classifier.archetypes import VillainType, draw_villain, get_exploits
from isotrainer.classifier.holdings import (
    build_holding,
    classify_holding,
    has_flush_draw,
    straight_outs,
)
from isotrainer.game.cards import parse_board, parse_hand
from isotrainer.game.models import Holding


class TestClassifyHolding:
    @pytest.mark.parametrize("hand, board, holding", [
        ("AhAd", "Ks7d2c", Holding.OVERPAIR),
        ("AcKh", "Ks7d2c", Holding.TOP_PAIR_TOP_KICKER),
        ("7h7c", "Ks7d2c", Holding.SET),
        ("QsQd", "JhTh8c", Holding.OVERPAIR),
        ("AdJs", "JhTh8c", Holding.TOP_PAIR_TOP_KICKER),
        ("Ah9h", "JhTh8c", Holding.COMBO_DRAW),
        ("Th5c", "Qh8h3h", Holding.WEAK_DRAW),
        ("Kh2h", "JhTh8c", Holding.WEAK_DRAW),
        ("AdKd", "Td6d6c", Holding.COMBO_DRAW),
    ])
    def test_known_holdings(self, hand, board, holding):
        assert classify_holding(parse_hand(hand), parse_board(board)) == holding

    def test_weak_kicker_is_not_tptk(self):
        assert classify_holding(parse_hand("Kh9c"), parse_board("Ks7d2c")) is None

    def test_kicker_skips_board_ranks(self):
        # With the ace on board the king is the best kicker
        assert (classify_holding(parse_hand("KcAh"), parse_board("As7d2c"))
                == Holding.TOP_PAIR_TOP_KICKER)

    def test_underpair_without_draw(self):
        assert classify_holding(parse_hand("5h5c"), parse_board("Ks9d2c")) is None

    def test_air(self):
        assert classify_holding(parse_hand("4h3c"), parse_board("KsTd8c")) is None

    def test_made_straight_is_not_a_draw(self):
        assert classify_holding(parse_hand("Qc9d"), parse_board("JhTs8c")) is None

    def test_needs_a_flop(self):
        assert classify_holding(parse_hand("AhAd"), ()) is None


class TestDraws:
    def test_flush_draw_needs_hole_card(self):
        assert has_flush_draw(parse_hand("Th5c"), parse_board("Qh8h3h"))
        assert not has_flush_draw(parse_hand("Tc5c"), parse_board("Qh8h3h"))

    def test_open_ender_outs(self):
        assert straight_outs(parse_hand("9c8d"), parse_board("Ts7h2c")) == {6, 11}

    def test_gutshot_outs(self):
        assert straight_outs(parse_hand("Ac4d"), parse_board("3s5h9c")) == {2}

    def test_board_only_straight_not_counted(self):
        # Board 9-T-J: hero's deuces play no part in a Q or 8 straight
        assert straight_outs(parse_hand("2c2d"), parse_board("9sThJc")) == set()


class TestBuildHolding:
    @pytest.mark.parametrize("board", ["Td6d6c", "Ks7d2c", "JhTh8c", "Qh8h3h"])
    @pytest.mark.parametrize("holding", [
        Holding.OVERPAIR, Holding.TOP_PAIR_TOP_KICKER, Holding.SET,
    ])
    def test_made_hands_classify_as_built(self, board, holding):
        cards = parse_board(board)
        hand = build_holding(holding, cards)
        assert hand is not None
        assert not set(hand.cards) & set(cards)
        assert classify_holding(hand, cards) == holding

    def test_no_overpair_to_ace_high(self):
        assert build_holding(Holding.OVERPAIR, parse_board("Ad7s2c")) is None

    def test_draw_on_paired_board(self):
        cards = parse_board("Td6d6c")
        hand = build_holding(Holding.COMBO_DRAW, cards)
        assert hand == parse_hand("AdKd")


class TestVillainType:
    def test_descriptions(self):
        for villain in VillainType:
            assert villain.description()

    def test_value_raisers(self):
        assert VillainType.NIT.raises_for_value_only
        assert VillainType.PASSIVE_STATION.raises_for_value_only
        assert not VillainType.MANIAC.raises_for_value_only

    def test_exploits(self):
        assert get_exploits(VillainType.MANIAC)
        assert get_exploits(VillainType.UNKNOWN) == ["No read - play straightforward"]

    def test_draw_weights(self):
        rng = random.Random(99)
        counts = Counter(draw_villain(rng) for _ in range(5000))
        assert set(counts) == {VillainType.PASSIVE_STATION, VillainType.MANIAC, VillainType.NIT}
        # 3:1:1 -> station about 60%
        assert 0.55 < counts[VillainType.PASSIVE_STATION] / 5000 < 0.65

    def test_custom_weights(self):
        rng = random.Random(5)
        assert {draw_villain(rng, {VillainType.NIT: 1}) for _ in range(20)} == {VillainType.NIT}
