"""Pytest configuration and fixtures."""

import random

import pytest

from isotrainer.game.cards import parse_board, parse_hand
from isotrainer.game.models import PlayerCount, Position, Scenario, Stage


@pytest.fixture
def rng():
    """A seeded random source so failures can be replayed."""
    return random.Random(1234)


@pytest.fixture
def make_preflop():
    """Build preflop scenarios by hand, e.g. make_preflop("AsKs", "BTN", limpers=1)."""

    def _make(hand, position="BTN", limpers=0, straddled=False, players=6):
        return Scenario(
            hero_position=Position.from_string(position),
            hero_hand=parse_hand(hand),
            limpers=limpers,
            is_straddled=straddled,
            pot_size=1.5 + limpers + (2 if straddled else 0),
            stack_size=50.0 if straddled else 100.0,
            player_count=PlayerCount(players),
            description="test spot",
        )

    return _make


@pytest.fixture
def make_flop():
    """Build flop scenarios by hand, e.g. make_flop("AhAd", "Ks7d2c", villain)."""

    def _make(hand, board, villain, holding=None):
        return Scenario(
            hero_position=Position.BTN,
            hero_hand=parse_hand(hand),
            limpers=0,
            is_straddled=False,
            pot_size=20.0,
            stack_size=100.0,
            player_count=PlayerCount.SIX_MAX,
            description="test flop",
            stage=Stage.FLOP,
            board=parse_board(board),
            villain_type=villain,
            villain_action="Check-Raise",
            holding=holding,
        )

    return _make
