"""Random training scenario generation.

Both entry points draw every random number from an explicit
``random.Random``, so passing the same seed replays the same scenario.
"""

import logging
import random
from typing import Optional, Union

from isotrainer.classifier.archetypes import VillainType, draw_villain
from isotrainer.classifier.holdings import build_holding, classify_holding
from isotrainer.config import DEFAULT_CONFIG, TrainerConfig
from isotrainer.game.cards import Card, Hand, parse_board, parse_hand, random_hand
from isotrainer.game.models import (
    BoardTexture,
    Holding,
    PlayerCount,
    Position,
    Scenario,
    Stage,
)
from isotrainer.game.ranges import all_playable_expressions, is_hand_in_range

logger = logging.getLogger(__name__)


# One fixed exemplar board per texture
TEXTURE_BOARDS: dict[BoardTexture, tuple[Card, ...]] = {
    BoardTexture.DRY: parse_board("Ks7d2c"),       # King high rainbow, disconnected
    BoardTexture.WET: parse_board("JhTh8c"),       # Connected with a flush draw
    BoardTexture.PAIRED: parse_board("Td6d6c"),
    BoardTexture.MONOTONE: parse_board("Qh8h3h"),
}

# Archetypal holdings dealt to hero on each texture. Textures missing here
# are dealt from the ladder in TrainerConfig.ladder_weights.
HOLDING_MENUS: dict[BoardTexture, list[tuple[str, Holding]]] = {
    BoardTexture.DRY: [
        ("AhAd", Holding.OVERPAIR),
        ("AcKh", Holding.TOP_PAIR_TOP_KICKER),
        ("7h7c", Holding.SET),
    ],
    BoardTexture.WET: [
        ("QsQd", Holding.OVERPAIR),
        ("AdJs", Holding.TOP_PAIR_TOP_KICKER),
        ("8d8s", Holding.SET),
        ("Ah9h", Holding.COMBO_DRAW),   # Nut flush draw + open-ender
    ],
    BoardTexture.MONOTONE: [
        ("KsKc", Holding.OVERPAIR),
        ("AsQd", Holding.TOP_PAIR_TOP_KICKER),
        ("3s3d", Holding.SET),
        ("Th5c", Holding.WEAK_DRAW),    # Lone low flush draw
    ],
}

VILLAIN_ACTION = "Check-Raise"


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def _draw_limpers(
    hero_position: Position,
    player_count: PlayerCount,
    rng: random.Random,
    config: TrainerConfig,
) -> int:
    if player_count == PlayerCount.HEADS_UP:
        # SB acts first preflop heads-up, so only a BB hero can face a limp
        if hero_position == Position.BB:
            return 1 if rng.random() < config.heads_up_limp_probability else 0
        return 0

    limpers = rng.randint(0, player_count.max_limpers)
    # Bias towards spots with action in front
    if limpers == 0 and rng.random() < config.limper_reroll_probability:
        limpers = 1
    return limpers


def sample_hand_in_range(
    range_expr: str,
    rng: random.Random,
    max_attempts: int = 100,
) -> Optional[Hand]:
    """
    Rejection-sample a random hand covered by a range expression.

    Args:
        range_expr: Range notation to fit
        rng: Random source
        max_attempts: Hands to try before giving up

    Returns:
        A matching hand, or None if none was found in time
    """
    for _ in range(max_attempts):
        hand = random_hand(rng)
        if is_hand_in_range(hand, range_expr):
            return hand
    return None


def generate_scenario_hand(
    rng: random.Random,
    config: TrainerConfig = DEFAULT_CONFIG,
) -> Hand:
    """
    Deal hero's preflop hand.

    Roughly half the time the hand is fitted to a random range-table entry
    so the drill sees playable hands; otherwise it is a uniformly random
    hand, which is mostly trash and trains folding.
    """
    if rng.random() < config.playable_hand_share:
        range_expr = rng.choice(all_playable_expressions())
        hand = sample_hand_in_range(range_expr, rng, config.max_sampling_attempts)
        if hand is not None:
            return hand
        logger.debug(
            "No hand fitted %r in %d attempts, dealing a random hand",
            range_expr, config.max_sampling_attempts,
        )
    return random_hand(rng)


def describe_preflop(hero_position: Position, limpers: int, is_straddled: bool) -> str:
    noun = "limper" if limpers == 1 else "limpers"
    verb = "is" if limpers == 1 else "are"
    description = f"You are {hero_position}. There {verb} {limpers} {noun} before you."
    if is_straddled:
        description += " UTG has straddled."
    return description


def generate_scenario(
    player_count: Union[int, PlayerCount] = PlayerCount.SIX_MAX,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    config: Optional[TrainerConfig] = None,
) -> Scenario:
    """
    Generate a random preflop isolation/over-limp spot.

    Args:
        player_count: Table size (2, 6 or 9)
        rng: Random source; takes precedence over seed
        seed: Seed for a fresh random source when rng is not given
        config: Generation constants

    Returns:
        A preflop Scenario
    """
    count = PlayerCount.coerce(player_count)
    rng = _resolve_rng(rng, seed)
    config = config or DEFAULT_CONFIG

    hero_position = rng.choice(Position.for_table(count))
    limpers = _draw_limpers(hero_position, count, rng, config)

    is_straddled = count > PlayerCount.HEADS_UP and rng.random() < config.straddle_probability
    stack_size = config.straddle_stack if is_straddled else config.base_stack

    hero_hand = generate_scenario_hand(rng, config)

    scenario = Scenario(
        hero_position=hero_position,
        hero_hand=hero_hand,
        limpers=limpers,
        is_straddled=is_straddled,
        # SB + BB, one per limper, two for the straddle
        pot_size=1.5 + limpers + (2 if is_straddled else 0),
        stack_size=stack_size,
        player_count=count,
        description=describe_preflop(hero_position, limpers, is_straddled),
    )
    logger.debug("Generated preflop scenario: %s %s", hero_hand.canonical, scenario.description)
    return scenario


def _ladder_holding(
    board: tuple[Card, ...],
    rng: random.Random,
    config: TrainerConfig,
) -> tuple[Hand, Holding]:
    rungs = list(config.ladder_weights)
    rung = rng.choices(rungs, weights=[config.ladder_weights[h] for h in rungs], k=1)[0]

    hand = build_holding(rung, board)
    if hand is None:
        # e.g. no overpair exists to an ace-high board
        rung = Holding.SET
        hand = build_holding(rung, board)

    if rung.is_draw:
        rung = classify_holding(hand, board) or Holding.WEAK_DRAW
    return hand, rung


def deal_postflop_holding(
    texture: BoardTexture,
    rng: random.Random,
    config: TrainerConfig = DEFAULT_CONFIG,
) -> tuple[Hand, Holding]:
    """Deal hero's flop hand for a texture along with its holding tag."""
    menu = HOLDING_MENUS.get(texture)
    if menu:
        hand_str, holding = rng.choice(menu)
        return parse_hand(hand_str), holding
    return _ladder_holding(TEXTURE_BOARDS[texture], rng, config)


def describe_postflop(villain: VillainType, texture: BoardTexture) -> str:
    return (
        f"You raised preflop from the Button and continuation bet a {texture.value} flop. "
        f"The {villain.value} check-raised you."
    )


def generate_postflop_scenario(
    player_count: Union[int, PlayerCount] = PlayerCount.SIX_MAX,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    config: Optional[TrainerConfig] = None,
) -> Scenario:
    """
    Generate a flop spot: hero c-bet on the button and got check-raised.

    Args:
        player_count: Table size (2, 6 or 9)
        rng: Random source; takes precedence over seed
        seed: Seed for a fresh random source when rng is not given
        config: Generation constants

    Returns:
        A flop Scenario tagged with villain type, texture and hero's holding
    """
    count = PlayerCount.coerce(player_count)
    rng = _resolve_rng(rng, seed)
    config = config or DEFAULT_CONFIG

    villain = draw_villain(rng, config.villain_weights)
    texture = rng.choice(list(BoardTexture))
    hero_hand, holding = deal_postflop_holding(texture, rng, config)

    scenario = Scenario(
        hero_position=Position.BTN,
        hero_hand=hero_hand,
        limpers=0,
        is_straddled=False,
        pot_size=config.postflop_pot,
        stack_size=config.postflop_stack,
        player_count=count,
        description=describe_postflop(villain, texture),
        stage=Stage.FLOP,
        board=TEXTURE_BOARDS[texture],
        villain_type=villain,
        villain_action=VILLAIN_ACTION,
        board_texture=texture,
        holding=holding,
    )
    logger.debug(
        "Generated flop scenario: %s on %s vs %s (%s)",
        hero_hand, " ".join(str(c) for c in scenario.board), villain.value, holding.value,
    )
    return scenario
