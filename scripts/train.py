#!/usr/bin/env python3
"""Drill isolation raises, over-limps and flop check-raise defense.

Deals a random spot, asks for an action and explains the verdict.
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from isotrainer.classifier.archetypes import get_exploits
from isotrainer.config import TrainerConfig
from isotrainer.game.models import ActionType, GameAction, Scenario, Stage
from isotrainer.trainer.evaluator import evaluate_action
from isotrainer.trainer.generator import generate_postflop_scenario, generate_scenario


def main():
    parser = argparse.ArgumentParser(
        description="Practice preflop isolation and flop defense decisions"
    )
    parser.add_argument(
        "-p", "--players",
        type=int,
        choices=[2, 6, 9],
        default=6,
        help="Players at the table (default: 6)",
    )
    parser.add_argument(
        "-n", "--hands",
        type=int,
        default=10,
        help="Number of spots to deal (default: 10)",
    )
    parser.add_argument(
        "--mode",
        choices=["preflop", "flop", "mixed"],
        default="preflop",
        help="Which drills to deal (default: preflop)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Seed for a reproducible session",
    )
    parser.add_argument(
        "--straddle-prob",
        type=float,
        default=0.3,
        help="Chance of a straddle at 6 and 9 handed tables (default: 0.3)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    console = Console()

    try:
        config = TrainerConfig(straddle_probability=args.straddle_prob)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1

    rng = random.Random(args.seed)
    correct = 0
    streak = 0
    best_streak = 0
    played = 0

    for number in range(1, args.hands + 1):
        flop = args.mode == "flop" or (args.mode == "mixed" and rng.random() < 0.5)
        if flop:
            scenario = generate_postflop_scenario(args.players, rng=rng, config=config)
        else:
            scenario = generate_scenario(args.players, rng=rng, config=config)

        console.print()
        _display_scenario(console, scenario, number)

        action = _prompt_action(console, scenario)
        if action is None:
            break

        result = evaluate_action(scenario, action, config)
        if result.is_correct:
            correct += 1
            streak += 1
            best_streak = max(best_streak, streak)
            console.print(f"[green]{result.feedback}[/]")
        else:
            streak = 0
            console.print(f"[red]{result.feedback}[/]")
        if result.citation:
            console.print(f"[dim italic]{result.citation}[/]")

        if scenario.stage == Stage.FLOP and not result.is_correct:
            for tip in get_exploits(scenario.villain_type):
                console.print(f"  [dim]- {tip}[/]")

        played += 1

    console.print()
    _display_summary(console, played, correct, best_streak)
    return 0


def _display_scenario(console: Console, scenario: Scenario, number: int) -> None:
    """Show one spot."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    hand = " ".join(card.pretty for card in scenario.hero_hand.cards)
    table.add_row("Hand", f"{hand}  ({scenario.hero_hand.canonical})")
    table.add_row("Position", str(scenario.hero_position))
    if scenario.stage == Stage.FLOP:
        table.add_row("Board", " ".join(card.pretty for card in scenario.board))
        table.add_row("Villain", scenario.villain_type.description())
        table.add_row("Villain action", scenario.villain_action)
    else:
        table.add_row("Limpers", str(scenario.limpers))
        table.add_row("Straddle", "Yes" if scenario.is_straddled else "No")
    table.add_row("Pot", f"{scenario.pot_size:g} BB")
    table.add_row("Stack", f"{scenario.stack_size:g} BB")

    console.print(Panel(
        table,
        title=f"Hand #{number} ({scenario.stage.value})",
        subtitle=scenario.description,
    ))


def _prompt_action(console: Console, scenario: Scenario):
    """Ask for fold/call/raise. Returns None when the user quits."""
    while True:
        answer = Prompt.ask(
            "Action [bold](f)old, (c)all, (r)aise <bb>, (q)uit[/]",
            console=console,
        ).strip()
        if answer.lower() in ("q", "quit"):
            return None

        parts = answer.split()
        if not parts:
            continue
        try:
            action_type = ActionType.from_string(parts[0])
            amount = float(parts[1]) if len(parts) > 1 else None
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            continue

        if (action_type == ActionType.RAISE and amount is None
                and scenario.stage == Stage.PREFLOP):
            console.print("[yellow]Give a raise size in BB, e.g. 'r 5'[/]")
            continue
        return GameAction(action_type, amount)


def _display_summary(console: Console, played: int, correct: int, best_streak: int) -> None:
    """Show session accuracy."""
    table = Table(title="Session")
    table.add_column("Hands", justify="right")
    table.add_column("Correct", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_column("Best streak", justify="right")

    accuracy = (correct / played * 100) if played else 0.0
    table.add_row(str(played), str(correct), f"{accuracy:.0f}%", str(best_streak))
    console.print(table)


if __name__ == "__main__":
    sys.exit(main())
