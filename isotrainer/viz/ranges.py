"""Range display and visualization utilities."""

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from isotrainer.game.ranges import RANGE_TABLE, RangeCategory, expand_range


# Standard hand matrix layout (13x13)
RANKS = "AKQJT98765432"

# Pre-computed hand matrix positions
# Pairs on diagonal, suited above, offsuit below
HAND_MATRIX = []
for i, r1 in enumerate(RANKS):
    row = []
    for j, r2 in enumerate(RANKS):
        if i == j:
            row.append(f"{r1}{r2}")  # Pair
        elif i < j:
            row.append(f"{r1}{r2}s")  # Suited (above diagonal)
        else:
            row.append(f"{r2}{r1}o")  # Offsuit (below diagonal)
    HAND_MATRIX.append(row)

HAND_INDEX = {
    hand: (i, j)
    for i, row in enumerate(HAND_MATRIX)
    for j, hand in enumerate(row)
}

# Cell colours per category, raise categories warm and limp categories cool
CATEGORY_COLORS = {
    RangeCategory.ISOLATION_VALUE: "red",
    RangeCategory.ISOLATION_MEDIUM: "dark_orange",
    RangeCategory.ISOLATION_SUITED_BROADWAY: "yellow",
    RangeCategory.ISOLATION_SPECULATIVE: "magenta",
    RangeCategory.OVERLIMP_SMALL_PAIR: "blue",
    RangeCategory.OVERLIMP_SUITED_CONNECTOR: "green",
    RangeCategory.OVERLIMP_NUT_FLUSH: "cyan",
}


@dataclass
class CellInfo:
    """What the grid knows about one hand class."""
    hand: str
    category: Optional[RangeCategory] = None


class RangeDisplay:
    """
    Display poker ranges as 13x13 matrix.

    Each hand class is marked with the first category that covers it, so
    the table's priority order shows through in the grid.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.membership = np.zeros((13, 13), dtype=bool)
        self.cells: dict[str, CellInfo] = {
            hand: CellInfo(hand=hand) for hand in HAND_INDEX
        }

    def mark(self, hand: str, category: Optional[RangeCategory] = None) -> None:
        """Mark one hand class as in range."""
        if hand not in HAND_INDEX:
            return
        i, j = HAND_INDEX[hand]
        self.membership[i, j] = True
        if self.cells[hand].category is None:
            self.cells[hand].category = category

    def load_from_range_string(
        self,
        range_str: str,
        category: Optional[RangeCategory] = None,
    ) -> None:
        """
        Load range from comma separated notation.

        Examples:
            "AA,KK,QQ" - specific hands
            "QQ+,AJo+" - plus notation
            "22-77,45s-78s" - dash notation
        """
        for part in range_str.split(","):
            part = part.strip()
            if not part:
                continue
            for hand in expand_range(part):
                self.mark(hand, category)

    def load_category(self, category: RangeCategory) -> None:
        """Load every expression of a range table category."""
        for expr in RANGE_TABLE[category]:
            self.load_from_range_string(expr, category)

    def load_categories(self, categories: Iterable[RangeCategory]) -> None:
        for category in categories:
            self.load_category(category)

    @property
    def combo_count(self) -> int:
        """Number of two-card combinations in the loaded range."""
        # Pairs: 6 combos, suited: 4, offsuit: 12
        weights = np.full((13, 13), 12)
        weights[np.triu_indices(13, k=1)] = 4
        np.fill_diagonal(weights, 6)
        return int((weights * self.membership).sum())

    def in_range(self, hand: str) -> bool:
        i, j = HAND_INDEX[hand]
        return bool(self.membership[i, j])

    def build_table(self, title: str = "Range") -> Table:
        """Build the rich table for the current range."""
        table = Table(title=title, show_header=True, header_style="bold")

        # Add column headers
        table.add_column("", style="bold")
        for rank in RANKS:
            table.add_column(rank, justify="center")

        # Add rows
        for i, rank in enumerate(RANKS):
            row = [rank]
            for j in range(13):
                hand = HAND_MATRIX[i][j]
                cell = self.cells[hand]

                if not self.membership[i, j]:
                    style = Style(bgcolor="grey30", color="grey50")
                else:
                    color = CATEGORY_COLORS.get(cell.category, "green")
                    style = Style(bgcolor=color, color="black")

                row.append(Text(hand.center(3), style=style))

            table.add_row(*row)

        return table

    def display_terminal(self, title: str = "Range") -> None:
        """Display range in terminal using rich."""
        self.console.print(self.build_table(title))

        legend = sorted(
            {c.category for c in self.cells.values() if c.category is not None},
            key=list(RangeCategory).index,
        )
        if legend:
            self.console.print("\nLegend: ", end="")
            for category in legend:
                color = CATEGORY_COLORS[category]
                self.console.print(f"[{color}]{category.label}[/] ", end="")
            self.console.print()
        self.console.print(f"{self.combo_count} combos")

    def plot(
        self,
        title: str = "Range",
        figsize: tuple[int, int] = (10, 10),
        save_path: Optional[str] = None,
    ) -> None:
        """
        Plot range as a grid using matplotlib.

        Args:
            title: Plot title
            figsize: Figure size
            save_path: Optional path to save figure
        """
        # Plotting is optional; install the "viz" extra
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=figsize)
        ax.imshow(self.membership.astype(float), cmap="Greens", vmin=0, vmax=1)

        ax.set_xticks(np.arange(13))
        ax.set_yticks(np.arange(13))
        ax.set_xticklabels(list(RANKS))
        ax.set_yticklabels(list(RANKS))

        for i in range(13):
            for j in range(13):
                text_color = "white" if self.membership[i, j] else "black"
                ax.text(j, i, HAND_MATRIX[i][j], ha="center", va="center",
                        color=text_color, fontsize=8)

        ax.set_title(title)

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches="tight")
        else:
            plt.show()


def display_range(range_str: str, title: str = "Range") -> None:
    """
    Convenience function to display a range.

    Args:
        range_str: Comma separated range notation
        title: Display title
    """
    display = RangeDisplay()
    display.load_from_range_string(range_str)
    display.display_terminal(title=title)


def display_strategy(title: str = "Preflop Strategy") -> None:
    """Display the whole range table, raise categories taking precedence."""
    display = RangeDisplay()
    display.load_categories(RangeCategory)
    display.display_terminal(title=title)
