from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from rich.console import Console
from rich.table import Table

from .models import ClassificationRecord, StatisticsSummary
from .run_summary import category_rows, priority_rows

DIM_COLOR = "dim"

# Titles wrap to the table width
TABLE_MIN_WIDTH = 40

# Priority 1 is the most urgent
PRIORITY_COLORS = {
    1: "bold red",
    2: "yellow",
    3: "green",
    4: "cyan",
    5: "dim",
}


class SummaryTableRenderer:
    """Renders classified batches as Rich Tables with color-coded priorities."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the renderer.

        Args:
            console: Optional Rich Console instance. If not provided, creates a new one.
        """
        self.console = console or Console()

    @staticmethod
    def _priority_color(priority: int) -> str:
        return PRIORITY_COLORS.get(priority, DIM_COLOR)

    @staticmethod
    def _colorize_priority(priority: int) -> str:
        color = SummaryTableRenderer._priority_color(priority)
        return f"[{color}]P{priority}[/{color}]"

    @staticmethod
    def _format_share(count: int, share: float) -> str:
        if count == 0:
            return f"[{DIM_COLOR}]0 (0.0%)[/{DIM_COLOR}]"
        return f"{count} ({share:.1f}%)"

    def render_results_table(self, records: Sequence[ClassificationRecord]) -> Table:
        """Render one row per record in the order given.

        Args:
            records: Classified records, normally already sorted by priority.

        Returns:
            Rich Table instance ready to print
        """
        table = Table(title="Processing Results", show_header=True, header_style="bold", min_width=TABLE_MIN_WIDTH)
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Extension")
        table.add_column("Destination")
        table.add_column("Priority", justify="right")

        for record in records:
            table.add_row(
                record.filename,
                record.extension or f"[{DIM_COLOR}]-[/{DIM_COLOR}]",
                record.category.directory,
                self._colorize_priority(record.priority),
            )
        return table

    def render_category_table(self, summary: StatisticsSummary) -> Table:
        table = Table(title="Category Distribution", show_header=True, header_style="bold", min_width=TABLE_MIN_WIDTH)
        table.add_column("Category", style="cyan", no_wrap=True)
        table.add_column("Files", justify="right")

        for label, count, share in category_rows(summary):
            table.add_row(label, self._format_share(count, share))
        table.add_row("[bold]Total[/bold]", f"[bold]{summary.total}[/bold]")
        return table

    def render_priority_table(self, summary: StatisticsSummary) -> Table:
        table = Table(title="Priority Distribution", show_header=True, header_style="bold", min_width=TABLE_MIN_WIDTH)
        table.add_column("Priority", style="cyan", no_wrap=True)
        table.add_column("Files", justify="right")

        for (label, count, share), priority in zip(priority_rows(summary), sorted(summary.by_priority)):
            color = self._priority_color(priority)
            table.add_row(f"[{color}]{label}[/{color}]", self._format_share(count, share))
        return table

    def print_report(self, records: Sequence[ClassificationRecord], summary: StatisticsSummary) -> None:
        """Print the results table followed by both distribution tables."""
        if records:
            self.console.print(self.render_results_table(records))
            self.console.print()
        self.console.print(self.render_category_table(summary))
        self.console.print()
        self.console.print(self.render_priority_table(summary))
