"""Plain-text rendering of a classified batch for log output.

Builds the results listing and the category/priority distribution blocks that
the ``plain`` output format writes through the logger.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import List, Optional

from .logging_utils import DistributionRow, LogBlockBuilder, format_count
from .models import ClassificationRecord, StatisticsSummary

LOGGER = logging.getLogger(__name__)


def has_activity(summary: StatisticsSummary) -> bool:
    return summary.total > 0


def category_rows(summary: StatisticsSummary) -> List[DistributionRow]:
    """Return ``(label, count, percentage)`` rows for each category present."""
    return [
        (category.directory, count, summary.category_percentage(category))
        for category, count in summary.by_category.items()
    ]


def priority_rows(summary: StatisticsSummary) -> List[DistributionRow]:
    return [
        (f"Priority Level {priority}", count, summary.priority_percentage(priority))
        for priority, count in sorted(summary.by_priority.items())
    ]


def format_record_line(record: ClassificationRecord) -> str:
    return f"{record.filename} → {record.category.directory} [P{record.priority}]"


def render_results_block(records: Sequence[ClassificationRecord], *, pad_top: bool = True) -> str:
    builder = LogBlockBuilder("Processing Results", pad_top=pad_top)
    builder.add_section("Files by priority", [format_record_line(record) for record in records])
    return builder.render()


def render_statistics_block(summary: StatisticsSummary, *, pad_top: bool = True) -> str:
    """Render the statistical analysis block for ``summary``.

    Args:
        summary: Statistics for one classified batch.
        pad_top: Whether to start the block with a blank line.

    Returns:
        Multi-line text with the total followed by both distributions.
    """
    builder = LogBlockBuilder("Statistical Analysis", pad_top=pad_top)
    builder.add_fields({"Total files processed": summary.total})
    builder.add_distribution("Category distribution", category_rows(summary))
    builder.add_distribution("Priority distribution", priority_rows(summary))
    return builder.render()


def log_report(
    records: Sequence[ClassificationRecord],
    summary: StatisticsSummary,
    logger: Optional[logging.Logger] = None,
) -> None:
    log = logger or LOGGER
    if has_activity(summary):
        log.info(render_results_block(records))
    else:
        log.info("No files were classified.")
    log.info(render_statistics_block(summary))
    log.info("Classified %s.", format_count(summary.total))
