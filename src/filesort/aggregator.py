"""Batch-level reductions over classified records.

Sorting and summarizing need the complete batch, so both run as a single pass
after classification has finished.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from types import MappingProxyType
from typing import List, Tuple

from .categories import Category
from .models import ClassificationRecord, StatisticsSummary, percentage

__all__ = ["percentage", "report", "sort_by_priority", "summarize"]


def sort_by_priority(records: Iterable[ClassificationRecord]) -> List[ClassificationRecord]:
    """Return records ordered by ascending priority.

    ``sorted`` is stable, so records sharing a priority keep their input order.
    """
    return sorted(records, key=lambda record: record.priority)


def summarize(records: Iterable[ClassificationRecord]) -> StatisticsSummary:
    by_category: Counter = Counter()
    by_priority: Counter = Counter()
    total = 0
    for record in records:
        by_category[record.category] += 1
        by_priority[record.priority] += 1
        total += 1
    return StatisticsSummary(
        total=total,
        by_category=MappingProxyType(
            {category: by_category[category] for category in Category if category in by_category}
        ),
        by_priority=MappingProxyType(dict(sorted(by_priority.items()))),
    )


def report(
    records: Iterable[ClassificationRecord],
) -> Tuple[List[ClassificationRecord], StatisticsSummary]:
    """Sort a classified batch and compute its distribution statistics."""
    batch = list(records)
    return sort_by_priority(batch), summarize(batch)
