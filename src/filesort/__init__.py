"""filesort core package.

The package is organized into focused modules:

- **categories**: Fixed extension registry and category to priority table
- **classifier**: Extension extraction and per-file classification
- **aggregator**: Priority sorting and distribution statistics for a batch
- **run_summary**: Plain-text report blocks for log output
- **summary_table**: Rich table rendering of results and distributions
- **config** / **validation**: YAML configuration for the command-line harness
- **cli**: The ``filesort`` console entry point

The core operations are ``classify_batch`` and ``report``.
"""

from .aggregator import report, sort_by_priority, summarize
from .categories import Category, lookup, priority_for
from .classifier import classify, classify_batch, extract_extension
from .models import ClassificationRecord, StatisticsSummary
from .version import __version__

__all__ = [
    "__version__",
    "Category",
    "ClassificationRecord",
    "StatisticsSummary",
    "classify",
    "classify_batch",
    "extract_extension",
    "lookup",
    "priority_for",
    "report",
    "sort_by_priority",
    "summarize",
]
