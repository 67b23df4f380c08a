"""Extension extraction and per-file classification.

Every function here is total: malformed, empty or extension-less filenames
classify as ``Category.MISCELLANEOUS`` with the lowest priority instead of
raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable, List, Optional

from .categories import lookup
from .models import ClassificationRecord

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, ClassificationRecord], None]


def extract_extension(filename: str) -> str:
    """Return the lowercased suffix after the last dot, or ``""``.

    Only the last dot counts, so ``archive.tar.gz`` yields ``gz``. A missing
    dot or a trailing dot yields an empty extension.
    """
    dot = filename.rfind(".")
    if dot == -1 or dot == len(filename) - 1:
        return ""
    return filename[dot + 1 :].lower()


def classify(filename: str) -> ClassificationRecord:
    extension = extract_extension(filename)
    record = ClassificationRecord.for_category(filename, extension, lookup(extension))
    LOGGER.debug(
        "Classified %r as %s (priority %d)",
        filename,
        record.category.value,
        record.priority,
    )
    return record


def classify_batch(
    filenames: Iterable[str],
    progress: Optional[ProgressCallback] = None,
) -> List[ClassificationRecord]:
    """Classify ``filenames`` in order, one record per input.

    Args:
        filenames: Batch of filenames to classify.
        progress: Optional callback invoked after each record as
            ``progress(completed, total, record)``.

    Returns:
        Records in the same order as the input filenames.
    """
    batch = list(filenames)
    total = len(batch)
    records: List[ClassificationRecord] = []
    for index, filename in enumerate(batch, start=1):
        record = classify(filename)
        records.append(record)
        if progress is not None:
            progress(index, total, record)
    return records
