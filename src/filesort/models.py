from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .categories import Category, priority_for


def percentage(count: int, total: int) -> float:
    """Return ``count`` as a share of ``total`` rounded to one decimal place.

    An empty batch has no meaningful share, so ``total <= 0`` yields ``0.0``.
    """
    if total <= 0:
        return 0.0
    return round(count / total * 100.0, 1)


@dataclass(frozen=True, slots=True)
class ClassificationRecord:
    filename: str
    extension: str
    category: Category
    priority: int

    def __post_init__(self) -> None:
        expected = priority_for(self.category)
        if self.priority != expected:
            raise ValueError(
                f"Priority {self.priority} does not match category {self.category.value} "
                f"(expected {expected})"
            )

    @classmethod
    def for_category(cls, filename: str, extension: str, category: Category) -> "ClassificationRecord":
        return cls(
            filename=filename,
            extension=extension,
            category=category,
            priority=priority_for(category),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "extension": self.extension,
            "category": self.category.value,
            "directory": self.category.directory,
            "priority": self.priority,
        }


@dataclass(frozen=True, slots=True)
class StatisticsSummary:
    """Distribution counts for one classified batch.

    Only buckets that actually occur in the batch are present in
    ``by_category`` and ``by_priority``.
    """

    total: int = 0
    by_category: Mapping[Category, int] = field(default_factory=lambda: MappingProxyType({}))
    by_priority: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}))

    def category_percentage(self, category: Category) -> float:
        return percentage(self.by_category.get(category, 0), self.total)

    def priority_percentage(self, priority: int) -> float:
        return percentage(self.by_priority.get(priority, 0), self.total)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "by_category": {
                category.value: {
                    "count": count,
                    "percentage": self.category_percentage(category),
                }
                for category, count in self.by_category.items()
            },
            "by_priority": {
                str(priority): {
                    "count": count,
                    "percentage": self.priority_percentage(priority),
                }
                for priority, count in self.by_priority.items()
            },
        }
