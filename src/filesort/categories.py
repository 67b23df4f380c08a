"""Fixed extension registry and the category to priority table.

The registry is built once at import time and exposed as a read-only mapping.
Extensions are stored lowercase; callers normalize before calling ``lookup``.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Category(str, Enum):
    DOCUMENTS = "Documents"
    MULTIMEDIA = "Multimedia"
    AUDIO = "Audio"
    VIDEO = "Video"
    ARCHIVE = "Archive"
    SOURCE_CODE = "SourceCode"
    MISCELLANEOUS = "Miscellaneous"

    @property
    def directory(self) -> str:
        """Destination directory label shown next to classified files."""
        return _DIRECTORIES[self]

    @property
    def priority(self) -> int:
        return PRIORITIES[self]


FALLBACK_CATEGORY = Category.MISCELLANEOUS

_EXTENSION_GROUPS: dict[Category, tuple[str, ...]] = {
    Category.DOCUMENTS: ("txt", "doc", "docx", "pdf", "rtf"),
    Category.MULTIMEDIA: ("jpg", "jpeg", "png", "gif", "bmp"),
    Category.AUDIO: ("mp3", "wav", "flac", "aac"),
    Category.VIDEO: ("mp4", "avi", "mkv", "mov"),
    Category.ARCHIVE: ("zip", "rar", "7z", "tar"),
    Category.SOURCE_CODE: ("cpp", "c", "py", "java", "js", "html"),
}

EXTENSION_MAP: Mapping[str, Category] = MappingProxyType(
    {
        extension.lower(): category
        for category, extensions in _EXTENSION_GROUPS.items()
        for extension in extensions
    }
)

# 1 is the most urgent
PRIORITIES: Mapping[Category, int] = MappingProxyType(
    {
        Category.DOCUMENTS: 1,
        Category.SOURCE_CODE: 2,
        Category.MULTIMEDIA: 3,
        Category.AUDIO: 3,
        Category.VIDEO: 3,
        Category.ARCHIVE: 4,
        Category.MISCELLANEOUS: 5,
    }
)

_DIRECTORIES: Mapping[Category, str] = MappingProxyType(
    {
        Category.DOCUMENTS: "DOCUMENTS_REPOSITORY",
        Category.MULTIMEDIA: "MULTIMEDIA_ASSETS",
        Category.AUDIO: "AUDIO_LIBRARY",
        Category.VIDEO: "VIDEO_CONTENT",
        Category.ARCHIVE: "ARCHIVE_STORAGE",
        Category.SOURCE_CODE: "SOURCE_CODE",
        Category.MISCELLANEOUS: "MISCELLANEOUS_FILES",
    }
)


def lookup(extension: str) -> Category:
    """Return the category registered for ``extension`` or the fallback."""
    return EXTENSION_MAP.get(extension, FALLBACK_CATEGORY)


def priority_for(category: Category) -> int:
    return PRIORITIES[category]
