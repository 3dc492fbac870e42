"""Paged result envelope and page-window helpers."""

from dataclasses import dataclass, field
from typing import Any, List

from django.conf import settings

from recipes.exceptions import InvalidInput


@dataclass
class PageResult:
    """One page of items plus the total size of the filtered set."""
    items: List[Any] = field(default_factory=list)
    page: int = 1
    size: int = 0
    total: int = 0

    @property
    def pages(self) -> int:
        """Number of pages needed to show `total` items."""
        if self.size <= 0:
            return 0
        return (self.total + self.size - 1) // self.size


def validate_page(page, size):
    """Return (page, size) as ints or raise InvalidInput for malformed values."""
    try:
        page, size = int(page), int(size)
    except (TypeError, ValueError):
        raise InvalidInput("page and size must be integers")
    if page < 1 or size <= 0:
        raise InvalidInput("page must be >= 1 and size must be > 0")
    return page, size


def clamp_page(page, size, *, max_size=None):
    """Coerce page to >= 1 and size into [1, max_size] instead of rejecting."""
    max_size = max_size or getattr(settings, "RECIPES_FEED_MAX_PAGE_SIZE", 200)
    try:
        page = int(page)
    except (TypeError, ValueError):
        page = 1
    try:
        size = int(size)
    except (TypeError, ValueError):
        size = max_size
    return max(1, page), min(max(1, size), max_size)

