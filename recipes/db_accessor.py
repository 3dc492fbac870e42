from typing import Any, List, Mapping, Tuple, Type

from django.db.models import Model, QuerySet


class DB_Accessor:
    """Shared base for repositories bound to one model."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def page(self, qs: QuerySet, *, page: int, size: int) -> Tuple[List[Model], int]:
        """
        Return (rows of the 1-based page, total rows matching qs).

        The row query is skipped when the page starts past the end.
        """
        total = qs.count()
        offset = (page - 1) * size
        if offset >= total:
            return [], total
        return list(qs[offset:offset + size]), total

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update rows matching lookup; return rows changed."""
        return self.model.objects.filter(**lookup).update(**data)

