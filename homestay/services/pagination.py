from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from homestay.core.errors import InvalidPagination

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    total: int
    result: list[T] = field(default_factory=list)


def require_positive_limit(limit: int) -> None:
    if limit < 1:
        raise InvalidPagination("limit must be a positive integer")


def page_offset(*, page: int, limit: int) -> int:
    # pages are 1-based; page <= 0 reads from the start
    return (page - 1) * limit if page > 0 else 0
