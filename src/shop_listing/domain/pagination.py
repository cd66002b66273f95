"""Page arithmetic and the list result container."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def total_pages_for(total_count: int, per_page: int) -> int:
    """ceil(total_count / per_page); 0 when there are no rows."""
    if total_count <= 0:
        return 0
    return (total_count + per_page - 1) // per_page


@dataclass
class ListResult(Generic[T]):
    total_count: int
    page: int
    per_page: int
    rows: list[T] = field(default_factory=list)
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = total_pages_for(self.total_count, self.per_page)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
