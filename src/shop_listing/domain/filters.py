"""Filter state for admin list views, derived from URL query parameters.

build_filter() is total: malformed or missing values fall back to defaults
and it never raises. The status sentinel "ALL" (any case) means "no status
constraint".
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime

from src.shop_common.datetime_utils import day_bounds, parse_iso_date

STATUS_ALL = "ALL"
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 5
PER_PAGE_CHOICES: tuple[int, ...] = (5, 10, 20, 50)

# URL query keys
SEARCH_KEY = "search"
STATUS_KEY = "status"
PAGE_KEY = "page"
PER_PAGE_KEY = "perPage"
DATE_KEY = "date"


@dataclass(frozen=True)
class FilterState:
    search: str | None = None
    status: str = STATUS_ALL
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    created_on: date | None = None  # from the "date" query key

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def status_constraint(self) -> str | None:
        return None if self.status == STATUS_ALL else self.status


@dataclass(frozen=True)
class ListPredicate:
    """Row predicate shared by the count query and the slice query."""

    search: str | None = None
    status: str | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @classmethod
    def from_filter(cls, state: FilterState) -> "ListPredicate":
        created_from, created_to = (
            day_bounds(state.created_on) if state.created_on else (None, None)
        )
        return cls(
            search=state.search,
            status=state.status_constraint,
            created_from=created_from,
            created_to=created_to,
        )

    @property
    def search_pattern(self) -> str | None:
        """ILIKE pattern for a literal, case-insensitive substring match."""
        if not self.search:
            return None
        escaped = (
            self.search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        return f"%{escaped}%"


def _parse_positive_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if number >= 1 else default


def _normalize_status(value: str | None) -> str:
    if value is None or not value.strip():
        return STATUS_ALL
    return value.strip().upper()


def build_filter(raw: Mapping[str, str | None]) -> FilterState:
    search = raw.get(SEARCH_KEY) or None
    per_page = _parse_positive_int(raw.get(PER_PAGE_KEY), DEFAULT_PER_PAGE)
    if per_page not in PER_PAGE_CHOICES:
        per_page = DEFAULT_PER_PAGE
    return FilterState(
        search=search,
        status=_normalize_status(raw.get(STATUS_KEY)),
        page=_parse_positive_int(raw.get(PAGE_KEY), DEFAULT_PAGE),
        per_page=per_page,
        created_on=parse_iso_date(raw.get(DATE_KEY)),
    )
