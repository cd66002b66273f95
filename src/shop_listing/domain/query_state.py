"""URL query-state encoding.

The query string is the external handle of a list view's filter state.
Encoding is deterministic: keys are sorted and empty values dropped, so two
encodes of the same logical state are byte-identical. That matters for the
dialog toggles (productId / withdrawId), which are detected by reading an id
back out of the query string.

Navigation itself is the caller's business; these functions only build URLs.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit

from src.shop_listing.domain.filters import PAGE_KEY

QueryValue = str | int | None

PRODUCT_ID_KEY = "productId"
WITHDRAW_ID_KEY = "withdrawId"
DIALOG_KEYS: tuple[str, ...] = (PRODUCT_ID_KEY, WITHDRAW_ID_KEY)


def _split(current: str | Mapping[str, QueryValue]) -> tuple[str, dict[str, QueryValue]]:
    if isinstance(current, str):
        parts = urlsplit(current)
        return parts.path, dict(parse_qsl(parts.query, keep_blank_values=True))
    return "", dict(current)


def encode_filter(
    current: str | Mapping[str, QueryValue],
    patch: Mapping[str, QueryValue],
    path: str | None = None,
) -> str:
    """Merge ``patch`` over ``current`` and serialize it as ``path?query``.

    ``current`` is either a query mapping or a previously encoded URL (whose
    path is reused unless ``path`` is given). Keys whose merged value is None
    or "" are dropped.
    """
    base_path, merged = _split(current)
    merged.update(patch)
    query = sorted(
        (key, str(value)) for key, value in merged.items() if value is not None and value != ""
    )
    target = base_path if path is None else path
    if not query:
        return target
    return f"{target}?{urlencode(query)}"


def selected_id(query: Mapping[str, QueryValue], key: str) -> str | None:
    """Id carried in the query string that opens a confirmation dialog."""
    value = query.get(key)
    if value is None or value == "":
        return None
    return str(value)


def dialog_url(path: str, query: Mapping[str, QueryValue], key: str, value: str | None) -> str:
    """URL that opens (value set) or closes (value None) a row's dialog."""
    return encode_filter(query, {key: value}, path=path)


@dataclass(frozen=True)
class PaginationLinks:
    first: str | None
    prev: str | None
    next: str | None
    last: str | None


def pagination_links(
    path: str, query: Mapping[str, QueryValue], page: int, total_pages: int
) -> PaginationLinks:
    """Navigation URLs for a list page; edges without a target are None.

    Page links never carry a dialog id, so paging closes any open dialog.
    """
    closed: dict[str, QueryValue] = {key: None for key in DIALOG_KEYS}

    def _to(target: int) -> str:
        return encode_filter(query, {**closed, PAGE_KEY: target}, path=path)

    if total_pages <= 0:
        return PaginationLinks(first=None, prev=None, next=None, last=None)
    return PaginationLinks(
        first=_to(1),
        prev=_to(page - 1) if page > 1 else None,
        next=_to(page + 1) if page < total_pages else None,
        last=_to(total_pages),
    )
