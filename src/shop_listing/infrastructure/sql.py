"""SQL fragments shared by every list repository.

The count query and the slice query of a list must filter with the same
WHERE clause; repositories build both statements from list_where_clause().

asyncpg NULL parameter pattern: CAST(:param AS TYPE) IS NULL required for None values.
"""

from typing import Any

from src.shop_listing.domain.filters import ListPredicate

LIST_ORDER_BY = "ORDER BY created_at DESC, id DESC"


def list_where_clause(name_column: str, status_column: str = "status") -> str:
    """WHERE body: case-insensitive name substring, status equality, created_at day."""
    return f"""
        (CAST(:search_pattern AS TEXT) IS NULL
         OR {name_column} ILIKE CAST(:search_pattern AS TEXT))
        AND (CAST(:status AS TEXT) IS NULL OR {status_column} = CAST(:status AS TEXT))
        AND (CAST(:created_from AS TIMESTAMPTZ) IS NULL
             OR created_at >= CAST(:created_from AS TIMESTAMPTZ))
        AND (CAST(:created_to AS TIMESTAMPTZ) IS NULL
             OR created_at < CAST(:created_to AS TIMESTAMPTZ))
    """


def predicate_params(predicate: ListPredicate) -> dict[str, Any]:
    return {
        "search_pattern": predicate.search_pattern,
        "status": predicate.status,
        "created_from": predicate.created_from,
        "created_to": predicate.created_to,
    }


def slice_params(predicate: ListPredicate, offset: int, limit: int) -> dict[str, Any]:
    params = predicate_params(predicate)
    params.update({"offset": offset, "limit": limit})
    return params
