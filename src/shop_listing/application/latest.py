"""Latest-filter-wins gate for overlapping list fetches.

When the filter changes while an earlier fetch is still in flight, the late
response must not overwrite the newer one. Each fetch takes a ticket; only
the result of the most recent ticket is accepted.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from src.shop_listing.domain.filters import FilterState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestResultGate(Generic[T]):
    def __init__(self) -> None:
        self._ticket = 0
        self._filter: FilterState | None = None
        self._latest: T | None = None

    @property
    def current_filter(self) -> FilterState | None:
        return self._filter

    @property
    def latest(self) -> T | None:
        return self._latest

    def begin(self, state: FilterState) -> int:
        self._ticket += 1
        self._filter = state
        return self._ticket

    def accept(self, ticket: int, result: T) -> T | None:
        """Store and return ``result`` if ``ticket`` is still current, else None."""
        if ticket != self._ticket:
            logger.debug("Discarding stale list result (ticket %d, current %d)", ticket, self._ticket)
            return None
        self._latest = result
        return result

    async def run(
        self, state: FilterState, fetch: Callable[[FilterState], Awaitable[T]]
    ) -> T | None:
        ticket = self.begin(state)
        result = await fetch(state)
        return self.accept(ticket, result)
