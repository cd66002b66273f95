"""Unit tests for shop_listing fetch_page and LatestResultGate."""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.shop_common.errors import QueryFailedError
from src.shop_listing.application.latest import LatestResultGate
from src.shop_listing.application.service import fetch_page
from src.shop_listing.domain.filters import FilterState, build_filter


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def mock_repo():
    return MagicMock()


class TestFetchPage:
    @pytest.mark.asyncio
    async def test_second_page_of_twelve(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=12)
        mock_repo.find_slice = AsyncMock(return_value=[f"P{i}" for i in range(5, 10)])

        result = await fetch_page(db, mock_repo, build_filter({"page": "2", "perPage": "5"}))

        assert result.total_count == 12
        assert result.total_pages == 3
        assert result.page == 2
        assert len(result.rows) == 5
        _, predicate, offset, limit = mock_repo.find_slice.call_args.args
        assert (offset, limit) == (5, 5)

    @pytest.mark.asyncio
    async def test_count_and_slice_share_predicate(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=1)
        mock_repo.find_slice = AsyncMock(return_value=["row"])

        await fetch_page(db, mock_repo, build_filter({"search": "shirt", "status": "DRAFT"}))

        count_predicate = mock_repo.count.call_args.args[1]
        slice_predicate = mock_repo.find_slice.call_args.args[1]
        assert count_predicate == slice_predicate
        assert count_predicate.search == "shirt"
        assert count_predicate.status == "DRAFT"

    @pytest.mark.asyncio
    async def test_status_all_means_no_constraint(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=0)
        mock_repo.find_slice = AsyncMock(return_value=[])

        result = await fetch_page(db, mock_repo, build_filter({"status": "ALL"}))

        assert mock_repo.count.call_args.args[1].status is None
        assert result.total_pages == 0
        assert result.rows == []

    @pytest.mark.asyncio
    async def test_page_beyond_range_returns_empty_rows(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=3)
        mock_repo.find_slice = AsyncMock(return_value=[])

        result = await fetch_page(db, mock_repo, build_filter({"page": "9"}))

        assert result.page == 9
        assert result.total_pages == 1
        assert result.rows == []
        mock_repo.find_slice.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_past_bigint_offset_skips_slice(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=12)
        mock_repo.find_slice = AsyncMock(return_value=[])

        result = await fetch_page(db, mock_repo, build_filter({"page": "99999999999999999999"}))

        assert result.rows == []
        assert result.total_pages == 3
        mock_repo.find_slice.assert_not_called()

    @pytest.mark.asyncio
    async def test_last_calendar_day_filter(self, db, mock_repo):
        mock_repo.count = AsyncMock(return_value=1)
        mock_repo.find_slice = AsyncMock(return_value=["row"])

        result = await fetch_page(db, mock_repo, build_filter({"date": "9999-12-31"}))

        predicate = mock_repo.count.call_args.args[1]
        assert predicate.created_to is None
        assert result.rows == ["row"]

    @pytest.mark.asyncio
    async def test_db_error_raises_query_failed(self, db, mock_repo):
        mock_repo.count = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))
        mock_repo.find_slice = AsyncMock()

        with pytest.raises(QueryFailedError):
            await fetch_page(db, mock_repo, FilterState())
        mock_repo.find_slice.assert_not_called()


class TestLatestResultGate:
    def test_stale_ticket_discarded(self):
        gate: LatestResultGate[str] = LatestResultGate()
        old = gate.begin(build_filter({"search": "a"}))
        new = gate.begin(build_filter({"search": "ab"}))

        assert gate.accept(new, "new rows") == "new rows"
        assert gate.accept(old, "old rows") is None
        assert gate.latest == "new rows"
        assert gate.current_filter.search == "ab"

    def test_out_of_order_old_first(self):
        gate: LatestResultGate[str] = LatestResultGate()
        old = gate.begin(FilterState(page=1))
        new = gate.begin(FilterState(page=2))

        assert gate.accept(old, "page 1") is None
        assert gate.latest is None
        assert gate.accept(new, "page 2") == "page 2"

    @pytest.mark.asyncio
    async def test_run_slow_earlier_fetch_loses(self):
        gate: LatestResultGate[str] = LatestResultGate()
        release_slow = asyncio.Event()

        async def fetch(state: FilterState) -> str:
            if state.search == "slow":
                await release_slow.wait()
            return f"rows for {state.search}"

        slow = asyncio.create_task(gate.run(FilterState(search="slow"), fetch))
        await asyncio.sleep(0)
        fast = await gate.run(FilterState(search="fast"), fetch)
        release_slow.set()

        assert fast == "rows for fast"
        assert await slow is None
        assert gate.latest == "rows for fast"
