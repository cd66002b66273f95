"""The application module imports cleanly and mounts every router."""
from fastapi.routing import APIRoute

from src.main import app


def _routes() -> set[tuple[str, str]]:
    return {
        (method, route.path)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }


def test_all_endpoints_mounted():
    routes = _routes()
    for expected in [
        ("GET", "/health"),
        ("GET", "/api/v1/products"),
        ("DELETE", "/api/v1/products"),
        ("GET", "/api/v1/products/catalog"),
        ("GET", "/api/v1/products/recent"),
        ("GET", "/api/v1/coupons"),
        ("POST", "/api/v1/orders"),
        ("GET", "/api/v1/orders"),
        ("GET", "/api/v1/orders/{order_id}"),
        ("GET", "/api/v1/withdraws"),
        ("POST", "/api/v1/withdraws/approve"),
    ]:
        assert expected in routes


def test_filter_state_accepts_a_day():
    from datetime import date

    from src.shop_listing.domain.filters import FilterState

    assert FilterState(created_on=date(2024, 5, 1)).created_on == date(2024, 5, 1)
