"""API test infrastructure -- async httpx client against the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def app():
    from app.main import create_app

    application = create_app()

    # Reset rate limiter between tests
    from app.core.rate_limit import simulation_limiter
    simulation_limiter.reset()

    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

@pytest.fixture
def household_body() -> dict:
    """Solar household with a battery and three appliances, fixed weather."""
    return {
        "energy_sources": [
            {"type": "solar", "capacity_kw": 5.0, "is_active": True},
            {"type": "wind", "capacity_kw": 2.0, "is_active": False},
        ],
        "battery_capacity_kwh": 10.0,
        "appliances": [
            {
                "id": "wm",
                "name": "Washing machine",
                "power_kw": 2.0,
                "duration_h": 2,
                "start_hour": 20,
                "flexible": True,
            },
            {
                "id": "ev",
                "name": "Electric car",
                "power_kw": 7.0,
                "duration_h": 4,
                "start_hour": 23,
                "flexible": True,
            },
            {
                "id": "base",
                "name": "Base load",
                "power_kw": 0.3,
                "duration_h": 24,
                "start_hour": 0,
                "flexible": False,
            },
        ],
        "seed": 42,
    }
