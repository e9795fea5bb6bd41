"""
Test Configuration and Fixtures

Provides the async API test client and common contract fixtures.
"""

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from backend.main import app
from engines.services.monthly_schedule import MonthlySchedule


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async test client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def salary() -> Decimal:
    return Decimal("1000")


@pytest.fixture
def short_contract(salary: Decimal) -> MonthlySchedule:
    """2024-04-15 to 2024-07-10: one front-truncated and one last truncated period."""
    return MonthlySchedule(date(2024, 4, 15), date(2024, 7, 10), salary)


@pytest.fixture
def multi_year_contract(salary: Decimal) -> MonthlySchedule:
    """2023-04-15 to 2025-07-10: four periods, two of them full leave-years."""
    return MonthlySchedule(date(2023, 4, 15), date(2025, 7, 10), salary)
