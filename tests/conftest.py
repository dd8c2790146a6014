"""Test configuration and fixtures.

This module provides pytest configuration and fixtures for the Jobly
data-access layer: a mock asyncpg-style database and settings isolation.
"""

from collections.abc import Generator
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from jobly.core.config import clear_settings_cache


@pytest.fixture
def mock_db() -> MagicMock:
    """Create mock database connection for testing."""
    db = MagicMock()
    db.fetchrow = AsyncMock(return_value=None)
    db.fetch = AsyncMock(return_value=[])
    return db


@pytest.fixture
def sample_job_row() -> dict[str, Any]:
    """A job row shaped like the RETURNING list of the job queries."""
    return {
        "id": 7,
        "title": "Conservator, furniture",
        "salary": 110000,
        "equity": Decimal("0.05"),
        "companyHandle": "watson-davis",
    }


@pytest.fixture
def sample_company_row() -> dict[str, Any]:
    """A company row shaped like the RETURNING list of the company queries."""
    return {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "description": "Year join loss.",
        "numEmployees": 819,
        "logoUrl": "/logos/logo3.png",
    }


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset cached settings and keep the host environment out of tests."""
    for name in (
        "DATABASE_URL",
        "DATABASE_POOL_MIN",
        "DATABASE_POOL_MAX",
        "DATABASE_COMMAND_TIMEOUT",
        "API_ENV",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
