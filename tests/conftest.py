"""
Shared fixtures for conversion tool tests.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from application.services import ConversionExecutor, ConversionService
from application.tools import ToolRegistry, build_convert_currency_tool
from domain.models.currency import ExchangeRateSnapshot


@pytest.fixture
def fixed_now():
    return datetime(2025, 9, 30, 10, 0, 0, tzinfo=UTC)


@pytest.fixture
def usd_snapshot():
    return ExchangeRateSnapshot(
        rates={"USD": 1, "EUR": 0.92, "GBP": 0.79, "JPY": 143.5},
        provider="https://www.exchangerate-api.com",
        base="USD",
        date="2024-09-30",
        time_last_updated=1727654400,
    )


@pytest.fixture
def mock_provider(usd_snapshot):
    provider = AsyncMock()
    provider.name = "mock-provider"
    provider.fetch_rates.return_value = usd_snapshot
    return provider


@pytest.fixture
def conversion_service(mock_provider, fixed_now):
    return ConversionService(mock_provider, clock=lambda: fixed_now)


@pytest.fixture
def executor(conversion_service):
    return ConversionExecutor(conversion_service)


@pytest.fixture
def registry(executor):
    registry = ToolRegistry()
    registry.register(build_convert_currency_tool(executor))
    return registry
