"""Shared pytest fixtures for stockr tests."""

import asyncio

import httpx
import pytest
from loguru import logger

from stockr.client import RapidApiClient
from stockr.models import ChartSeries, Stock


@pytest.fixture(autouse=True)
def disable_loguru():
    """Disable loguru output during tests for cleaner output."""
    logger.disable("stockr")
    yield
    logger.enable("stockr")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_client():
    """Build a RapidApiClient whose requests are answered by ``handler``."""

    def _make(handler) -> RapidApiClient:
        return RapidApiClient(
            api_key="test-key",
            api_host="test-host.example.com",
            transport=httpx.MockTransport(handler),
        )

    return _make


def make_stock(symbol: str, name: str | None = None, price: float = 100.0) -> Stock:
    return Stock(
        name=name or f"{symbol} Inc.",
        symbol=symbol,
        price=price,
        change_percent=1.5,
        open=price - 1,
        high=price + 2,
        low=price - 2,
        volume=1_000_000,
    )


class FakeQuoteFetcher:
    """Quote fetcher returning canned results, optionally held behind a gate."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.responses: dict[str, list[Stock] | Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}

    async def search(self, query: str) -> list[Stock]:
        self.calls.append(query)
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        response = self.responses[query]
        if isinstance(response, Exception):
            raise response
        return response


class FakeChartFetcher:
    """Chart fetcher returning canned closes, optionally held behind a gate."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.responses: dict[str, list[float] | Exception] = {}
        self.gate: asyncio.Event | None = None

    async def fetch_series(self, symbol: str) -> ChartSeries:
        self.calls.append(symbol)
        if self.gate is not None:
            await self.gate.wait()
        response = self.responses.get(symbol, [])
        if isinstance(response, Exception):
            raise response
        return ChartSeries(symbol=symbol, closes=response)


@pytest.fixture
def quote_fetcher() -> FakeQuoteFetcher:
    return FakeQuoteFetcher()


@pytest.fixture
def chart_fetcher() -> FakeChartFetcher:
    return FakeChartFetcher()


@pytest.fixture
def stock_factory():
    return make_stock
