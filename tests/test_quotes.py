"""Tests for quote search."""

import httpx
import pytest

from stockr.errors import DecodeError, NetworkError
from stockr.quotes import QUOTES_PATH, QuoteFetcher


def quote_payload(*records: dict) -> dict:
    return {"quoteResponse": {"result": list(records), "error": None}}


class TestQuoteFetcherSearch:
    """Test QuoteFetcher.search end to end against a mock transport."""

    @pytest.mark.anyio
    async def test_search_single_symbol(self, make_client):
        """✅ Query AAPL maps the record into one Stock."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json=quote_payload(
                    {
                        "symbol": "AAPL",
                        "longName": "Apple Inc.",
                        "regularMarketPrice": 190.5,
                        "regularMarketChangePercent": 1.2,
                        "regularMarketOpen": 189.0,
                        "regularMarketDayHigh": 191.2,
                        "regularMarketDayLow": 188.4,
                        "regularMarketVolume": 48_000_000,
                    }
                ),
            )

        fetcher = QuoteFetcher(make_client(handler))
        stocks = await fetcher.search("AAPL")

        assert len(stocks) == 1
        stock = stocks[0]
        assert stock.name == "Apple Inc."
        assert stock.symbol == "AAPL"
        assert stock.price == 190.5
        assert stock.change_percent == 1.2
        assert stock.open == 189.0
        assert stock.high == 191.2
        assert stock.low == 188.4
        assert stock.volume == 48_000_000

        request = seen[0]
        assert request.url.path == QUOTES_PATH
        assert request.url.params["region"] == "US"
        assert request.url.params["symbols"] == "AAPL"

    @pytest.mark.anyio
    async def test_search_keeps_upstream_order_and_applies_defaults(self, make_client):
        """✅ N records give N stocks in order, with defaults for missing fields."""
        payload = quote_payload(
            {"symbol": "TSLA", "longName": "Tesla, Inc.", "regularMarketPrice": 250.0},
            {"symbol": "NVDA"},
            {"symbol": "AMZN", "regularMarketVolume": 12},
        )
        fetcher = QuoteFetcher(make_client(lambda request: httpx.Response(200, json=payload)))

        stocks = await fetcher.search("TSLA,NVDA,AMZN")

        assert [s.symbol for s in stocks] == ["TSLA", "NVDA", "AMZN"]
        assert stocks[0].price == 250.0
        assert stocks[0].change_percent == 0.0
        assert stocks[1].name == "Unknown"
        assert stocks[1].price == 0.0
        assert stocks[1].open == 0.0
        assert stocks[1].high == 0.0
        assert stocks[1].low == 0.0
        assert stocks[1].volume == 0
        assert stocks[2].volume == 12

    @pytest.mark.anyio
    async def test_negative_volume_keeps_other_records(self, make_client):
        """✅ A bad volume in one record does not drop the rest of the results."""
        payload = quote_payload(
            {"symbol": "A", "regularMarketVolume": 300},
            {"symbol": "B", "regularMarketVolume": -1},
        )
        fetcher = QuoteFetcher(make_client(lambda request: httpx.Response(200, json=payload)))

        stocks = await fetcher.search("A,B")

        assert [s.symbol for s in stocks] == ["A", "B"]
        assert stocks[0].volume == 300
        assert stocks[1].volume == 0

    @pytest.mark.anyio
    async def test_search_trims_query_and_uses_region(self, make_client):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=quote_payload())

        fetcher = QuoteFetcher(make_client(handler), region="GB")
        stocks = await fetcher.search("  vod.l  ")

        assert stocks == []
        assert seen[0].url.params["symbols"] == "vod.l"
        assert seen[0].url.params["region"] == "GB"

    @pytest.mark.anyio
    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    async def test_blank_query_makes_no_request(self, make_client, query):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=quote_payload())

        fetcher = QuoteFetcher(make_client(handler))

        with pytest.raises(ValueError):
            await fetcher.search(query)
        assert seen == []

    @pytest.mark.anyio
    async def test_missing_quote_response_is_decode_error(self, make_client):
        """❌ A body without quoteResponse is a DecodeError."""
        fetcher = QuoteFetcher(
            make_client(lambda request: httpx.Response(200, json={"message": "limit"}))
        )

        with pytest.raises(DecodeError):
            await fetcher.search("AAPL")

    @pytest.mark.anyio
    async def test_record_without_symbol_is_decode_error(self, make_client):
        payload = quote_payload({"longName": "Mystery Corp"})
        fetcher = QuoteFetcher(make_client(lambda request: httpx.Response(200, json=payload)))

        with pytest.raises(DecodeError):
            await fetcher.search("MYST")

    @pytest.mark.anyio
    async def test_upstream_failure_is_network_error(self, make_client):
        fetcher = QuoteFetcher(make_client(lambda request: httpx.Response(429)))

        with pytest.raises(NetworkError):
            await fetcher.search("AAPL")
