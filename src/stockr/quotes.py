"""Quote search: free-text query in, normalized stocks out."""

import sentry_sdk
from pydantic import ValidationError

from stockr.client import RapidApiClient
from stockr.errors import DecodeError
from stockr.logging import logger
from stockr.models import QuoteResponse, Stock

QUOTES_PATH = "/market/v2/get-quotes"


class QuoteFetcher:
    """Stateless wrapper around the quote-search endpoint."""

    def __init__(self, client: RapidApiClient, region: str = "US") -> None:
        self.client = client
        self.region = region

    async def search(self, query: str) -> list[Stock]:
        """
        🔎 Search quotes for ``query``.

        Args:
            query: Free-text query, usually one or more comma-separated tickers

        Returns:
            One Stock per upstream record, in upstream order

        Raises:
            ValueError: if ``query`` is blank
            NetworkError: the request failed
            DecodeError: the response does not match the quote schema
        """
        query = query.strip()
        if not query:
            raise ValueError("query must be a non-empty string")

        logger.info("Searching quotes query={query}", query=query)
        sentry_sdk.add_breadcrumb(
            category="quotes",
            message="Searching quotes",
            level="info",
            data={"query": query},
        )

        payload = await self.client.get_json(
            QUOTES_PATH, params={"region": self.region, "symbols": query}
        )

        try:
            response = QuoteResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected quote response for {query!r}: {e}") from e

        stocks = [Stock.from_quote(quote) for quote in response.quote_response.result]
        logger.info(
            "Quote search finished query={query} results={count}",
            query=query,
            count=len(stocks),
        )
        return stocks
