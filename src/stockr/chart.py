"""Historical chart retrieval."""

from collections.abc import Sequence

import sentry_sdk
from pydantic import ValidationError

from stockr.client import RapidApiClient
from stockr.errors import DecodeError
from stockr.logging import logger
from stockr.models import ChartResponse, ChartSeries

CHART_PATH = "/stock/v2/get-chart"


def direction_hint(closes: Sequence[float]) -> int:
    """
    Return 1 when the series ends above where it started, -1 otherwise.

    Empty and single-sample series are flat, so they give -1.
    """
    if not closes:
        return -1
    return 1 if closes[-1] - closes[0] > 0 else -1


class ChartFetcher:
    """Stateless wrapper around the historical-chart endpoint."""

    def __init__(
        self, client: RapidApiClient, interval: str = "1d", range_: str = "1mo"
    ) -> None:
        self.client = client
        self.interval = interval
        self.range = range_

    async def fetch_series(self, symbol: str) -> ChartSeries:
        """
        📈 Fetch closing prices for ``symbol`` over the configured window.

        Raises:
            NetworkError: the request failed
            DecodeError: the response has no ``chart`` object
        """
        logger.info(
            "Fetching chart symbol={symbol} interval={interval} range={range}",
            symbol=symbol,
            interval=self.interval,
            range=self.range,
        )
        sentry_sdk.add_breadcrumb(
            category="chart",
            message="Fetching chart",
            level="info",
            data={"symbol": symbol},
        )

        payload = await self.client.get_json(
            CHART_PATH,
            params={"symbol": symbol, "interval": self.interval, "range": self.range},
        )

        try:
            response = ChartResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected chart response for {symbol!r}: {e}") from e

        series = ChartSeries(symbol=symbol, closes=response.closes())
        logger.info(
            "Chart fetched symbol={symbol} samples={count}",
            symbol=symbol,
            count=len(series.closes),
        )
        return series
