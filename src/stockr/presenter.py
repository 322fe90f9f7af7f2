"""Screen state for the stock search and detail views."""

from typing import Literal

import sentry_sdk
from pydantic import BaseModel, Field

from stockr.chart import ChartFetcher, direction_hint
from stockr.errors import FetchError
from stockr.logging import logger
from stockr.models import Stock
from stockr.quotes import QuoteFetcher

DetailDisplay = Literal["loading", "no_data", "chart"]


class StocksState(BaseModel):
    query: str = ""
    search_results: list[Stock] = Field(default_factory=list)
    stocks: list[Stock] = Field(default_factory=list)
    is_loading: bool = False
    selected: Stock | None = None
    error: str | None = None


class DetailState(BaseModel):
    series: list[float] = Field(default_factory=list)
    is_loading_chart: bool = True
    error: str | None = None


class DetailPresenter:
    """
    🪟 Owns the state of one detail presentation.

    The chart is fetched once, on first appearance. Completions arriving
    after ``close()`` are discarded.
    """

    def __init__(self, stock: Stock, chart_fetcher: ChartFetcher) -> None:
        self.stock = stock
        self.chart_fetcher = chart_fetcher
        self.state = DetailState()
        self._appeared = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def display(self) -> DetailDisplay:
        if self.state.is_loading_chart:
            return "loading"
        if not self.state.series:
            return "no_data"
        return "chart"

    @property
    def direction(self) -> int:
        return direction_hint(self.state.series)

    async def on_appear(self) -> None:
        if self._appeared:
            return
        self._appeared = True

        symbol = self.stock.symbol
        try:
            series = await self.chart_fetcher.fetch_series(symbol)
        except FetchError as e:
            logger.error(
                "Failed to fetch chart symbol={symbol} error={error}",
                symbol=symbol,
                error=str(e),
            )
            sentry_sdk.capture_exception(e)
            if not self._closed:
                self.state.is_loading_chart = False
                self.state.error = "Chart unavailable"
            return

        if self._closed:
            logger.debug("Discarding chart for closed detail symbol={symbol}", symbol=symbol)
            return

        self.state.series = series.closes
        self.state.is_loading_chart = False

    def close(self) -> None:
        self._closed = True


class StocksPresenter:
    """
    🗂️ Owns the state of the stocks screen.

    Searches may overlap. Each one takes a generation number and only the
    latest generation is allowed to write results or clear the loading flag.
    """

    def __init__(self, quote_fetcher: QuoteFetcher, chart_fetcher: ChartFetcher) -> None:
        self.quote_fetcher = quote_fetcher
        self.chart_fetcher = chart_fetcher
        self.state = StocksState()
        self.detail: DetailPresenter | None = None
        self._generation = 0
        self._closed = False

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def submit(self, query: str) -> None:
        """
        🔎 Run a search for ``query``.

        A blank query is a no-op. On failure the previous results stay in
        place and ``state.error`` holds a short message.
        """
        query = query.strip()
        if not query:
            logger.debug("Ignoring blank query")
            return

        self._generation += 1
        generation = self._generation
        self.state.query = query
        self.state.is_loading = True
        self.state.error = None

        try:
            results = await self.quote_fetcher.search(query)
        except FetchError as e:
            logger.error(
                "Failed to search quotes query={query} error={error}",
                query=query,
                error=str(e),
            )
            sentry_sdk.capture_exception(e)
            if self._is_current(generation):
                self.state.is_loading = False
                self.state.error = "Search failed"
            return

        if not self._is_current(generation):
            logger.debug(
                "Discarding stale search results query={query} generation={generation}",
                query=query,
                generation=generation,
            )
            return

        self.state.search_results = results
        self.state.is_loading = False

    def select(self, stock: Stock) -> DetailPresenter:
        """Select ``stock``, add it to the working list and open its detail."""
        if self.detail is not None:
            self.detail.close()

        if not any(s.symbol == stock.symbol for s in self.state.stocks):
            self.state.stocks.append(stock)

        self.state.selected = stock
        self.detail = DetailPresenter(stock, self.chart_fetcher)
        logger.info("Selected stock symbol={symbol}", symbol=stock.symbol)
        return self.detail

    def dismiss(self) -> None:
        if self.detail is not None:
            self.detail.close()
        self.detail = None
        self.state.selected = None

    def close(self) -> None:
        """Tear down the screen. In-flight completions are discarded."""
        self._generation += 1
        self._closed = True
        self.dismiss()
