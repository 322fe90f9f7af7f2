"""Data models for stockr."""

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Quote(BaseModel):
    """
    📨 One record of the quote-search response.

    Only ``symbol`` is required. Every other field falls back to a named
    default when it is missing or ``null`` in the payload. A negative
    volume is clamped to zero.
    """

    model_config = ConfigDict(populate_by_name=True)

    symbol: str = Field(..., description="Ticker symbol (e.g., 'AAPL')")
    long_name: str = Field("Unknown", alias="longName")
    regular_market_price: float = Field(0.0, alias="regularMarketPrice")
    regular_market_change_percent: float = Field(
        0.0, alias="regularMarketChangePercent"
    )
    regular_market_open: float = Field(0.0, alias="regularMarketOpen")
    regular_market_day_high: float = Field(0.0, alias="regularMarketDayHigh")
    regular_market_day_low: float = Field(0.0, alias="regularMarketDayLow")
    regular_market_volume: int = Field(0, alias="regularMarketVolume", ge=0)

    @field_validator(
        "long_name",
        "regular_market_price",
        "regular_market_change_percent",
        "regular_market_open",
        "regular_market_day_high",
        "regular_market_day_low",
        "regular_market_volume",
        mode="before",
    )
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("regular_market_volume", mode="before")
    @classmethod
    def clamp_negative_volume(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and value < 0:
            return 0
        return value


class QuoteResult(BaseModel):
    result: list[Quote]


class QuoteResponse(BaseModel):
    """Envelope returned by the quote-search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    quote_response: QuoteResult = Field(..., alias="quoteResponse")


class ChartQuote(BaseModel):
    close: list[float | None] | None = None


class ChartIndicators(BaseModel):
    quote: list[ChartQuote | None] | None = None


class ChartResult(BaseModel):
    indicators: ChartIndicators | None = None


class ChartBody(BaseModel):
    # Yahoo sends "result": null alongside an "error" object for unknown symbols
    result: list[ChartResult | None] | None = None


class ChartResponse(BaseModel):
    """
    📈 Envelope returned by the historical-chart endpoint.

    Only the ``chart`` key is required. Any deeper level that is absent,
    ``null`` or empty produces an empty series.
    """

    chart: ChartBody

    def closes(self) -> list[float]:
        """Closing prices of the first result and first quote, oldest first."""
        results = self.chart.result or []
        if not results or results[0] is None or results[0].indicators is None:
            return []

        quotes = results[0].indicators.quote or []
        if not quotes or quotes[0] is None or quotes[0].close is None:
            return []

        # Days without a close come back as null
        return [close for close in quotes[0].close if close is not None]


class Stock(BaseModel):
    """
    📊 A stock as shown in the result list and the detail view.

    Built fresh from every search response and never persisted.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., description="Company name (e.g., 'Apple Inc.')")
    symbol: str = Field(..., description="Ticker symbol (e.g., 'AAPL')")
    price: float = Field(..., description="Last market price")
    change_percent: float = Field(..., description="Percent change on the day")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="Day high")
    low: float = Field(..., description="Day low")
    volume: int = Field(..., ge=0, description="Trading volume")

    @classmethod
    def from_quote(cls, quote: Quote) -> "Stock":
        return cls(
            name=quote.long_name,
            symbol=quote.symbol,
            price=quote.regular_market_price,
            change_percent=quote.regular_market_change_percent,
            open=quote.regular_market_open,
            high=quote.regular_market_day_high,
            low=quote.regular_market_day_low,
            volume=quote.regular_market_volume,
        )


class ChartSeries(BaseModel):
    """Closing prices for one symbol over the trailing chart window."""

    symbol: str
    closes: list[float] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.closes
