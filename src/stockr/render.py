"""Chart rendering collaborators."""

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel

from stockr.chart import direction_hint

NO_DATA = "No data available"
CHART_TITLE = "Stock Price"

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"

ANSI_COLORS = {
    "black": "30",
    "red": "31",
    "green": "32",
    "blue": "34",
    "white": "37",
    "gray": "90",
}


class ChartStyle(BaseModel):
    background_color: str = "white"
    accent_color: str = "blue"
    text_color: str = "black"
    legend_text_color: str = "gray"
    drop_shadow_color: str = "gray"


DEFAULT_STYLE = ChartStyle()


class ChartRenderer(Protocol):
    """
    🎭 Protocol for chart renderers.

    A renderer draws an ordered series of samples as a line chart. The
    ``rate_value`` is 1 for a rising series and -1 otherwise; it only picks
    a visual accent.
    """

    def render(
        self, data: Sequence[float], title: str, style: ChartStyle, rate_value: int
    ) -> str: ...


class SparklineRenderer:
    """Draws a series as a one-line unicode sparkline."""

    def __init__(self, colorize: bool = True) -> None:
        self.colorize = colorize

    def _paint(self, text: str, color: str) -> str:
        code = ANSI_COLORS.get(color)
        if not self.colorize or code is None:
            return text
        return f"\033[{code}m{text}\033[0m"

    def sparkline(self, data: Sequence[float]) -> str:
        low, high = min(data), max(data)
        span = high - low
        if span == 0:
            return SPARK_BLOCKS[0] * len(data)

        top = len(SPARK_BLOCKS) - 1
        return "".join(
            SPARK_BLOCKS[round((value - low) / span * top)] for value in data
        )

    def render(
        self, data: Sequence[float], title: str, style: ChartStyle, rate_value: int
    ) -> str:
        arrow = "▲" if rate_value > 0 else "▼"
        legend = f"{arrow} {data[0]:.2f} → {data[-1]:.2f}"
        return "\n".join(
            [
                self._paint(title, style.text_color),
                self._paint(self.sparkline(data), style.accent_color),
                self._paint(legend, style.legend_text_color),
            ]
        )


def render_chart(
    data: Sequence[float], renderer: ChartRenderer, style: ChartStyle = DEFAULT_STYLE
) -> str:
    """Render ``data`` with ``renderer``, or the placeholder when it is empty."""
    if not data:
        return NO_DATA
    return renderer.render(data, CHART_TITLE, style, direction_hint(data))
