"""Console UI shell driving the stocks presenter."""

import asyncio
import threading
from collections.abc import Awaitable, Callable

from stockr.logging import logger
from stockr.models import Stock
from stockr.presenter import DetailPresenter, StocksPresenter
from stockr.render import ChartRenderer, render_chart
from stockr.utils import format_change, format_number, format_price, format_volume

HELP = (
    "Type a ticker (or comma-separated tickers) to search, a row number to "
    "open it, :back to close the detail, :list for your stocks, :quit to exit."
)


def format_row(index: int, stock: Stock) -> str:
    return (
        f"{index:>3}. {stock.name} ({stock.symbol})  "
        f"{format_price(stock.price)}  {format_change(stock.change_percent)}"
    )


def format_detail(detail: DetailPresenter, renderer: ChartRenderer) -> str:
    stock = detail.stock
    if detail.display == "loading":
        chart = "Loading Chart..."
    else:
        chart = render_chart(detail.state.series, renderer)

    lines = [
        stock.name,
        stock.symbol,
        "",
        chart,
        "",
        f"Price: {format_price(stock.price)}",
        f"Change: {format_change(stock.change_percent)}",
        f"Open: {format_price(stock.open)}",
        f"High: {format_price(stock.high)}",
        f"Low: {format_price(stock.low)}",
        f"Volume: {format_volume(stock.volume)}",
    ]
    return "\n".join(lines)


def _deliver(
    future: asyncio.Future, line: str | None, error: BaseException | None
) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(line)


def _read_stdin(
    loop: asyncio.AbstractEventLoop, future: asyncio.Future, prompt: str
) -> None:
    line, error = None, None
    try:
        line = input(prompt)
    except EOFError as e:
        error = e

    try:
        loop.call_soon_threadsafe(_deliver, future, line, error)
    except RuntimeError:
        logger.debug("Event loop closed before input arrived")


async def read_line(prompt: str = "> ") -> str:
    """
    Read one line from stdin without blocking the event loop.

    The blocking ``input()`` runs on a daemon thread, so a pending read never
    holds up interpreter exit after Ctrl-C.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()
    threading.Thread(
        target=_read_stdin,
        args=(loop, future, prompt),
        name="stockr-stdin",
        daemon=True,
    ).start()
    return await future


class ConsoleShell:
    """
    🖥️ Line-oriented stand-in for the tabbed UI.

    Each input line becomes one user event on the presenter, and the
    resulting view state is written back out.
    """

    def __init__(
        self,
        presenter: StocksPresenter,
        renderer: ChartRenderer,
        write: Callable[[str], None] = print,
    ) -> None:
        self.presenter = presenter
        self.renderer = renderer
        self.write = write

    def show_results(self) -> None:
        state = self.presenter.state
        if state.error:
            self.write(state.error)
        if not state.search_results:
            self.write("No results")
            return
        for index, stock in enumerate(state.search_results, start=1):
            self.write(format_row(index, stock))

    def show_stocks(self) -> None:
        stocks = self.presenter.state.stocks
        if not stocks:
            self.write("No stocks added yet")
            return
        for stock in stocks:
            self.write(
                f"{stock.symbol:<8} {format_price(stock.price):>10}  "
                f"vol {format_number(stock.volume)}"
            )

    async def open_row(self, number: int) -> None:
        results = self.presenter.state.search_results
        if not 1 <= number <= len(results):
            self.write(f"No result #{number}")
            return

        detail = self.presenter.select(results[number - 1])
        await detail.on_appear()
        self.write(format_detail(detail, self.renderer))

    async def handle(self, line: str) -> bool:
        """Handle one input line. Returns False when the shell should exit."""
        command = line.strip()

        if command in (":quit", ":q"):
            return False
        if command == ":help":
            self.write(HELP)
        elif command == ":back":
            self.presenter.dismiss()
        elif command == ":list":
            self.show_stocks()
        elif command.isdigit():
            await self.open_row(int(command))
        elif command:
            # A new search replaces whatever detail is open
            self.presenter.dismiss()
            await self.presenter.submit(command)
            self.show_results()
        return True

    async def run(self, read: Callable[[], Awaitable[str]] = read_line) -> None:
        self.write(HELP)
        try:
            while True:
                try:
                    line = await read()
                except EOFError:
                    break
                if not await self.handle(line):
                    break
        finally:
            self.presenter.close()
            logger.info("Console shell stopped")
