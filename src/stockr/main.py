import asyncio
import sys

import sentry_sdk

from stockr.chart import ChartFetcher
from stockr.client import RapidApiClient
from stockr.config import settings
from stockr.logging import logger
from stockr.presenter import StocksPresenter
from stockr.quotes import QuoteFetcher
from stockr.render import SparklineRenderer
from stockr.shell import ConsoleShell
from stockr.version import get_version_info


def build_shell() -> ConsoleShell:
    client = RapidApiClient.from_settings(settings)
    presenter = StocksPresenter(
        QuoteFetcher(client, region=settings.quote_region),
        ChartFetcher(
            client, interval=settings.chart_interval, range_=settings.chart_range
        ),
    )
    return ConsoleShell(presenter, SparklineRenderer(colorize=sys.stdout.isatty()))


def main() -> None:
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.sentry_environment,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            integrations=[],
            attach_stacktrace=True,
        )
        logger.info(
            "Sentry initialized environment={environment} traces_sample_rate={traces_sample_rate}",
            environment=settings.sentry_environment,
            traces_sample_rate=settings.sentry_traces_sample_rate,
        )

    logger.info("Starting stockr version={version}", version=get_version_info())

    if not settings.rapidapi_key:
        logger.error("RAPIDAPI_KEY is not set, refusing to start")
        sys.exit(1)

    shell = build_shell()
    try:
        asyncio.run(shell.run())
    except KeyboardInterrupt:  # pragma: no cover
        logger.info("Stopping stockr")


if __name__ == "__main__":  # pragma: no cover
    main()
