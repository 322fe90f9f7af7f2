"""Configuration values for the stockr package."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    rapidapi_key: str | None = Field(None, description="RapidAPI key")
    rapidapi_host: str = Field(
        "apidojo-yahoo-finance-v1.p.rapidapi.com",
        description="RapidAPI host identifier sent with every request",
    )
    api_base_url: str | None = Field(
        None, description="Override for the API base URL (defaults to the host)"
    )

    quote_region: str = Field("US", description="Region for quote searches")
    chart_interval: str = Field("1d", description="Chart sample interval")
    chart_range: str = Field("1mo", description="Chart trailing window")
    request_timeout: float = Field(10.0, description="HTTP timeout in seconds")

    log_level: str = Field("INFO", description="Log level")

    sentry_dsn: str | None = Field(None, description="Sentry DSN")
    sentry_environment: str = Field("production", description="Sentry environment")
    sentry_traces_sample_rate: float = Field(
        0.0, description="Sentry traces sample rate"
    )

    def get_api_base_url(self) -> str:
        """Return the configured base URL or derive it from the RapidAPI host."""
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        return f"https://{self.rapidapi_host}"


settings = Settings()
