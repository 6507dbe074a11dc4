"""Application settings and logging setup."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.services.compare_stocks import DEFAULT_DATE_FORMAT
from src.domain.services.view_stock import FIVE_YEARS_IN_DAYS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="STOCK_METRICS_", extra="ignore"
    )

    view_window_days: int = Field(default=FIVE_YEARS_IN_DAYS, gt=0)
    summary_date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Route log records to stderr at the configured level.

    Called once at application startup; library code only ever uses
    logging.getLogger(__name__).
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
