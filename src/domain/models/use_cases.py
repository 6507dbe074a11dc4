"""Input and output data carried across the use-case boundary.

These are the only shapes presenters and controllers see; they never hold a
reference to a Stock or its series.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ViewStockOutput(BaseModel):
    """Trailing window of daily share prices for one stock, oldest first."""

    model_config = ConfigDict(frozen=True)

    company: str
    symbol: str
    share_prices: tuple[float, ...]


class CompareStocksInput(BaseModel):
    """Two company names and the inclusive date range to compare them over."""

    model_config = ConfigDict(frozen=True)

    first_company: str = Field(min_length=1)
    second_company: str = Field(min_length=1)
    start_date: date
    end_date: date
