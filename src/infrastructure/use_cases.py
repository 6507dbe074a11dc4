"""Use-case factories.

Wire interactors to a repository, a presenter, and the application Settings
at the application boundary, so the domain layer never reads configuration.

    repository = InMemoryStockRepository.from_snapshots(snapshots)
    view_stock = build_view_stock(repository, presenter)
    view_stock.execute("AAPL")
"""

from __future__ import annotations

from src.domain.repositories.stocks import StockRepository
from src.domain.services.compare_stocks import (
    CompareStocksInteractor,
    CompareStocksPresenter,
)
from src.domain.services.view_stock import ViewStockInteractor, ViewStockPresenter

from .config import Settings, settings


def build_view_stock(
    repository: StockRepository,
    presenter: ViewStockPresenter,
    config: Settings | None = None,
) -> ViewStockInteractor:
    config = config or settings
    return ViewStockInteractor(
        repository,
        presenter,
        window_days=config.view_window_days,
    )


def build_compare_stocks(
    repository: StockRepository,
    presenter: CompareStocksPresenter,
    config: Settings | None = None,
) -> CompareStocksInteractor:
    config = config or settings
    return CompareStocksInteractor(
        repository,
        presenter,
        date_format=config.summary_date_format,
    )
