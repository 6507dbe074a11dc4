"""Domain services package: the use-case interactors and their output ports."""

from .compare_stocks import CompareStocksInteractor, CompareStocksPresenter
from .view_stock import ViewStockInteractor, ViewStockPresenter

__all__ = [
    "CompareStocksInteractor",
    "CompareStocksPresenter",
    "ViewStockInteractor",
    "ViewStockPresenter",
]
