"""Price series signals."""

from .base import Signal
from .price import MaxPrice, MinPrice, PriceDifference
from .sma import WindowedSMA

__all__ = ["Signal", "PriceDifference", "MinPrice", "MaxPrice", "WindowedSMA"]
