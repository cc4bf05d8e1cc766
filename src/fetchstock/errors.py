"""Custom exceptions for clearer error handling across the app."""


class FetchStockError(Exception):
    """Base exception for all app-specific errors."""


class DataProviderError(FetchStockError):
    """Raised when closing price retrieval fails."""
