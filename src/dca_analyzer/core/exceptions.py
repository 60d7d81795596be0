"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when an investment policy or request fails validation."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class MarketDataError(AppError):
    """Raised when price history cannot be retrieved for a symbol."""

    status_code = 503

    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        super().__init__(
            f"Could not retrieve price history for {symbol}: {reason}",
            code="MARKET_DATA_ERROR",
        )
