"""Custom error classes."""
from typing import Optional


class WalletConsoleError(Exception):
    """Base exception for the wallet console."""
    pass


class FetchFailure(WalletConsoleError):
    """Initial page data could not be loaded or had an unexpected shape."""
    pass


class ValidationFailure(WalletConsoleError):
    """A client-side precondition was not met."""
    pass


class ActionInFlight(ValidationFailure):
    """An action was invoked while a previous run is still pending."""
    pass


class PlatformError(WalletConsoleError):
    """Non-success response from the wallet platform."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
