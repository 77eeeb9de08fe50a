"""
Custom exceptions for the Better Stack status bot.
"""

from typing import Optional


class StatusBotException(Exception):
    """Base exception for all custom exceptions."""

    pass


# ============================================================================
# Better Stack API Exceptions
# ============================================================================


class BetterStackAPIError(StatusBotException):
    """Error communicating with the Better Stack Uptime API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class BetterStackAuthenticationError(BetterStackAPIError):
    """API token was rejected (401/403)."""

    pass


class BetterStackResponseError(BetterStackAPIError):
    """Response body is not the JSON shape we expect."""

    pass
