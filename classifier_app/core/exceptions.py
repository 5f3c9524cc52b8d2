"""Custom exceptions for the application."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""
    pass


class ValidationError(AppError):
    """Raised when client-side validation fails. Never reaches the network."""
    pass


class ApiError(AppError):
    """
    API error with status code and message.

    ``detail`` holds the error text the server sent, if any; ``message``
    falls back to a description of the failure.
    """

    def __init__(self, status_code: int, message: str, detail: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.detail = detail
        super().__init__(f"API Error {status_code}: {message}")


class AuthorizationError(ApiError):
    """Raised on HTTP 401."""
    pass


class ServerError(ApiError):
    """Raised on any other non-2xx response or a transport failure (status 0)."""
    pass
