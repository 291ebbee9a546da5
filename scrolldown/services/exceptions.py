"""Custom exceptions raised by game services."""

from __future__ import annotations


class GameServiceError(RuntimeError):
    """Base error for any failed fetch; the message is shown to the user."""


class GameServiceHTTPError(GameServiceError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class GameServiceDecodeError(GameServiceError):
    """Raised when a payload does not match the expected schema."""
