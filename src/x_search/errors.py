from __future__ import annotations


class XSearchError(Exception):
    """Base class for every failure that aborts a search run."""


class ArgumentError(XSearchError, ValueError):
    pass


class DurationError(ArgumentError):
    pass


class AuthUnavailable(XSearchError):
    pass


class ApiError(XSearchError):
    def __init__(self, status: int | None, message: str):
        self.status = status
        self.message = message
        if status is None:
            super().__init__(f"Twitter API error: {message}")
        else:
            super().__init__(f"Twitter API error (status {status}): {message}")
