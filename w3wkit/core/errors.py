from __future__ import annotations


class W3WError(Exception):
    """Base class for every failure surfaced by the geocoding client."""
    error = "W3WError"

    def __init__(self, message: str = "", *, details: dict | None = None):
        super().__init__(message)
        self.message = message or self.error
        self.details = details

    def __str__(self) -> str:
        return f"{self.error}: {self.message}"

class NetworkError(W3WError):
    error = "Network error"

class HttpError(W3WError):
    error = "HTTP error"

    def __init__(self, message: str = "", *, status_code: int | None = None, details: dict | None = None):
        super().__init__(message, details=details)
        self.status_code = status_code

class ApiError(W3WError):
    """The service answered with its own error document."""
    error = "W3W error"

    def __init__(self, code: str, message: str, *, status_code: int | None = None):
        super().__init__(message, details={"code": code})
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.error}: {self.code} {self.message}"

class DecodeError(W3WError):
    error = "Decode error"

class UnknownError(W3WError):
    error = "Unknown error"
