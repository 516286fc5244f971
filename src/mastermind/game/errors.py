"""Error hierarchy for the Mastermind client.

``ApiError`` subclasses are runtime failures of a remote exchange: the
session reports them and carries on (or, during startup, stops).
``InvalidRequest`` means the client could not even build a request. It is a
bug, not a condition to recover from, and sits outside ``ApiError`` so the
turn loop does not catch it. ``ValidationError`` never leaves the client.
"""


class MastermindError(Exception):
    """Base class for all client errors."""


class InvalidRequest(MastermindError):
    """The request target could not be constructed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid URL: {detail}")


class ApiError(MastermindError):
    """A remote exchange failed."""


class InvalidResponse(ApiError):
    """The response body did not decode into the expected shape."""

    def __init__(self, detail: str = "") -> None:
        message = "Invalid response from server"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ServerError(ApiError):
    """The server answered with a non-success status and a message."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"Server error: {message}")
        self.message = message
        self.status_code = status_code


class NetworkError(ApiError):
    """The request never got a response (connection failure, timeout)."""

    def __init__(self) -> None:
        super().__init__("Network error. Please check your internet connection.")


class ValidationError(MastermindError):
    """The player's input is not a well-formed guess."""
