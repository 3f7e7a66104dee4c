"""Errors raised by the PTV timetable client.

Transport failures and malformed responses are kept apart so callers can tell
"server unreachable or rejected the request" from "server returned a bad body".
"""


class PtvError(Exception):
    """Base class for PTV timetable API errors."""


class PtvTransportError(PtvError):
    """The request failed at the network level or returned a non-200 status."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PtvDecodeError(PtvError):
    """The response body was not JSON or did not have the expected envelope."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body[:500]
