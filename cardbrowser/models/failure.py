"""
Failure classification for card browser requests.

Every request outcome that is not a card falls into one of four kinds.
None of them is fatal: each is terminal for its own request only, and the
user re-triggers the action to try again. Nothing is retried automatically.

- TRANSPORT_FAILURE: network unreachable, timeout, or non-2xx status
- EMPTY_INPUT: blank search term, caught before any request
- EMPTY_RESULT: search matched nothing (shown as "no results", not an error)
- SCOPED_EMPTY_SET: random draw within a set found nothing; the API reports
  this as an error status, so it surfaces like a transport failure
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of request failures."""

    TRANSPORT_FAILURE = "transport_failure"
    EMPTY_INPUT = "empty_input"
    EMPTY_RESULT = "empty_result"
    SCOPED_EMPTY_SET = "scoped_empty_set"


class FetchError(Exception):
    """
    Raised when a request to the card-data API fails.

    Attributes:
        message: Human-readable reason
        status_code: HTTP status for non-2xx responses, None for transport errors
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_http_error(self) -> bool:
        """True when the server answered with a non-success status."""
        return self.status_code is not None


# User-facing text for each failure path. Transport failures have none:
# they are reported with the client's own reason.
STANDARD_MESSAGES: dict[FailureKind, str] = {
    FailureKind.EMPTY_INPUT: "Please enter a card name",
    FailureKind.EMPTY_RESULT: "No cards found",
    FailureKind.SCOPED_EMPTY_SET: "No cards found in this set",
}
