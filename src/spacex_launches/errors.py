"""Error taxonomy for launch data access."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a launch data failure, as surfaced in list state."""

    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    API_UNAVAILABLE = "api_unavailable"
    FETCH_FAILED = "fetch_failed"
    NOT_FOUND = "not_found"


class LaunchClientError(Exception):
    """Base class for all launch data failures."""

    kind: ErrorKind = ErrorKind.FETCH_FAILED


class RequestTimeoutError(LaunchClientError):
    """A request exceeded its deadline."""

    kind = ErrorKind.TIMEOUT


class HttpStatusError(LaunchClientError):
    """The API answered with a non-2xx status."""

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP error! status: {status_code} ({url})")
        self.status_code = status_code
        self.url = url


class ApiUnavailableError(LaunchClientError):
    """Primary and fallback fetches failed and the health probe failed too."""

    kind = ErrorKind.API_UNAVAILABLE


class FetchFailedError(LaunchClientError):
    """Generic transport or parse failure; the underlying cause is chained."""

    kind = ErrorKind.FETCH_FAILED


class NotFoundError(LaunchClientError):
    """A lookup found no matching record."""

    kind = ErrorKind.NOT_FOUND
