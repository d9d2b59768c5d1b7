"""Error types raised while looking up a forecast.

Every failure is terminal for the invocation; the CLI reports the message
and exits with status 1.
"""


class GoforecastError(Exception):
    """Base class for all lookup failures."""


class MalformedURL(GoforecastError):
    """Raised when the geocoding URL cannot be parsed."""


class TransportError(GoforecastError):
    """Raised on connection, DNS or timeout failures."""


class UnexpectedStatus(GoforecastError):
    """Raised when the geocoding service answers with anything but 200/201."""

    def __init__(self, status_code: int):
        super().__init__(f"on request: got code {status_code}")
        self.status_code = status_code


class DecodeError(GoforecastError):
    """Raised when a response body is not the JSON we expect."""


class NoResultsError(GoforecastError):
    """Raised when geocoding succeeded but matched nothing usable."""


class StateReadError(GoforecastError):
    """Raised when the state file exists but cannot be read or parsed."""


class StateWriteError(GoforecastError):
    """Raised when the state file cannot be written."""


class MissingAPIKeyError(GoforecastError):
    """Raised when no forecast API key is stored or set in the environment."""


class ForecastFetchError(GoforecastError):
    """Raised when the forecast service call fails for any reason."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingArgumentError(GoforecastError):
    """Raised when the lookup command is given no address."""
