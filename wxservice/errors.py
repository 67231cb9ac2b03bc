"""Error taxonomy for the weather pipeline.

Every error carries the HTTP status the API surface reports for it, so the
handler in ``wxservice.api`` never needs to know which stage failed.
"""


class WeatherServiceError(Exception):
    """Base class for request-terminal pipeline failures."""

    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WeatherServiceError):
    """Bad client input: missing, malformed or out-of-range coordinates."""

    http_status = 400


class UpstreamError(WeatherServiceError):
    """Network failure, non-2xx status or undecodable payload from NWS."""

    http_status = 502

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SelectionError(WeatherServiceError):
    """The forecast held no period usable as today's daytime forecast."""

    http_status = 502
