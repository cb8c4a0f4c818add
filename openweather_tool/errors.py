from typing import Any


class WeatherQueryError(Exception):
    pass


class RemoteRejection(WeatherQueryError):
    """The weather API answered with a non-success status."""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"weather API returned HTTP {status_code}: {body!r}")


class TransportOrDecodeFailure(WeatherQueryError):
    """Network failure, timeout, or an undecodable response body."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
