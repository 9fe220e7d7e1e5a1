from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """Error that is shown to the caller as an ErrorResult payload."""

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(f"{error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message


class ValidationError(ApiError):
    """Bad input from the caller (missing/unparseable/out-of-range coords, wrong method)."""

    def __init__(self, error: str, message: str, status_code: int = 400):
        super().__init__(status_code, error, message)


class ForecastError(Exception):
    """Anything that goes wrong while resolving a forecast. Never shown to the caller."""

    kind = "forecast_error"


class UpstreamError(ForecastError):
    kind = "upstream_error"

    def __init__(self, step: str, url: str, cause: object = None):
        self.step = step
        self.url = url
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        msg = f"{self.kind} at {self.step} step ({self.url})"
        if self.cause is not None:
            msg += f": {self.cause}"
        return msg


class UpstreamUnavailable(UpstreamError):
    kind = "upstream_unavailable"


class UpstreamBadStatus(UpstreamError):
    kind = "upstream_bad_status"

    def __init__(self, step: str, url: str, status_code: int, cause: Optional[object] = None):
        self.status_code = status_code
        super().__init__(step, url, cause if cause is not None else f"HTTP {status_code}")


class UpstreamMalformedResponse(UpstreamError):
    kind = "upstream_malformed_response"


class NoForecastAvailable(ForecastError):
    kind = "no_forecast_available"

    def __init__(self, message: str = "no forecast periods available"):
        super().__init__(message)
