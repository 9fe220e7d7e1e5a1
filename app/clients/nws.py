from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError as ModelValidationError

from app.core.errors import UpstreamBadStatus, UpstreamMalformedResponse, UpstreamUnavailable
from app.models.weather import Coordinate, ForecastPeriod

logger = logging.getLogger(__name__)

DEFAULT_BASE = "https://api.weather.gov"

STEP_POINTS = "points"
STEP_FORECAST = "forecast"


def points_url(base_url: str, coord: Coordinate) -> str:
    return f"{base_url.rstrip('/')}/points/{coord.lat:.4f},{coord.lon:.4f}"


class NWSClient:
    """
    Thin async client for api.weather.gov.

    A forecast takes two calls: /points/{lat},{lon} tells us which grid
    forecast URL covers the coordinate, then that URL returns the periods.
    No retries and no caching; the first failure is raised to the caller.
    """

    def __init__(
        self,
        user_agent: str,
        base_url: str = DEFAULT_BASE,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not user_agent:
            raise ValueError("NWS requires a non-empty User-Agent")
        self.base_url = base_url
        self.timeout = timeout_seconds
        self.headers = {"User-Agent": user_agent, "Accept": "application/geo+json"}
        self._transport = transport

    async def resolve_forecast_endpoint(self, coord: Coordinate) -> str:
        url = points_url(self.base_url, coord)
        data = await self._get_json(STEP_POINTS, url)

        props = data.get("properties")
        forecast_url = props.get("forecast") if isinstance(props, dict) else None
        if not isinstance(forecast_url, str) or not forecast_url:
            raise UpstreamMalformedResponse(STEP_POINTS, url, "no forecast URL available for this location")
        return forecast_url

    async def fetch_forecast_periods(self, endpoint_url: str) -> List[ForecastPeriod]:
        data = await self._get_json(STEP_FORECAST, endpoint_url)

        props = data.get("properties")
        rows = props.get("periods") if isinstance(props, dict) else None
        if not isinstance(rows, list):
            raise UpstreamMalformedResponse(STEP_FORECAST, endpoint_url, "properties.periods missing")

        try:
            return [ForecastPeriod.model_validate(row) for row in rows]
        except ModelValidationError as e:
            raise UpstreamMalformedResponse(STEP_FORECAST, endpoint_url, e) from e

    async def _get_json(self, step: str, url: str) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, headers=self.headers, transport=self._transport
            ) as client:
                r = await client.get(url)
        except httpx.InvalidURL as e:
            # only reachable with a forecast URL handed to us by /points
            raise UpstreamMalformedResponse(step, url, f"unusable URL: {e}") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailable(step, url, repr(e)) from e

        logger.debug("GET %s -> %s", url, r.status_code)
        if not r.is_success:
            raise UpstreamBadStatus(step, url, r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamMalformedResponse(step, url, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamMalformedResponse(step, url, f"expected an object, got {type(data).__name__}")
        return data
