from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from app.clients.nws import NWSClient
from app.core.errors import NoForecastAvailable
from app.models.weather import Coordinate, ForecastPeriod, ForecastResult, Location
from app.services.classifier import classify

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def select_period(periods: Sequence[ForecastPeriod]) -> ForecastPeriod:
    """
    Pick the period that best describes "today".

    The first period whose name contains "today" (any case) wins. Otherwise
    the first daytime period, otherwise whatever comes first.
    """
    daytime: Optional[ForecastPeriod] = None
    for p in periods:
        if "today" in p.name.lower():
            return p
        if daytime is None and p.is_daytime:
            daytime = p

    if daytime is not None:
        return daytime
    if periods:
        return periods[0]
    raise NoForecastAvailable()


def to_fahrenheit(period: ForecastPeriod) -> int:
    # NWS normally returns F already
    if period.temperature_unit == "C":
        return round(period.temperature * 9 / 5 + 32)
    return period.temperature


class ForecastService:
    def __init__(self, nws: NWSClient, clock: Callable[[], datetime] = _utcnow):
        self.nws = nws
        self.clock = clock

    async def resolve(self, coord: Coordinate) -> ForecastResult:
        # second call needs the URL from the first, keep them sequential
        forecast_url = await self.nws.resolve_forecast_endpoint(coord)
        periods: List[ForecastPeriod] = await self.nws.fetch_forecast_periods(forecast_url)

        period = select_period(periods)
        temp_f = to_fahrenheit(period)
        temp_type = classify(temp_f)

        logger.info(
            "forecast %.4f,%.4f: period=%r temp_f=%d temp_type=%s",
            coord.lat, coord.lon, period.name, temp_f, temp_type.value,
        )

        return ForecastResult(
            location=Location(lat=coord.lat, lng=coord.lon),
            forecast=period.short_forecast,
            temp_f=temp_f,
            temp_type=temp_type,
            details=period.detailed_forecast or None,
            last_updated=self.clock().isoformat(timespec="seconds"),
        )
