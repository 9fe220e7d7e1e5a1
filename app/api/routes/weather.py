import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_forecast_service
from app.core.errors import ApiError, ForecastError, ValidationError
from app.models.weather import Coordinate, ErrorResult, ForecastResult
from app.services.forecast_service import ForecastService

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_coord(raw: str, label: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"Bad {label}", "Must be a number") from None
    if not math.isfinite(value):
        raise ValidationError(f"Bad {label}", "Must be a number")
    return value


def parse_coordinate(lat: Optional[str], lon: Optional[str]) -> Coordinate:
    if not lat or not lon:
        raise ValidationError("Missing coords", "Need both lat and lon params")

    lat_f = _parse_coord(lat, "latitude")
    lon_f = _parse_coord(lon, "longitude")

    if not (-90 <= lat_f <= 90) or not (-180 <= lon_f <= 180):
        raise ValidationError("Invalid coords", "Check your lat/lon values")

    return Coordinate(lat=lat_f, lon=lon_f)


@router.api_route(
    "/weather",
    methods=["GET", "HEAD"],
    response_model=ForecastResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResult}, 405: {"model": ErrorResult}, 500: {"model": ErrorResult}},
)
async def get_weather(
    lat: Optional[str] = Query(None, description="Latitude, -90..90"),
    lon: Optional[str] = Query(None, description="Longitude, -180..180"),
    svc: ForecastService = Depends(get_forecast_service),
):
    try:
        coord = parse_coordinate(lat, lon)
    except ValidationError as e:
        logger.debug("rejected /weather lat=%r lon=%r: %s", lat, lon, e)
        raise

    try:
        return await svc.resolve(coord)
    except ForecastError as e:
        # detail stays in the log; the caller only gets the generic message
        logger.error("Forecast error [%s] for %.4f,%.4f: %s", e.kind, coord.lat, coord.lon, e)
        raise ApiError(500, "API error", "Could not get forecast") from e
