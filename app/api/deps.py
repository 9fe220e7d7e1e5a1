from fastapi import Depends, Request

from app.clients.nws import NWSClient
from app.core.config import Settings
from app.services.forecast_service import ForecastService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_nws_client(settings: Settings = Depends(get_app_settings)) -> NWSClient:
    return NWSClient(
        user_agent=settings.nws_user_agent,
        base_url=settings.nws_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )


def get_forecast_service(nws: NWSClient = Depends(get_nws_client)) -> ForecastService:
    return ForecastService(nws=nws)
