import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes.weather import router as weather_router
from app.core.config import Settings, get_settings
from app.core.errors import ApiError
from app.core.logging import setup_logging
from app.models.weather import ErrorResult, HealthStatus, ServiceInfo
from app.services.classifier import temp_ranges

logger = logging.getLogger(__name__)

ENDPOINTS = ["/weather?lat=X&lon=Y", "/health"]


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResult(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.status_code, exc.error, exc.message)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        resp = _error_response(405, "Method not allowed", "Only GET supported")
    elif exc.status_code == 404:
        resp = _error_response(404, "Not found", f"No route for {request.url.path}")
    else:
        resp = _error_response(exc.status_code, "HTTP error", str(exc.detail))
    if exc.headers:
        resp.headers.update(exc.headers)
    return resp


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal error", "Something went wrong")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    @app.get("/", response_model=ServiceInfo)
    async def index():
        return ServiceInfo(name=settings.app_name, endpoints=ENDPOINTS, temp_ranges=temp_ranges())

    @app.get("/health", response_model=HealthStatus)
    async def health():
        return HealthStatus()

    app.include_router(weather_router, tags=["weather"])

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Weather server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
