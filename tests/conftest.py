from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.deps import get_nws_client
from app.core.config import Settings
from app.main import create_app
from tests.fakes import BASE, USER_AGENT, FakeNWS


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_name="Weather API",
        nws_base_url=BASE,
        nws_user_agent=USER_AGENT,
    )


@pytest.fixture
def fake_nws() -> FakeNWS:
    return FakeNWS()


@pytest.fixture
def app(settings: Settings, fake_nws: FakeNWS) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_nws_client] = fake_nws.client
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
