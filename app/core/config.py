from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", frozen=True)

    # App
    app_name: str = Field(default="Weather API")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Listener
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Network safety
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    # api.weather.gov answers 403 without a User-Agent
    nws_base_url: str = Field(default="https://api.weather.gov")
    nws_user_agent: str = Field(default="WeatherApp/1.0 (contact@example.com)", min_length=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
