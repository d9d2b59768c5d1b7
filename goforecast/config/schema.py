"""Pydantic v2 configuration schema with strict validation."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from goforecast.config.defaults import (
    DEFAULT_TIMEOUT,
    FORECAST_BASE_URL,
    FORECAST_IO_ENV_KEY,
    GEOCODE_HOST,
    GEOCODE_PATH,
    GEOCODE_SCHEME,
    STATE_FILENAME,
)


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    scheme: Literal["http", "https"] = GEOCODE_SCHEME
    host: str = Field(default=GEOCODE_HOST, min_length=1)
    path: str = GEOCODE_PATH
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = Field(default=FORECAST_BASE_URL, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)


class StateConfig(BaseModel):
    model_config = {"extra": "forbid"}

    dir: Path | None = None  # None means the user's home directory
    filename: str = Field(default=STATE_FILENAME, min_length=1)
    api_key_env: str = Field(default=FORECAST_IO_ENV_KEY, min_length=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    forecast: ForecastConfig = ForecastConfig()
    state: StateConfig = StateConfig()
