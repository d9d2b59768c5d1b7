"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from goforecast.models.forecast import Forecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def geocode_94109() -> dict:
    return load_fixture("geocode_94109.json")


@pytest.fixture
def forecast_sf() -> dict:
    return load_fixture("forecast_sf.json")


@pytest.fixture
def forecast(forecast_sf: dict) -> Forecast:
    return Forecast.model_validate(forecast_sf)


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    """A fresh directory standing in for $HOME."""
    d = tmp_path / "home"
    d.mkdir()
    return d


@pytest.fixture
def no_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORECAST_IO_API_KEY", raising=False)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoding": {"scheme": "https", "timeout": 5.0},
        "forecast": {"base_url": "https://forecast.example.com/forecast"},
    }
    path = tmp_path / "goforecast.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
