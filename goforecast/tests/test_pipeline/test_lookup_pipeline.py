"""Tests for the lookup pipeline with mocked HTTP services."""

from pathlib import Path

import httpx
import pytest
import respx

from goforecast.config.schema import AppConfig
from goforecast.errors import (
    ForecastFetchError,
    MissingAPIKeyError,
    NoResultsError,
    StateReadError,
    UnexpectedStatus,
)
from goforecast.models.state import PersistedState
from goforecast.pipeline.lookup_pipeline import LookupPipeline
from goforecast.storage.state_repo import StateRepo

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
FORECAST_BASE = "https://api.forecast.io/forecast"
ENV = "FORECAST_IO_API_KEY"

SF_GEOCODE = {"results": [{"geometry": {"location": {"lat": 37.79, "lng": -122.42}}}]}


class TestLookupPipeline:
    @respx.mock
    def test_end_to_end_env_key(self, state_dir: Path, forecast_sf: dict):
        geo = respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        fc = respx.get(
            f"{FORECAST_BASE}/env-key/37.79,-122.42", params={"units": "us"}
        ).mock(return_value=httpx.Response(200, json=forecast_sf))

        pipeline = LookupPipeline(AppConfig(), state_dir, environ={ENV: "env-key"})
        result = pipeline.run("94109")

        assert geo.called and fc.called
        assert geo.calls[0].request.url.params["address"] == "94109"
        assert result.address == "94109"
        assert result.location.lat == pytest.approx(37.79)
        assert result.forecast.currently.summary == "Partly Cloudy"
        assert StateRepo(state_dir).restore() == PersistedState(api_key="env-key")

    @respx.mock
    def test_state_key_used(self, state_dir: Path, forecast_sf: dict):
        StateRepo(state_dir).dump(PersistedState(api_key="stored"))
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        fc = respx.get(
            f"{FORECAST_BASE}/stored/37.79,-122.42", params={"units": "us"}
        ).mock(return_value=httpx.Response(200, json=forecast_sf))

        LookupPipeline(AppConfig(), state_dir, environ={ENV: "env-key"}).run("94109")
        assert fc.called

    @respx.mock
    def test_no_results_stops_before_key(self, state_dir: Path):
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        with pytest.raises(NoResultsError):
            LookupPipeline(AppConfig(), state_dir, environ={ENV: "k"}).run("nowhere")
        assert not StateRepo(state_dir).path.exists()

    @respx.mock
    def test_redirect_is_error(self, state_dir: Path):
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(301, headers={"Location": "https://x.example/"})
        )
        with pytest.raises(UnexpectedStatus):
            LookupPipeline(AppConfig(), state_dir, environ={ENV: "k"}).run("94109")

    @respx.mock
    def test_missing_key_skips_forecast(self, state_dir: Path):
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        with pytest.raises(MissingAPIKeyError):
            LookupPipeline(AppConfig(), state_dir, environ={}).run("94109")
        assert respx.calls.call_count == 1

    @respx.mock
    def test_corrupt_state_skips_forecast(self, state_dir: Path):
        StateRepo(state_dir).path.write_text("garbage")
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        with pytest.raises(StateReadError):
            LookupPipeline(AppConfig(), state_dir, environ={ENV: "k"}).run("94109")
        assert respx.calls.call_count == 1

    @respx.mock
    def test_forecast_failure(self, state_dir: Path):
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        respx.get(url__startswith=FORECAST_BASE).mock(
            return_value=httpx.Response(401, text="unauthorized")
        )
        with pytest.raises(ForecastFetchError, match="401"):
            LookupPipeline(AppConfig(), state_dir, environ={ENV: "k"}).run("94109")

    @respx.mock
    def test_configured_endpoints(self, state_dir: Path, forecast_sf: dict):
        config = AppConfig(
            geocoding={"scheme": "http", "host": "geo.example.com", "path": "/geo"},
            forecast={"base_url": "https://fc.example.com/forecast"},
            state={"filename": "alt-state.json", "api_key_env": "ALT_KEY"},
        )
        geo = respx.get(url__startswith="http://geo.example.com/geo").mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        fc = respx.get(
            "https://fc.example.com/forecast/alt/37.79,-122.42", params={"units": "us"}
        ).mock(return_value=httpx.Response(200, json=forecast_sf))

        LookupPipeline(config, state_dir, environ={"ALT_KEY": "alt"}).run("94109")
        assert geo.called and fc.called
        assert (state_dir / "alt-state.json").exists()

    @respx.mock
    def test_injected_client_left_open(self, state_dir: Path, forecast_sf: dict):
        respx.get(url__startswith=GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=SF_GEOCODE)
        )
        respx.get(url__startswith=FORECAST_BASE).mock(
            return_value=httpx.Response(200, json=forecast_sf)
        )
        with httpx.Client() as client:
            LookupPipeline(
                AppConfig(), state_dir, http_client=client, environ={ENV: "k"}
            ).run("94109")
            assert not client.is_closed
