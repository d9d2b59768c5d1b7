"""Forecast.io (Dark Sky) API client."""

import logging
from enum import StrEnum

import httpx
from pydantic import ValidationError

from goforecast.config.defaults import DEFAULT_TIMEOUT, FORECAST_BASE_URL
from goforecast.errors import ForecastFetchError
from goforecast.models.forecast import Forecast

logger = logging.getLogger(__name__)

# Time token meaning "current conditions"; any other value is sent as a
# UNIX timestamp or ISO time after the coordinates.
TIME_NOW = "now"


class Units(StrEnum):
    US = "us"
    SI = "si"
    CA = "ca"
    UK = "uk"
    AUTO = "auto"


def _mask_key(key: str) -> str:
    return f"{key[:4]}..." if len(key) > 4 else "***"


class ForecastIoClient:
    """Thin wrapper around the Forecast.io forecast endpoint.

    All failures surface as ForecastFetchError so callers only handle one
    type regardless of whether the key, the network or the payload was bad.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = FORECAST_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.client = client or httpx.Client()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def forecast_url(self, key: str, lat: str, lng: str, time: str = TIME_NOW) -> str:
        coord = f"{lat},{lng}"
        if time != TIME_NOW:
            coord = f"{coord},{time}"
        return f"{self.base_url}/{key}/{coord}"

    def get_forecast(
        self,
        key: str,
        lat: str,
        lng: str,
        time: str = TIME_NOW,
        units: Units = Units.US,
    ) -> Forecast:
        """Fetch the forecast for a coordinate pair given as strings."""
        url = self.forecast_url(key, lat, lng, time)
        params = {"units": str(units)}
        try:
            resp = self.client.get(url, params=params, timeout=self.timeout)
        except httpx.InvalidURL as e:
            logger.error("Invalid forecast URL for key=%s: %s", _mask_key(key), e)
            raise ForecastFetchError(f"invalid forecast request: {e}") from e
        except httpx.RequestError as e:
            logger.error(
                "Forecast request failed for key=%s %s,%s: %s",
                _mask_key(key), lat, lng, e,
            )
            raise ForecastFetchError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            body = resp.text
            logger.error("Forecast API %d for %s,%s -> %s", resp.status_code, lat, lng, body)
            raise ForecastFetchError(f"HTTP {resp.status_code}: {body}", resp.status_code)

        try:
            return Forecast.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error("Could not decode forecast for %s,%s: %s", lat, lng, e)
            raise ForecastFetchError(f"could not decode forecast: {e}") from e

    def close(self) -> None:
        self.client.close()
