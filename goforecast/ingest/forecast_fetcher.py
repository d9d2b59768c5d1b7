"""Forecast fetcher: current conditions for a geocoded location."""

import logging

from goforecast.ingest.forecast_client import TIME_NOW, ForecastIoClient, Units
from goforecast.models.forecast import Forecast
from goforecast.models.geocoding import Location

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    """Format a coordinate with two decimal places; further digits are dropped."""
    return f"{value:.2f}"


class ForecastFetcher:
    def __init__(self, forecast_client: ForecastIoClient):
        self.forecast = forecast_client

    def fetch(self, api_key: str, location: Location) -> Forecast:
        """Fetch current conditions in US units.

        ForecastFetchError from the client propagates unchanged.
        """
        lat = format_coordinate(location.lat)
        lng = format_coordinate(location.lng)
        logger.info("Fetching current forecast for %s,%s", lat, lng)
        return self.forecast.get_forecast(api_key, lat, lng, TIME_NOW, Units.US)
