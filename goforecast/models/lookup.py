"""Result of a single address lookup."""

from dataclasses import dataclass

from goforecast.models.forecast import Forecast
from goforecast.models.geocoding import Location


@dataclass(frozen=True)
class LookupResult:
    address: str
    location: Location
    forecast: Forecast
