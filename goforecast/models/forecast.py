"""Forecast.io response models.

Field names follow the service's camelCase payload through aliases.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ForecastModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataPoint(_ForecastModel):
    time: int | None = None
    summary: str = ""
    icon: str | None = None
    temperature: float = 0.0
    apparent_temperature: float | None = None
    pressure: float = 0.0
    wind_speed: float = 0.0
    wind_bearing: float | None = None
    precip_probability: float = 0.0
    precip_intensity: float | None = None
    humidity: float | None = None


class Flags(_ForecastModel):
    units: str | None = None


class Forecast(_ForecastModel):
    latitude: float
    longitude: float
    timezone: str | None = None
    offset: float | None = None
    currently: DataPoint
    flags: Flags | None = None
