"""Console output for forecasts."""

import sys
from typing import TextIO

from goforecast.models.forecast import Forecast


def format_forecast_text(fc: Forecast, address: str) -> str:
    """Plain text report of current conditions, units fixed to US."""
    c = fc.currently
    lines = [
        f"Displaying current forecast for {address}",
        "",
        "---Currently---",
        f"Summary: {c.summary}",
        "",
        f"Temperature: {c.temperature:.2f} F",
        f"Pressure: {c.pressure:.2f} kPa",
        f"Wind Speed: {c.wind_speed:.2f} mph",
        f"Precipitation Chance: {c.precip_probability:.2f}%",
    ]
    return "\n".join(lines)


def render_forecast(fc: Forecast, address: str, out: TextIO | None = None) -> None:
    print(format_forecast_text(fc, address), file=out or sys.stdout)
