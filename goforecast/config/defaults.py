"""Fixed endpoints and names used when no config file overrides them."""

GEOCODE_SCHEME = "https"
GEOCODE_HOST = "maps.googleapis.com"
GEOCODE_PATH = "/maps/api/geocode/json"

FORECAST_BASE_URL = "https://api.forecast.io/forecast"

# Environment variable holding the Forecast.io API key.
FORECAST_IO_ENV_KEY = "FORECAST_IO_API_KEY"

# State file kept in the user's home directory.
STATE_FILENAME = ".goforecast"

DEFAULT_TIMEOUT = 30.0
