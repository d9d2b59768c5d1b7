"""Lookup pipeline: address -> coordinates -> API key -> forecast."""

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx

from goforecast.config.schema import AppConfig
from goforecast.ingest.forecast_client import ForecastIoClient
from goforecast.ingest.forecast_fetcher import ForecastFetcher
from goforecast.ingest.geocoding_client import GeocodingClient
from goforecast.models.lookup import LookupResult
from goforecast.storage.key_resolver import KeyResolver
from goforecast.storage.state_repo import StateRepo

logger = logging.getLogger(__name__)


class LookupPipeline:
    def __init__(
        self,
        config: AppConfig,
        state_dir: str | Path,
        http_client: httpx.Client | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.config = config
        self.state_dir = Path(state_dir)
        self.http_client = http_client
        self.environ = environ

    def run(self, address: str) -> LookupResult:
        """Run one lookup, stopping at the first failure.

        Errors are GoforecastError subclasses and propagate to the caller.
        """
        # Both services share one client; only close it if we created it.
        client = self.http_client or httpx.Client()
        try:
            return self._run(client, address)
        finally:
            if self.http_client is None:
                client.close()

    def _run(self, client: httpx.Client, address: str) -> LookupResult:
        geo_cfg = self.config.geocoding
        geocoder = GeocodingClient(
            client,
            scheme=geo_cfg.scheme,
            host=geo_cfg.host,
            path=geo_cfg.path,
            timeout=geo_cfg.timeout,
        )
        location = geocoder.lookup(address)

        state_cfg = self.config.state
        resolver = KeyResolver(
            StateRepo(self.state_dir, state_cfg.filename),
            env_var=state_cfg.api_key_env,
            environ=self.environ,
        )
        api_key = resolver.resolve()

        fc_cfg = self.config.forecast
        fetcher = ForecastFetcher(
            ForecastIoClient(client, base_url=fc_cfg.base_url, timeout=fc_cfg.timeout)
        )
        forecast = fetcher.fetch(api_key, location)
        logger.info("Lookup for %r complete", address)
        return LookupResult(address=address, location=location, forecast=forecast)
