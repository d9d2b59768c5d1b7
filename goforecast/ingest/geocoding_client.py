"""Google geocoding client: address -> latitude/longitude."""

import logging

import httpx
from pydantic import ValidationError

from goforecast.config.defaults import (
    DEFAULT_TIMEOUT,
    GEOCODE_HOST,
    GEOCODE_PATH,
    GEOCODE_SCHEME,
)
from goforecast.errors import (
    DecodeError,
    MalformedURL,
    NoResultsError,
    TransportError,
    UnexpectedStatus,
)
from goforecast.models.geocoding import GeocodingResponse, Location

logger = logging.getLogger(__name__)

SUCCESS_CODES = (200, 201)


def parse_geocoding_addr(addr: str) -> dict[str, list[str]]:
    """Build the geocoding query values for a free-text address."""
    return {"address": [addr], "sensor": ["false"]}


def build_geocoding_url(
    scheme: str,
    vals: dict[str, list[str]] | None = None,
    host: str = GEOCODE_HOST,
    path: str = GEOCODE_PATH,
) -> httpx.URL:
    """Build the geocoding endpoint URL with the given query values.

    With no values the URL carries no query component at all.
    """
    try:
        if vals:
            return httpx.URL(scheme=scheme, host=host, path=path, params=vals)
        return httpx.URL(scheme=scheme, host=host, path=path)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedURL(f"invalid geocoding url: {e}") from e


def get_geocoding_location(
    client: httpx.Client, url: httpx.URL, timeout: float = DEFAULT_TIMEOUT
) -> GeocodingResponse:
    """GET the geocoding URL and decode the response.

    Only 200 and 201 count as success; redirects are reported, not followed.
    """
    try:
        resp = client.get(url, timeout=timeout, follow_redirects=False)
    except httpx.RequestError as e:
        logger.error("Geocoding request failed for %s: %s", url, e)
        raise TransportError(str(e)) from e

    if resp.status_code not in SUCCESS_CODES:
        logger.error("Geocoding returned %d", resp.status_code)
        raise UnexpectedStatus(resp.status_code)

    try:
        geo = GeocodingResponse.model_validate_json(resp.content)
    except ValidationError as e:
        logger.error("Could not decode geocoding response: %s", e)
        raise DecodeError(f"could not decode geocoding response: {e}") from e

    if not geo.results:
        detail = geo.error_message or geo.status
        msg = "no geocoding results returned"
        if detail:
            msg = f"{msg} ({detail})"
        raise NoResultsError(msg)
    return geo


class GeocodingClient:
    def __init__(
        self,
        client: httpx.Client | None = None,
        scheme: str = GEOCODE_SCHEME,
        host: str = GEOCODE_HOST,
        path: str = GEOCODE_PATH,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.client = client or httpx.Client()
        self.scheme = scheme
        self.host = host
        self.path = path
        self.timeout = timeout

    def lookup(self, address: str) -> Location:
        """Resolve an address to the coordinates of its top match."""
        url = build_geocoding_url(
            self.scheme, parse_geocoding_addr(address), self.host, self.path
        )
        geo = get_geocoding_location(self.client, url, self.timeout)
        location = geo.first_location()
        logger.info(
            "Geocoded %r to %.4f,%.4f (%d results)",
            address, location.lat, location.lng, len(geo.results),
        )
        return location

    def close(self) -> None:
        self.client.close()
