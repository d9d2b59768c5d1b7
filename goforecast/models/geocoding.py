"""Geocoding API response models.

Only the fields we read are modelled. ``geometry`` and ``location`` are
optional because the service may omit them on partial matches.
"""

from pydantic import BaseModel

from goforecast.errors import NoResultsError


class Location(BaseModel):
    lat: float
    lng: float


class Geometry(BaseModel):
    location: Location | None = None


class GeocodingResult(BaseModel):
    formatted_address: str | None = None
    geometry: Geometry | None = None


class GeocodingResponse(BaseModel):
    results: list[GeocodingResult] = []
    status: str | None = None
    error_message: str | None = None

    def first_location(self) -> Location:
        """Return the location of the top match.

        Ambiguous addresses resolve to whatever the service ranked first.
        """
        if not self.results:
            raise NoResultsError("no geocoding results returned")
        geometry = self.results[0].geometry
        if geometry is None or geometry.location is None:
            raise NoResultsError("first geocoding result has no location")
        return geometry.location
