"""Client for the US Census Bureau one-line address geocoder."""

from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from .errors import GeocodeError
from .models import Coordinates

logger = structlog.get_logger(__name__)


class CensusGeocoder:
    URL = "https://geocoding.geo.census.gov/geocoder/locations/onelineaddress"
    BENCHMARK = "2020"

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self.client = client or httpx.AsyncClient()

    async def geocode(self, address: str) -> Coordinates:
        """Resolve ``address`` to the coordinates of its first match."""
        params = {"address": address, "benchmark": self.BENCHMARK, "format": "json"}
        try:
            resp = await self.client.get(self.URL, params=params)
            resp.raise_for_status()
            body = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("geocode request failed", address=address, error=str(e))
            raise GeocodeError(GeocodeError.Kind.TRANSPORT, str(e)) from e

        coords = _first_match(body)
        if coords is None:
            logger.info("no address match", address=address)
            raise GeocodeError(GeocodeError.Kind.NO_MATCH, address)
        logger.debug("geocoded", address=address, lat=coords.latitude, lon=coords.longitude)
        return coords


def _first_match(body: Any) -> Optional[Coordinates]:
    try:
        matches = body["result"]["addressMatches"]
        point = matches[0]["coordinates"]
        x, y = point["x"], point["y"]
    except (KeyError, IndexError, TypeError):
        return None
    # bool is an int subclass but never a coordinate
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (x, y)):
        return None
    return Coordinates(latitude=float(y), longitude=float(x))
