"""Async client for the National Weather Service API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from ..config import DEFAULT_USER_AGENT
from .errors import FetchError, LocatorError
from .models import Coordinates, ForecastPeriod, ForecastPeriods

logger = structlog.get_logger(__name__)


class NWSClient:
    BASE_URL = "https://api.weather.gov"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.client = client or httpx.AsyncClient()
        # api.weather.gov rejects requests without an identifying User-Agent
        self.headers = {
            "Content-Type": "application/geojson",
            "User-Agent": user_agent,
        }

    async def _get(self, endpoint: str) -> Dict[str, Any]:
        url = endpoint if endpoint.startswith("http") else f"{self.BASE_URL}{endpoint}"
        resp = await self.client.get(url, headers=self.headers)
        resp.raise_for_status()
        return resp.json()

    async def get_forecast_url(self, coords: Coordinates) -> str:
        """Look up the gridpoint forecast URL covering ``coords``."""
        endpoint = f"/points/{coords.latitude:.5f},{coords.longitude:.5f}"
        try:
            points = await self._get(endpoint)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("NWS points request failed", endpoint=endpoint, error=str(e))
            raise LocatorError(LocatorError.Kind.TRANSPORT, str(e)) from e

        try:
            forecast_url = points["properties"]["forecast"]
        except (KeyError, TypeError):
            forecast_url = None
        if isinstance(forecast_url, str):
            forecast_url = forecast_url.strip('"')
        if not forecast_url or not isinstance(forecast_url, str):
            logger.info("no forecast URL", endpoint=endpoint)
            raise LocatorError(LocatorError.Kind.NOT_FOUND, endpoint)
        return forecast_url

    async def get_forecast_periods(self, forecast_url: str) -> List[ForecastPeriod]:
        """Fetch and decode every forecast period, in the order NWS issued them."""
        try:
            forecast = await self._get(forecast_url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("NWS forecast request failed", url=forecast_url, error=str(e))
            raise FetchError(FetchError.Kind.TRANSPORT, str(e)) from e

        try:
            raw_periods = forecast["properties"]["periods"]
        except (KeyError, TypeError):
            raw_periods = None
        if not raw_periods:
            logger.info("no forecast periods", url=forecast_url)
            raise FetchError(FetchError.Kind.EMPTY, forecast_url)

        try:
            periods = ForecastPeriods.validate_python(raw_periods)
        except ValidationError as e:
            logger.warning("malformed forecast periods", url=forecast_url, error=str(e))
            raise FetchError(FetchError.Kind.DECODE, str(e)) from e
        logger.debug("fetched forecast periods", url=forecast_url, count=len(periods))
        return periods
