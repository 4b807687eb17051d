"""High level orchestrator for forecast summaries."""

from __future__ import annotations

from typing import Optional

import structlog
from prometheus_client import Counter

from .data_processor import WeatherProcessor
from .errors import (
    FetchError,
    GeocodeError,
    LocatorError,
    PipelineFailure,
    SummarizeError,
)
from .geocoder import CensusGeocoder
from .nws_client import NWSClient
from .summarizer import Summarizer

logger = structlog.get_logger(__name__)

MISSING_ADDRESS = "address parameter is required"
GEOCODE_FAILED = "error geocoding address"
LOCATE_FAILED = "error getting forecast URL"
FETCH_FAILED = "error getting forecast periods"
SUMMARIZE_FAILED = "error summarizing forecast"


class WeatherAgent:
    """Runs address -> coordinates -> forecast URL -> periods -> summary.

    The first failing stage ends the request with a :class:`PipelineFailure`
    carrying a generic reason; the stage error is chained for server logs.
    ``counter`` is incremented once per call, before anything else happens.
    """

    def __init__(
        self,
        geocoder: CensusGeocoder,
        client: NWSClient,
        summarizer: Summarizer,
        counter: Counter,
        processor: Optional[WeatherProcessor] = None,
    ) -> None:
        self.geocoder = geocoder
        self.client = client
        self.summarizer = summarizer
        self.counter = counter
        self.processor = processor or WeatherProcessor()

    async def get_forecast_summary(self, address: Optional[str]) -> str:
        self.counter.inc()

        if not address:
            raise PipelineFailure(MISSING_ADDRESS, 400)

        try:
            coords = await self.geocoder.geocode(address)
        except GeocodeError as e:
            raise PipelineFailure(GEOCODE_FAILED, 502) from e

        try:
            forecast_url = await self.client.get_forecast_url(coords)
        except LocatorError as e:
            raise PipelineFailure(LOCATE_FAILED, 502) from e

        try:
            periods = await self.client.get_forecast_periods(forecast_url)
        except FetchError as e:
            raise PipelineFailure(FETCH_FAILED, 502) from e

        simplified = self.processor.simplify(periods)

        try:
            summary = await self.summarizer.summarize(simplified)
        except SummarizeError as e:
            raise PipelineFailure(SUMMARIZE_FAILED, 502) from e

        logger.info("forecast summarized", address=address, periods=len(simplified))
        return summary
