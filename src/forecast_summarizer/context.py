"""Dependency container shared by the API server and the CLI."""

from __future__ import annotations

from typing import Optional

import httpx
from prometheus_client import CollectorRegistry, Counter

from .config import Settings
from .weather.data_processor import WeatherProcessor
from .weather.geocoder import CensusGeocoder
from .weather.nws_client import NWSClient
from .weather.summarizer import Summarizer
from .weather.weather_agent import WeatherAgent


class AppContext:
    """Clients, metrics and the agent for one process."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
        summarizer: Optional[Summarizer] = None,
        registry: Optional[CollectorRegistry] = None,
    ):
        self.settings = settings
        self.http_client = http_client or httpx.AsyncClient()
        self.geocoder = CensusGeocoder(client=self.http_client)
        self.nws_client = NWSClient(client=self.http_client, user_agent=settings.weather_ua)
        self.summarizer = summarizer or Summarizer.connect(
            settings.ollama_base_url, settings.ollama_model
        )
        self.registry = registry or CollectorRegistry()
        self.forecast_counter = Counter(
            "forecast",
            "times the /api/v1/forecast endpoint was called",
            registry=self.registry,
        )
        self.agent = WeatherAgent(
            geocoder=self.geocoder,
            client=self.nws_client,
            summarizer=self.summarizer,
            counter=self.forecast_counter,
            processor=WeatherProcessor(),
        )

    async def aclose(self) -> None:
        await self.http_client.aclose()
        await self.summarizer.client.close()
