from types import SimpleNamespace

import httpx
import pytest

from forecast_summarizer.config import Settings

GEOCODER_HOST = "geocoding.geo.census.gov"
FORECAST_URL = "https://api.weather.gov/gridpoints/LWX/97,71/forecast"
WHITE_HOUSE = {"x": -77.03654, "y": 38.89767}

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _period(number: int) -> dict:
    day = DAYS[(number - 1) // 2]
    date = 10 + (number - 1) // 2
    daytime = number % 2 == 1
    if daytime:
        start, end = f"2024-06-{date}T06:00:00-04:00", f"2024-06-{date}T18:00:00-04:00"
    else:
        start, end = f"2024-06-{date}T18:00:00-04:00", f"2024-06-{date + 1}T06:00:00-04:00"
    return {
        "number": number,
        "name": day if daytime else f"{day} Night",
        "startTime": start,
        "endTime": end,
        "isDaytime": daytime,
        "temperature": 80 + number if daytime else 60 + number,
        "temperatureUnit": "F",
        "temperatureTrend": None,
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": None},
        "dewpoint": {"unitCode": "wmoUnit:degC", "value": 17.2},
        "relativeHumidity": {"unitCode": "wmoUnit:percent", "value": 60 + number},
        "windSpeed": f"{number} mph",
        "windDirection": "SW",
        "icon": "https://api.weather.gov/icons/land/day/few?size=medium",
        "shortForecast": "Sunny",
        "detailedForecast": f"Sunny, period {number}.",
    }


@pytest.fixture
def make_periods():
    def factory(n: int = 14) -> list:
        return [_period(i) for i in range(1, n + 1)]

    return factory


@pytest.fixture
def settings():
    return Settings(
        log_level="info",
        api_host="127.0.0.1",
        api_port=8080,
        metrics_host="127.0.0.1",
        metrics_port=8081,
        ollama_host="http://localhost",
        ollama_port=11434,
        ollama_model="llama3",
    )


class Upstream:
    """Routes requests for the three upstream services and records them."""

    def __init__(self, matches=None, points=None, forecast=None):
        self.matches = [{"coordinates": WHITE_HOUSE}] if matches is None else matches
        self.points = {"properties": {"forecast": FORECAST_URL}} if points is None else points
        self.forecast = forecast
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODER_HOST:
            return httpx.Response(200, json={"result": {"addressMatches": self.matches}})
        if request.url.path.startswith("/points/"):
            return httpx.Response(200, json=self.points)
        return httpx.Response(200, json=self.forecast)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream(make_periods):
    return Upstream(forecast={"properties": {"periods": make_periods(14)}})


class DummyCompletions:
    def __init__(self, content='{"summary": "Sunny all week."}', error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def completions():
    return DummyCompletions()


@pytest.fixture
def chat_client(completions):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions), closed=False)

    async def close():
        client.closed = True

    client.close = close
    return client
