"""Data model for geocoding results and NWS forecast periods."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class _NWSModel(BaseModel):
    # upstream types are taken as-is: "54" is not a temperature
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, strict=True
    )


class Measurement(_NWSModel):
    unit_code: str
    value: float


class RelativeHumidity(_NWSModel):
    unit_code: str
    value: int


class ProbabilityOfPrecipitation(_NWSModel):
    unit_code: str
    value: Optional[int] = None


class ForecastPeriod(_NWSModel):
    """One period of ``properties.periods`` from a gridpoint forecast."""

    number: int
    name: str
    start_time: str
    end_time: str
    is_daytime: bool
    temperature: int
    temperature_unit: str
    temperature_trend: Optional[str] = None
    probability_of_precipitation: ProbabilityOfPrecipitation
    dewpoint: Measurement
    relative_humidity: RelativeHumidity
    wind_speed: str
    wind_direction: str
    icon: Optional[str] = None
    short_forecast: str
    detailed_forecast: str


class SimplifiedForecastPeriod(BaseModel):
    """Compact period record serialized into the summarization prompt."""

    model_config = ConfigDict(frozen=True)

    name: str
    start_time: str
    end_time: str
    temperature: str
    detailed_forecast: str
    relative_humidity: str
    wind_speed: str


class FewShotExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    input: str
    output: str


ForecastPeriods = TypeAdapter(List[ForecastPeriod])
SimplifiedForecastPeriods = TypeAdapter(List[SimplifiedForecastPeriod])
