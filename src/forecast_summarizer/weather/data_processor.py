"""Weather data processing utilities."""

from __future__ import annotations

from typing import Iterable, List

import structlog

from .models import ForecastPeriod, SimplifiedForecastPeriod

logger = structlog.get_logger(__name__)


class WeatherProcessor:
    def simplify_period(self, period: ForecastPeriod) -> SimplifiedForecastPeriod:
        return SimplifiedForecastPeriod(
            name=period.name,
            start_time=period.start_time,
            end_time=period.end_time,
            temperature=f"{period.temperature}{period.temperature_unit}",
            detailed_forecast=period.detailed_forecast,
            relative_humidity=f"{period.relative_humidity.value}%",
            wind_speed=f"{period.wind_speed} {period.wind_direction}",
        )

    def simplify(self, periods: Iterable[ForecastPeriod]) -> List[SimplifiedForecastPeriod]:
        simplified = [self.simplify_period(p) for p in periods]
        logger.debug("simplify", count=len(simplified))
        return simplified
