import re

from forecast_summarizer.weather.data_processor import WeatherProcessor
from forecast_summarizer.weather.models import ForecastPeriods


def test_simplify_formats_composite_fields(make_periods):
    raw = make_periods(1)[0]
    raw.update(temperature=54, temperatureUnit="F", windSpeed="2 to 6 mph", windDirection="WSW")
    raw["relativeHumidity"]["value"] = 85
    period = ForecastPeriods.validate_python([raw])[0]

    simplified = WeatherProcessor().simplify_period(period)

    assert simplified.temperature == "54F"
    assert simplified.wind_speed == "2 to 6 mph WSW"
    assert simplified.relative_humidity == "85%"
    assert simplified.name == raw["name"]
    assert simplified.start_time == raw["startTime"]
    assert simplified.end_time == raw["endTime"]
    assert simplified.detailed_forecast == raw["detailedForecast"]


def test_simplify_keeps_length_and_order(make_periods):
    periods = ForecastPeriods.validate_python(make_periods(14))

    simplified = WeatherProcessor().simplify(periods)

    assert len(simplified) == 14
    assert [s.name for s in simplified] == [p.name for p in periods]
    for s in simplified:
        assert re.fullmatch(r"-?\d+[^\s\d]+", s.temperature)
        assert re.fullmatch(r"\d+%", s.relative_humidity)
        assert re.fullmatch(r"\d+ mph SW", s.wind_speed)


def test_simplify_negative_temperature(make_periods):
    raw = make_periods(1)[0]
    raw.update(temperature=-4, temperatureUnit="F")
    period = ForecastPeriods.validate_python([raw])[0]
    assert WeatherProcessor().simplify_period(period).temperature == "-4F"


def test_simplify_empty():
    assert WeatherProcessor().simplify([]) == []
