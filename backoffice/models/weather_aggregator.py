"""
Daily weather aggregation.

Reduces one day of hourly observations to the ``EditionWeather`` summary shown
on an edition page. Everything here is a pure function of its inputs, apart
from ``fetched_at`` which defaults to the current time.
"""
from datetime import date, datetime
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from backoffice.schemas.weather import (
    EditionWeather,
    HourlyWeatherDTO,
    TemperatureSummary,
    WeatherCondition,
    WindSummary,
)

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# Condition thresholds
HEAVY_RAIN_MM = 10.0
OVERCAST_PCT = 75.0
PARTLY_CLOUDY_PCT = 30.0


def _series(values: Iterable[Optional[float]]) -> pd.Series:
    """Hourly values as floats, None becoming NaN."""
    return pd.Series(list(values), dtype="float64")


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2), not to even."""
    factor = 10 ** decimals
    return float(np.floor(value * factor + 0.5) / factor)


def average(values: Iterable[Optional[float]]) -> float:
    """Mean of the non-null entries; 0 when there are none."""
    mean = _series(values).mean(skipna=True)
    return 0.0 if pd.isna(mean) else float(mean)


def total(values: Iterable[Optional[float]]) -> float:
    """Sum treating missing hours as 0."""
    return float(_series(values).fillna(0.0).sum())


def determine_condition(precipitation: float, cloud_cover: float) -> WeatherCondition:
    """Classify the day. Precipitation always wins over cloud cover."""
    if precipitation > HEAVY_RAIN_MM:
        return WeatherCondition.RAINY
    if precipitation > 0:
        return WeatherCondition.LIGHT_RAIN
    if cloud_cover > OVERCAST_PCT:
        return WeatherCondition.CLOUDY
    if cloud_cover > PARTLY_CLOUDY_PCT:
        return WeatherCondition.PARTLY_CLOUDY
    return WeatherCondition.SUNNY


def wind_direction_text(degrees: float) -> str:
    """8-point compass label, 0° = N going clockwise; 360° wraps to N."""
    index = int(round_half_up(degrees / 45)) % 8
    return COMPASS_POINTS[index]


def aggregate_hourly(
    day: date,
    hourly: HourlyWeatherDTO,
    fetched_at: Optional[datetime] = None,
) -> EditionWeather:
    """Summarise one day of hourly data.

    The temperature series must hold at least one observation; providers
    report days without any as unavailable before they get here.
    """
    temperature = _series(hourly.temperature_2m)
    avg_temp = average(hourly.temperature_2m)
    min_temp = float(temperature.min(skipna=True))
    max_temp = float(temperature.max(skipna=True))

    precipitation = total(hourly.precipitation)
    humidity = average(hourly.relative_humidity_2m)
    pressure = average(hourly.surface_pressure)
    cloud_cover = average(hourly.cloud_cover)
    wind_speed = average(hourly.wind_speed_10m)
    wind_direction = average(hourly.wind_direction_10m)

    condition = determine_condition(precipitation, cloud_cover)

    return EditionWeather(
        date=day.isoformat(),
        temperature=TemperatureSummary(
            avg=round_half_up(avg_temp, 1),
            min=round_half_up(min_temp, 1),
            max=round_half_up(max_temp, 1),
        ),
        condition=condition,
        condition_text=condition.text,
        precipitation=round_half_up(precipitation, 1),
        wind=WindSummary(
            speed=round_half_up(wind_speed, 1),
            direction=int(round_half_up(wind_direction)),
            direction_text=wind_direction_text(wind_direction),
        ),
        humidity=int(round_half_up(humidity)),
        pressure=int(round_half_up(pressure)),
        cloud_cover=int(round_half_up(cloud_cover)),
        fetched_at=fetched_at or datetime.utcnow(),
    )
