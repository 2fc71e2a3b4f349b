"""Domain model for SMHI point forecasts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

SWEDISH = "sv-SE"
ENGLISH = "en-US"
LOCALES = (SWEDISH, ENGLISH)


class PrecipitationCategory(IntEnum):
    """SMHI `pcat` codes."""

    NO_PRECIPITATION = 0
    SNOW = 1
    SNOW_AND_RAIN = 2
    RAIN = 3
    DRIZZLE = 4
    FREEZING_RAIN = 5
    FREEZING_DRIZZLE = 6


class WeatherSymbol(IntEnum):
    """SMHI `Wsymb2` codes."""

    CLEAR_SKY = 1
    NEARLY_CLEAR_SKY = 2
    VARIABLE_CLOUDINESS = 3
    HALFCLEAR_SKY = 4
    CLOUDY_SKY = 5
    OVERCAST = 6
    FOG = 7
    LIGHT_RAIN_SHOWERS = 8
    MODERATE_RAIN_SHOWERS = 9
    HEAVY_RAIN_SHOWERS = 10
    THUNDERSTORM = 11
    LIGHT_SLEET_SHOWERS = 12
    MODERATE_SLEET_SHOWERS = 13
    HEAVY_SLEET_SHOWERS = 14
    LIGHT_SNOW_SHOWERS = 15
    MODERATE_SNOW_SHOWERS = 16
    HEAVY_SNOW_SHOWERS = 17
    LIGHT_RAIN = 18
    MODERATE_RAIN = 19
    HEAVY_RAIN = 20
    THUNDER = 21
    LIGHT_SLEET = 22
    MODERATE_SLEET = 23
    HEAVY_SLEET = 24
    LIGHT_SNOWFALL = 25
    MODERATE_SNOWFALL = 26
    HEAVY_SNOWFALL = 27


@dataclass
class Geometry:
    """GeoJSON-style geometry of the forecast point.

    Coordinates are [longitude, latitude] pairs as returned by the API.
    """

    type: str
    coordinates: list[list[float]] = field(default_factory=list)


@dataclass
class Forecast:
    """Forecast for one valid time, flattened from the API parameter list.

    Every field starts at its zero value; parameters missing from the
    response leave it untouched. Integer fields mirror the narrow integer
    types SMHI documents for them, see mapper.to_uint8/to_int8.

    Attributes:
        timestamp: Valid time of this forecast step (timezone-aware).
        air_pressure: Mean sea level pressure in hPa (`msl`).
        air_temperature: Air temperature in °C (`t`).
        horizontal_visibility: Visibility in km (`vis`).
        wind_direction: Wind direction in degrees (`wd`).
        wind_speed: Wind speed in m/s (`ws`).
        relative_humidity: Relative humidity in percent (`r`).
        thunder_probability: Thunder probability in percent (`tstm`).
        mean_total_cloud_cover: Total cloud cover in octas, 0-8 (`tcc_mean`).
        mean_low_level_cloud_cover: Low cloud cover in octas (`lcc_mean`).
        mean_medium_level_cloud_cover: Medium cloud cover in octas (`mcc_mean`).
        mean_high_level_cloud_cover: High cloud cover in octas (`hcc_mean`).
        wind_gust_speed: Wind gust speed in m/s (`gust`).
        minimum_precipitation_intensity: mm/h (`pmin`).
        maximum_precipitation_intensity: mm/h (`pmax`).
        mean_precipitation_intensity: mm/h (`pmean`).
        median_precipitation_intensity: mm/h (`pmedian`).
        percent_of_precipitation_in_frozen_form: Percent, -9 when there is
            no precipitation (`spp`).
        precipitation_category: PrecipitationCategory member, or the raw
            int when SMHI sends a code outside 0-6 (`pcat`).
        precipitation_category_description: Locale -> text, empty when the
            code has no known description.
        weather_symbol: WeatherSymbol member, or the raw int when the code
            is outside 1-27 (`Wsymb2`). 0 means no symbol was sent.
        weather_symbol_description: Locale -> text, empty when unknown.
    """

    timestamp: datetime
    air_pressure: float = 0.0
    air_temperature: float = 0.0
    horizontal_visibility: float = 0.0
    wind_direction: int = 0
    wind_speed: float = 0.0
    relative_humidity: int = 0
    thunder_probability: int = 0
    mean_total_cloud_cover: int = 0
    mean_low_level_cloud_cover: int = 0
    mean_medium_level_cloud_cover: int = 0
    mean_high_level_cloud_cover: int = 0
    wind_gust_speed: float = 0.0
    minimum_precipitation_intensity: float = 0.0
    maximum_precipitation_intensity: float = 0.0
    mean_precipitation_intensity: float = 0.0
    median_precipitation_intensity: float = 0.0
    percent_of_precipitation_in_frozen_form: int = 0
    precipitation_category: PrecipitationCategory | int = PrecipitationCategory.NO_PRECIPITATION
    precipitation_category_description: dict[str, str] = field(default_factory=dict)
    weather_symbol: WeatherSymbol | int = 0
    weather_symbol_description: dict[str, str] = field(default_factory=dict)

    def describe(self, locale: str = SWEDISH) -> str:
        """Weather symbol text in the given locale, or "" if unavailable."""
        return self.weather_symbol_description.get(locale, "")


@dataclass
class PointForecast:
    """A full point forecast: issue times, location and ordered steps."""

    approved_time: datetime
    reference_time: datetime
    geometry: Geometry
    time_series: list[Forecast] = field(default_factory=list)
