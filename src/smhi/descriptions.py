"""Swedish and English descriptions for SMHI enumeration codes.

Both tables are read-only. Lookups hand out a fresh dict so a caller that
edits a Forecast's description never touches the shared data.
"""

from __future__ import annotations

from types import MappingProxyType

from smhi.models import ENGLISH, SWEDISH, PrecipitationCategory, WeatherSymbol

PC = PrecipitationCategory
WS = WeatherSymbol

PRECIPITATION_CATEGORY_DESCRIPTIONS = MappingProxyType({
    PC.NO_PRECIPITATION: MappingProxyType({SWEDISH: "Ingen nederbörd", ENGLISH: "No precipitation"}),
    PC.SNOW: MappingProxyType({SWEDISH: "Snö", ENGLISH: "Snow"}),
    PC.SNOW_AND_RAIN: MappingProxyType({SWEDISH: "Snö och regn", ENGLISH: "Snow and rain"}),
    PC.RAIN: MappingProxyType({SWEDISH: "Regn", ENGLISH: "Rain"}),
    PC.DRIZZLE: MappingProxyType({SWEDISH: "Duggregn", ENGLISH: "Drizzle"}),
    PC.FREEZING_RAIN: MappingProxyType({SWEDISH: "Frysande regn", ENGLISH: "Freezing rain"}),
    PC.FREEZING_DRIZZLE: MappingProxyType({SWEDISH: "Underkylt regn", ENGLISH: "Freezing drizzle"}),
})

WEATHER_SYMBOL_DESCRIPTIONS = MappingProxyType({
    WS.CLEAR_SKY: MappingProxyType({SWEDISH: "Klar himmel", ENGLISH: "Clear sky"}),
    WS.NEARLY_CLEAR_SKY: MappingProxyType({SWEDISH: "Nästan klar himmel", ENGLISH: "Nearly clear sky"}),
    WS.VARIABLE_CLOUDINESS: MappingProxyType({SWEDISH: "Växlande molnighet", ENGLISH: "Variable cloudiness"}),
    WS.HALFCLEAR_SKY: MappingProxyType({SWEDISH: "Halvklar himmel", ENGLISH: "Halfclear sky"}),
    WS.CLOUDY_SKY: MappingProxyType({SWEDISH: "Molnig himmel", ENGLISH: "Cloudy sky"}),
    WS.OVERCAST: MappingProxyType({SWEDISH: "Mulet", ENGLISH: "Overcast"}),
    WS.FOG: MappingProxyType({SWEDISH: "Dimma", ENGLISH: "Fog"}),
    WS.LIGHT_RAIN_SHOWERS: MappingProxyType({SWEDISH: "Lätta regnskurar", ENGLISH: "Light rain showers"}),
    WS.MODERATE_RAIN_SHOWERS: MappingProxyType({SWEDISH: "Måttliga regnskurar", ENGLISH: "Moderate rain showers"}),
    WS.HEAVY_RAIN_SHOWERS: MappingProxyType({SWEDISH: "Kraftiga regnskurar", ENGLISH: "Heavy rain showers"}),
    WS.THUNDERSTORM: MappingProxyType({SWEDISH: "Åskoväder", ENGLISH: "Thunderstorm"}),
    # Swedish text for sleet showers repeats the rain showers wording
    WS.LIGHT_SLEET_SHOWERS: MappingProxyType({SWEDISH: "Lätta regnskurar", ENGLISH: "Light sleet showers"}),
    WS.MODERATE_SLEET_SHOWERS: MappingProxyType({SWEDISH: "Måttliga regnskurar", ENGLISH: "Moderate sleet showers"}),
    WS.HEAVY_SLEET_SHOWERS: MappingProxyType({SWEDISH: "Kraftiga regnskurar", ENGLISH: "Heavy sleet showers"}),
    WS.LIGHT_SNOW_SHOWERS: MappingProxyType({SWEDISH: "Lätta snöbyar", ENGLISH: "Light snow showers"}),
    WS.MODERATE_SNOW_SHOWERS: MappingProxyType({SWEDISH: "Måttliga snöbyar", ENGLISH: "Moderate snow showers"}),
    WS.HEAVY_SNOW_SHOWERS: MappingProxyType({SWEDISH: "Kraftiga snöbyar", ENGLISH: "Heavy snow showers"}),
    WS.LIGHT_RAIN: MappingProxyType({SWEDISH: "Duggregn", ENGLISH: "Light rain"}),
    WS.MODERATE_RAIN: MappingProxyType({SWEDISH: "Måttligt regn", ENGLISH: "Moderate rain"}),
    WS.HEAVY_RAIN: MappingProxyType({SWEDISH: "Kraftigt regn", ENGLISH: "Heavy rain"}),
    WS.THUNDER: MappingProxyType({SWEDISH: "Åska", ENGLISH: "Thunder"}),
    WS.LIGHT_SLEET: MappingProxyType({SWEDISH: "Lätt snöblandat regn", ENGLISH: "Light sleet"}),
    WS.MODERATE_SLEET: MappingProxyType({SWEDISH: "Måttligt snöblandat regn", ENGLISH: "Moderate sleet"}),
    WS.HEAVY_SLEET: MappingProxyType({SWEDISH: "Kraftigt snöblandat regn", ENGLISH: "Heavy sleet"}),
    WS.LIGHT_SNOWFALL: MappingProxyType({SWEDISH: "Lätt snöfall", ENGLISH: "Light snowfall"}),
    WS.MODERATE_SNOWFALL: MappingProxyType({SWEDISH: "Måttligt snöfall", ENGLISH: "Moderate snowfall"}),
    WS.HEAVY_SNOWFALL: MappingProxyType({SWEDISH: "Kraftigt snöfall", ENGLISH: "Heavy snowfall"}),
})


def precipitation_category_description(code: int) -> dict[str, str]:
    """Locale -> text for a `pcat` code; empty dict for unknown codes."""
    return dict(PRECIPITATION_CATEGORY_DESCRIPTIONS.get(code, {}))


def weather_symbol_description(code: int) -> dict[str, str]:
    """Locale -> text for a `Wsymb2` code; empty dict for unknown codes."""
    return dict(WEATHER_SYMBOL_DESCRIPTIONS.get(code, {}))
