from openweather_tool.config import WeatherSettings
from openweather_tool.models import (
    FAILURE_MESSAGE,
    ErrorKind,
    QueryParameters,
    UnitsEnum,
    WeatherFailure,
    WeatherResult,
    WeatherSuccess,
)
from openweather_tool.tools import TOOL_LIST, WEATHER_TOOL, WeatherQuery, execute_tool_call

__all__ = [
    "FAILURE_MESSAGE",
    "ErrorKind",
    "QueryParameters",
    "TOOL_LIST",
    "UnitsEnum",
    "WEATHER_TOOL",
    "WeatherFailure",
    "WeatherQuery",
    "WeatherResult",
    "WeatherSettings",
    "WeatherSuccess",
    "execute_tool_call",
]
