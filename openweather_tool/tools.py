import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from openweather_tool.config import WeatherSettings
from openweather_tool.errors import RemoteRejection, TransportOrDecodeFailure
from openweather_tool.models import (
    ErrorKind,
    QueryParameters,
    WeatherFailure,
    WeatherResult,
    WeatherSuccess,
)

logger = logging.getLogger(__name__)

WEATHER_TOOL = {
    "type": "function",
    "function": {
        "name": "get_current_weather",
        "description": "Fetch current weather data for a specified location.",
        "parameters": {
            "type": "object",
            "properties": {
                "q": {"type": "string", "description": "City name for the weather query."},
                "id": {"type": "integer", "description": "City ID for the weather query."},
                "lat": {"type": "number", "description": "Latitude of the location."},
                "lon": {"type": "number", "description": "Longitude of the location."},
                "zip": {"type": "string", "description": "Zip code for the weather query."},
                "units": {
                    "type": "string",
                    "enum": ["metric", "imperial", "standard"],
                    "description": "Units for temperature (e.g., metric, imperial).",
                },
                "lang": {"type": "string", "description": "Language for the response."},
                "Mode": {"type": "string", "description": "Format of the response (e.g., xml, html)."},
                "appid": {"type": "string", "description": "API key for authentication."},
            },
        },
    },
}

TOOL_LIST = [WEATHER_TOOL]


class WeatherQuery:
    """Current-weather lookup against the OpenWeatherMap REST API."""

    name = "get_current_weather"

    def __init__(self, settings: WeatherSettings):
        self.settings = settings

    def build_url(self, params: QueryParameters) -> httpx.URL:
        query = params.to_query_params(self.settings.api_key)
        return httpx.URL(f"{self.settings.base_url}/weather", params=query)

    async def _request(self, url: httpx.URL) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise TransportOrDecodeFailure(f"request failed: {exc!r}") from exc

        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise RemoteRejection(response.status_code, body)

        try:
            return response.json()
        except ValueError as exc:
            raise TransportOrDecodeFailure(
                f"response body is not JSON: {exc}", status_code=response.status_code
            ) from exc

    async def fetch(self, params: QueryParameters) -> WeatherResult:
        """Perform the request. Never raises for remote or transport failures."""
        url = self.build_url(params)
        try:
            data = await self._request(url)
        except RemoteRejection as exc:
            logger.error(
                "Error fetching current weather data: HTTP %s, body=%r",
                exc.status_code,
                exc.body,
            )
            return WeatherFailure(
                kind=ErrorKind.remote_rejection,
                status_code=exc.status_code,
                detail=exc.body,
            )
        except TransportOrDecodeFailure as exc:
            logger.error("Error fetching current weather data: %s", exc)
            return WeatherFailure(
                kind=ErrorKind.transport_or_decode,
                status_code=exc.status_code,
                detail=str(exc),
            )
        return WeatherSuccess(data=data)

    async def execute(self, params: QueryParameters | Mapping[str, Any] | None = None) -> Any:
        """Tool entry point: decoded JSON on success, the fixed error record otherwise."""
        if params is not None and not isinstance(params, (QueryParameters, Mapping)):
            logger.error("Weather query parameters must be a mapping, got %r", params)
            return WeatherFailure(
                kind=ErrorKind.invalid_parameters, detail=repr(params)
            ).to_payload()
        if not isinstance(params, QueryParameters):
            try:
                params = QueryParameters.model_validate(dict(params or {}))
            except ValidationError as exc:
                logger.error("Invalid weather query parameters: %s", exc)
                return WeatherFailure(
                    kind=ErrorKind.invalid_parameters, detail=str(exc)
                ).to_payload()
        result = await self.fetch(params)
        return result.to_payload()


async def execute_tool_call(
    name: str, arguments: str | Mapping[str, Any] | None, query: WeatherQuery
) -> str:
    """Dispatch a function call from an LLM. Always returns a JSON string, never raises."""
    if name != WeatherQuery.name:
        logger.error("Unknown tool requested: %r", name)
        return json.dumps({"error": f"Unknown tool '{name}'."})

    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments) if arguments.strip() else {}
        except json.JSONDecodeError as exc:
            logger.error("Malformed tool arguments: %r (%s)", arguments, exc)
            return json.dumps({"error": "Tool arguments are not valid JSON."})

    if arguments is not None and not isinstance(arguments, Mapping):
        logger.error("Tool arguments must be an object, got %r", arguments)
        return json.dumps({"error": "Tool arguments must be a JSON object."})

    result = await query.execute(arguments)
    return json.dumps(result)
