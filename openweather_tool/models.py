from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

FAILURE_MESSAGE = "An error occurred while fetching current weather data."

# integer coordinates stay integers on the wire
Latitude = Annotated[int, Field(ge=-90, le=90)] | Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[int, Field(ge=-180, le=180)] | Annotated[float, Field(ge=-180, le=180)]


class UnitsEnum(str, Enum):
    metric = "metric"
    imperial = "imperial"
    standard = "standard"


class QueryParameters(BaseModel):
    """Optional query fields for the current-weather endpoint.

    Field names match the wire names, except ``mode`` which is sent as
    ``Mode``. Which location field wins when several are given is left to
    the remote API.
    """

    model_config = ConfigDict(populate_by_name=True)

    q: str | None = None
    id: int | None = None
    lat: Latitude | None = None
    lon: Longitude | None = None
    zip: str | None = None
    units: UnitsEnum | None = None
    lang: str | None = None
    mode: str | None = Field(None, alias="Mode")
    appid: str | None = None

    def to_query_params(self, default_api_key: str | None = None) -> dict[str, Any]:
        """Wire-named query parameters with the resolved key appended last."""
        fields = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        params = {
            name: value
            for name, value in fields.items()
            if name != "appid" and value != ""
        }
        api_key = self.appid or default_api_key
        if api_key:
            params["appid"] = api_key
        return params


class ErrorKind(str, Enum):
    remote_rejection = "remote_rejection"
    transport_or_decode = "transport_or_decode"
    invalid_parameters = "invalid_parameters"


class WeatherSuccess(BaseModel):
    ok: Literal[True] = True
    data: Any

    def to_payload(self) -> Any:
        return self.data


class WeatherFailure(BaseModel):
    ok: Literal[False] = False
    kind: ErrorKind
    error: str = FAILURE_MESSAGE
    status_code: int | None = None
    detail: Any = None

    def to_payload(self) -> dict[str, str]:
        return {"error": self.error}


WeatherResult = WeatherSuccess | WeatherFailure


class HealthResponse(BaseModel):
    status: str
    api_key_configured: bool
