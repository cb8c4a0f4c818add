import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from openweather_tool.config import WEATHER_PORT, WeatherSettings
from openweather_tool.localtime import attach_local_time
from openweather_tool.models import (
    FAILURE_MESSAGE,
    HealthResponse,
    QueryParameters,
    UnitsEnum,
    WeatherFailure,
)
from openweather_tool.tools import TOOL_LIST, WeatherQuery

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = WeatherSettings.from_env()
weather_query = WeatherQuery(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not weather_query.settings.api_key:
        logger.warning(
            "OPENWEATHERMAP_API_KEY is not set. "
            "Requests without an explicit appid will be rejected upstream."
        )
    yield


app = FastAPI(
    title="OpenWeather Tool Server",
    description="Exposes the get_current_weather tool over HTTP.",
    version="1.0.0",
    lifespan=lifespan,
)


# ── Custom exception handlers ────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return 400 (not FastAPI's default 422) for missing / invalid parameters."""
    return JSONResponse(status_code=400, content={"error": "Invalid request parameters."})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Normalise all HTTP errors to {"error": "..."} instead of {"detail": ...}."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content)


def _require_api_key() -> None:
    if not weather_query.settings.api_key:
        raise HTTPException(status_code=500, detail={"error": "API key is not set"})


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        api_key_configured=bool(weather_query.settings.api_key),
    )


@app.get("/tools")
async def list_tools() -> list[dict]:
    return TOOL_LIST


@app.post("/tools/get_current_weather")
async def call_get_current_weather(params: QueryParameters):
    logger.info(
        "Tool call: %s",
        params.model_dump(by_alias=True, exclude_none=True, exclude={"appid"}),
    )
    return await weather_query.execute(params)


@app.get("/weather")
async def get_weather(
    city: str | None = Query(None),
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
):
    logger.info("Incoming request: city=%r lat=%s lng=%s", city, lat, lng)
    _require_api_key()

    if city:
        params = QueryParameters(q=city, units=UnitsEnum.metric)
    elif lat is not None and lng is not None:
        params = QueryParameters(lat=lat, lon=lng, units=UnitsEnum.metric)
    else:
        raise HTTPException(
            status_code=400,
            detail={"error": "Either city or lat/lng coordinates are required"},
        )

    result = await weather_query.fetch(params)
    if isinstance(result, WeatherFailure):
        raise HTTPException(status_code=502, detail={"error": FAILURE_MESSAGE})

    return attach_local_time(result.data, lat=lat, lng=lng)


@app.get("/timezone")
async def get_timezone(
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
):
    logger.info("Incoming request: timezone lat=%s lng=%s", lat, lng)
    if lat is None or lng is None:
        raise HTTPException(
            status_code=400,
            detail={"error": "Latitude and longitude are required"},
        )
    _require_api_key()

    result = await weather_query.fetch(QueryParameters(lat=lat, lon=lng))
    if isinstance(result, WeatherFailure):
        raise HTTPException(status_code=502, detail={"error": FAILURE_MESSAGE})
    return result.data


def main() -> None:
    uvicorn.run(
        "openweather_tool.server:app",
        host="0.0.0.0",
        port=WEATHER_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
