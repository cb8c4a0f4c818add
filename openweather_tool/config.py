import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load .env from project root (one level above openweather_tool/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 10.0


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT
    if raw.strip().lower() == "none":
        return None
    return float(raw)


class WeatherSettings(BaseModel):
    """Set once at process start, read-only thereafter."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "WeatherSettings":
        return cls(
            api_key=os.getenv("OPENWEATHERMAP_API_KEY") or None,
            base_url=os.getenv("OPENWEATHERMAP_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=_parse_timeout(os.getenv("OPENWEATHERMAP_TIMEOUT")),
        )


WEATHER_PORT = int(os.getenv("WEATHER_PORT", "58080"))
