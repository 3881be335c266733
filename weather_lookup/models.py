# ABOUTME: Pydantic BaseModels for the lookup request/response contract and Open-Meteo payloads.
# ABOUTME: WeatherReport serializes with camelCase keys to match the client contract.

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LocationResult(BaseModel):
    """First geocoding match for a city query."""

    latitude: float
    longitude: float
    city: str
    country: str | None = None


class CurrentConditions(BaseModel):
    """The `current` block of an Open-Meteo forecast response."""

    time: str
    temperature_2m: float | None = None
    apparent_temperature: float | None = None
    relative_humidity_2m: int | None = None
    precipitation: float | None = None
    wind_speed_10m: float | None = None
    weather_code: int | None = None
    cloud_cover: int | None = None


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class WeatherReport(BaseModel):
    """Normalized current weather returned by POST /api/weather."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    city: str
    country: str | None = None
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: int | None = None
    precipitation: float | None = None
    wind_speed: float | None = None
    weather_code: int | None = None
    cloud_cover: int | None = None
    timestamp: str
    coordinates: Coordinates


class WeatherRequest(BaseModel):
    """Body of POST /api/weather. Any unit value is accepted; only "celsius" means metric."""

    city: str | None = None
    unit: Any = "celsius"


class ErrorResponse(BaseModel):
    message: str
