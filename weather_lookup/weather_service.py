# ABOUTME: Service layer for Open-Meteo API calls and response shaping.
# ABOUTME: Geocodes a city, fetches current conditions, and assembles a WeatherReport.

import logging
from datetime import datetime

import httpx

from weather_lookup.errors import CityRequiredError, GeocodingError, WeatherProviderError
from weather_lookup.models import Coordinates, CurrentConditions, LocationResult, WeatherReport

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_PARAMS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "precipitation,weather_code,cloud_cover,wind_speed_10m"
)


async def geocode(client: httpx.AsyncClient, city_name: str, url: str = GEOCODING_URL) -> LocationResult | None:
    """Geocode a city name to its first match using Open-Meteo geocoding API."""
    resp = await client.get(url, params={"name": city_name, "count": 1})
    resp.raise_for_status()
    data = resp.json()

    results = data.get("results")
    if not results:
        return None

    r = results[0]
    return LocationResult(
        latitude=r["latitude"],
        longitude=r["longitude"],
        city=r["name"],
        country=r.get("country"),
    )


async def resolve_location(client: httpx.AsyncClient, city_name: str, url: str = GEOCODING_URL) -> LocationResult:
    """Geocode or raise GeocodingError. Not-found and provider failures are not distinguished."""
    try:
        location = await geocode(client, city_name, url)
    except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.exception("Geocoding failed for %r", city_name)
        raise GeocodingError() from e
    if location is None:
        logger.info("No geocoding match for %r", city_name)
        raise GeocodingError()
    return location


def provider_units(unit: str | None) -> dict[str, str]:
    """Map the client unit to Open-Meteo unit params. Anything but exactly 'celsius' is imperial."""
    if unit == "celsius":
        return {"temperature_unit": "celsius", "windspeed_unit": "kmh"}
    return {"temperature_unit": "fahrenheit", "windspeed_unit": "mph"}


async def get_current_conditions(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    unit: str | None,
    url: str = FORECAST_URL,
) -> CurrentConditions:
    """Fetch current conditions from Open-Meteo forecast API."""
    try:
        resp = await client.get(
            url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_PARAMS,
                **provider_units(unit),
            },
        )
        resp.raise_for_status()
        return CurrentConditions.model_validate(resp.json()["current"])
    except httpx.HTTPStatusError as e:
        logger.exception("Forecast API returned %s", e.response.status_code)
        raise WeatherProviderError(_provider_reason(e.response) or str(e)) from e
    except httpx.HTTPError as e:
        logger.exception("Forecast API request failed")
        raise WeatherProviderError(str(e)) from e
    except (ValueError, KeyError, TypeError) as e:
        logger.exception("Forecast API returned an unexpected payload")
        raise WeatherProviderError() from e


def format_observation_time(time: str) -> str:
    """Render an Open-Meteo ISO timestamp as a clock time, e.g. '2:15:00 PM'."""
    try:
        observed = datetime.fromisoformat(time)
    except ValueError:
        return time
    return observed.strftime("%I:%M:%S %p").lstrip("0")


def build_report(location: LocationResult, current: CurrentConditions) -> WeatherReport:
    return WeatherReport(
        city=location.city,
        country=location.country,
        temperature=current.temperature_2m,
        apparent_temperature=current.apparent_temperature,
        humidity=current.relative_humidity_2m,
        precipitation=current.precipitation,
        wind_speed=current.wind_speed_10m,
        weather_code=current.weather_code,
        cloud_cover=current.cloud_cover,
        timestamp=format_observation_time(current.time),
        coordinates=Coordinates(latitude=location.latitude, longitude=location.longitude),
    )


async def lookup_weather(
    client: httpx.AsyncClient,
    city: str | None,
    unit: str | None = "celsius",
    geocoding_url: str = GEOCODING_URL,
    forecast_url: str = FORECAST_URL,
) -> WeatherReport:
    """Validate, geocode, then fetch current conditions. The two calls run sequentially."""
    if not city or not city.strip():
        raise CityRequiredError()

    location = await resolve_location(client, city, geocoding_url)
    current = await get_current_conditions(client, location.latitude, location.longitude, unit, forecast_url)
    logger.info("Resolved %r to %s, %s", city, location.city, location.country)
    return build_report(location, current)


def _provider_reason(response: httpx.Response) -> str | None:
    """Extract Open-Meteo's error `reason` from a failed response, if it sent one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("reason"), str):
        return data["reason"]
    return None
