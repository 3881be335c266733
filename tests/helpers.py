# ABOUTME: Small builders shared by the test modules.
# ABOUTME: Wraps JSON payloads in real httpx.Response objects for mocked clients.

import httpx


def json_response(json_data, status_code: int = 200, method: str = "GET") -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request(method, "https://test"))


def report_json(city: str = "New York", unit: str = "celsius", weather_code: int | None = 61) -> dict:
    """A WeatherReport as the lookup service serializes it."""
    metric = unit == "celsius"
    return {
        "city": city,
        "country": "United States",
        "temperature": 3.4 if metric else 38.1,
        "apparentTemperature": -0.5 if metric else 31.1,
        "humidity": 81,
        "precipitation": 0.2,
        "windSpeed": 14.8 if metric else 9.2,
        "weatherCode": weather_code,
        "cloudCover": 100,
        "timestamp": "2:15:00 PM",
        "coordinates": {"latitude": 40.71427, "longitude": -74.00597},
    }
