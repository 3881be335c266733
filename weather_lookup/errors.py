# ABOUTME: Exception hierarchy for the lookup service.
# ABOUTME: Each error carries the HTTP status and client-facing message it renders as.

REQUIRED_CITY_MESSAGE = "City name is required"
GEOCODING_FAILED_MESSAGE = "City not found or geocoding service unavailable"
WEATHER_FAILED_MESSAGE = "Failed to fetch weather data"


class WeatherLookupError(Exception):
    """Base error for a failed lookup. `message` is shown to the client verbatim."""

    status_code = 500

    def __init__(self, message: str = WEATHER_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


class CityRequiredError(WeatherLookupError):
    status_code = 400

    def __init__(self):
        super().__init__(REQUIRED_CITY_MESSAGE)


class GeocodingError(WeatherLookupError):
    """City not found, or the geocoding provider failed. Both render identically."""

    def __init__(self):
        super().__init__(GEOCODING_FAILED_MESSAGE)


class WeatherProviderError(WeatherLookupError):
    """The forecast provider call failed."""

    def __init__(self, message: str | None = None):
        super().__init__(message or WEATHER_FAILED_MESSAGE)
