# ABOUTME: Client-side interpretation of WMO weather codes into icon, description, and advice.
# ABOUTME: Total over all integers; unknown or missing codes fall back to the clear-sky reading.

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict


class WeatherCategory(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    DRIZZLE = "light rain/drizzle"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"


class WeatherInterpretation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: WeatherCategory
    icon: str
    description: str
    advice: str


ICONS = {
    WeatherCategory.CLEAR: "☀",
    WeatherCategory.PARTLY_CLOUDY: "⛅",
    WeatherCategory.OVERCAST: "☁",
    WeatherCategory.FOG: "🌫",
    WeatherCategory.DRIZZLE: "🌦",
    WeatherCategory.RAIN: "🌧",
    WeatherCategory.SNOW: "❄",
    WeatherCategory.THUNDERSTORM: "⛈",
}

ADVICE = {
    WeatherCategory.CLEAR: "Great day to be outside. Sunscreen helps.",
    WeatherCategory.PARTLY_CLOUDY: "Pleasant out there, maybe bring a light layer.",
    WeatherCategory.OVERCAST: "Gray skies, but dry for now.",
    WeatherCategory.FOG: "Low visibility. Take it slow on the roads.",
    WeatherCategory.DRIZZLE: "A light jacket or umbrella will do.",
    WeatherCategory.RAIN: "Grab an umbrella before heading out.",
    WeatherCategory.SNOW: "Bundle up and watch for slippery paths.",
    WeatherCategory.THUNDERSTORM: "Stay indoors if you can.",
}


def classify_weather_code(code: int | None) -> WeatherCategory:
    """Partition WMO codes into display categories."""
    if code is None:
        return WeatherCategory.CLEAR
    if code == 0:
        return WeatherCategory.CLEAR
    if 1 <= code <= 2:
        return WeatherCategory.PARTLY_CLOUDY
    if code == 3:
        return WeatherCategory.OVERCAST
    if code in (45, 48):
        return WeatherCategory.FOG
    if 51 <= code <= 57:
        return WeatherCategory.DRIZZLE
    if 61 <= code <= 67:
        return WeatherCategory.RAIN
    if 71 <= code <= 77 or 85 <= code <= 86:
        return WeatherCategory.SNOW
    if 95 <= code <= 99:
        return WeatherCategory.THUNDERSTORM
    return WeatherCategory.CLEAR


def describe_weather_code(code: int | None) -> str:
    if code is None:
        return "Not sure yet..."
    if code == 0:
        return "Bright and sunny!"
    if code == 1:
        return "Mostly clear skies"
    if code == 2:
        return "A few clouds hanging out"
    if code == 3:
        return "All gray and overcast"
    if code in (45, 48):
        return "Foggy and mysterious"
    if 51 <= code <= 57:
        return "A light drizzle"
    if 61 <= code <= 67:
        return "Rainy day"
    if 71 <= code <= 77:
        return "Snowy wonderland"
    if code in (85, 86):
        return "Snow showers"
    if 95 <= code <= 99:
        return "Thunder and lightning!"
    return "Something's up there..."


def interpret_weather_code(code: int | None) -> WeatherInterpretation:
    category = classify_weather_code(code)
    return WeatherInterpretation(
        category=category,
        icon=ICONS[category],
        description=describe_weather_code(code),
        advice=ADVICE[category],
    )


def format_temperature(value: float | None, suffix: str) -> str:
    """Whole-degree display, rounding halves up (21.5 -> 22, -0.5 -> 0)."""
    if value is None:
        return f"--{suffix}"
    return f"{math.floor(value + 0.5)}{suffix}"
