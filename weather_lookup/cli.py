# ABOUTME: Interactive terminal front end for the weather lookup service.
# ABOUTME: Drives WeatherApp from typed commands and renders reports as text.

import argparse
import asyncio

from weather_lookup.client import WeatherApp, create_api_client
from weather_lookup.config import Settings, configure_logging
from weather_lookup.presentation import format_temperature, interpret_weather_code
from weather_lookup.recent_searches import LocalStorage, RecentSearches

HELP_TEXT = (
    "Type a city name to look it up.\n"
    "  :unit      switch between Celsius and Fahrenheit\n"
    "  :recent    list recent searches\n"
    "  :N         look up recent search number N\n"
    "  :quit      exit"
)


def render_report(app: WeatherApp) -> str:
    """Text rendering of the current report, or the error, or nothing."""
    if app.error:
        return f"Error: {app.error}"
    report = app.report
    if report is None:
        return ""

    reading = interpret_weather_code(report.weather_code)
    place = f"{report.city}, {report.country}" if report.country else report.city
    return "\n".join(
        [
            place,
            f"{reading.icon}  {format_temperature(report.temperature, app.unit_suffix)}  {reading.description}",
            f"Feels like: {format_temperature(report.apparent_temperature, app.unit_suffix)}",
            f"Humidity: {report.humidity}%   Wind: {report.wind_speed} {app.wind_unit}",
            f"Precipitation: {report.precipitation} mm   Cloud cover: {report.cloud_cover}%",
            f"Observed at {report.timestamp}",
            reading.advice,
        ]
    )


def render_recent(app: WeatherApp) -> str:
    """Numbered recent-search list, newest first."""
    items = app.recent_searches.items
    if not items:
        return "No recent searches yet."
    return "\n".join(f"  {i}. {city}" for i, city in enumerate(items, start=1))


async def handle_command(app: WeatherApp, line: str) -> str | None:
    """Apply one line of input to the app. Returns text to print, or None to exit."""
    line = line.strip()
    if not line:
        return ""
    if line in (":quit", ":q"):
        return None
    if line in (":help", "?"):
        return HELP_TEXT
    if line == ":unit":
        had_report = app.report is not None
        await app.toggle_unit()
        if had_report:
            return render_report(app)
        return "Units: Fahrenheit" if app.unit_suffix == "°F" else "Units: Celsius"
    if line == ":recent":
        return render_recent(app)
    if line.startswith(":") and line[1:].isdigit():
        items = app.recent_searches.items
        index = int(line[1:]) - 1
        if not 0 <= index < len(items):
            return "No such recent search."
        await app.select_recent(items[index])
        return render_report(app)
    if line.startswith(":"):
        return f"Unknown command {line!r}. Type :help for options."

    app.city_text = line
    await app.submit()
    return render_report(app)


async def run(settings: Settings) -> None:
    """Read commands from stdin until :quit or end of input."""
    storage = LocalStorage(settings.recent_searches_path)
    async with create_api_client(settings.weather_api_url, settings.http_timeout_seconds) as http_client:
        app = WeatherApp(http_client, RecentSearches(storage))
        print(HELP_TEXT)
        while True:
            try:
                line = await asyncio.to_thread(input, "city> ")
            except EOFError:
                break
            output = await handle_command(app, line)
            if output is None:
                break
            if output:
                print(output)


def main(argv: list[str] | None = None) -> None:
    """Console entry point for `weather-lookup`."""
    settings = Settings()
    parser = argparse.ArgumentParser(description="Look up current weather by city name.")
    parser.add_argument("--api-url", default=settings.weather_api_url, help="Base URL of the lookup service.")
    parser.add_argument("--storage", default=str(settings.recent_searches_path), help="Recent searches file.")
    args = parser.parse_args(argv)

    settings = settings.model_copy(
        update={"weather_api_url": args.api_url.rstrip("/"), "recent_searches_path": args.storage}
    )
    configure_logging("WARNING")
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
