# ABOUTME: Client-side UI state for the weather lookup: input, unit, in-flight flag, report, errors.
# ABOUTME: Talks to POST /api/weather and keeps the recent-search history up to date.

import logging

import httpx

from weather_lookup.models import WeatherReport
from weather_lookup.recent_searches import RecentSearches

logger = logging.getLogger(__name__)

WEATHER_ENDPOINT = "/api/weather"
GENERIC_ERROR_MESSAGE = "Sorry, couldn't grab the weather!"

CELSIUS = "celsius"
FAHRENHEIT = "fahrenheit"


def create_api_client(base_url: str, timeout: float = 10.0) -> httpx.AsyncClient:
    """httpx client pointed at a running lookup service."""
    return httpx.AsyncClient(base_url=base_url, timeout=httpx.Timeout(timeout))


class WeatherApp:
    """State and actions behind the weather lookup screen.

    Every lookup gets a sequence number; a response that arrives after a newer
    lookup was started is discarded so the latest request always wins.
    """

    def __init__(self, http_client: httpx.AsyncClient, recent_searches: RecentSearches, unit: str = CELSIUS):
        self.http_client = http_client
        self.recent_searches = recent_searches
        self.city_text = ""
        self.unit = unit
        self.report: WeatherReport | None = None
        self.error: str | None = None
        self.is_fetching = False
        self.last_query: str | None = None
        self.pending_query: str | None = None
        self._sequence = 0

    @property
    def can_submit(self) -> bool:
        return not self.is_fetching and bool(self.city_text.strip())

    @property
    def unit_suffix(self) -> str:
        return "°C" if self.unit == CELSIUS else "°F"

    @property
    def wind_unit(self) -> str:
        return "km/h" if self.unit == CELSIUS else "mph"

    async def submit(self) -> bool:
        """Look up the pending city. Returns False when suppressed or when the lookup failed."""
        if not self.can_submit:
            return False
        return await self._lookup(self.city_text.strip())

    async def toggle_unit(self) -> bool:
        """Flip the unit and refetch in the new unit.

        A lookup still in flight is superseded by one for the same city, so its
        response cannot land under the new unit label. Otherwise the displayed
        report, if any, is fetched again.
        """
        self.unit = FAHRENHEIT if self.unit == CELSIUS else CELSIUS
        if self.is_fetching and self.pending_query is not None:
            return await self._lookup(self.pending_query)
        if self.report is None or self.last_query is None:
            return False
        return await self._lookup(self.last_query)

    async def select_recent(self, city: str) -> bool:
        if self.is_fetching:
            return False
        self.city_text = city
        return await self._lookup(city)

    async def _lookup(self, city: str) -> bool:
        self._sequence += 1
        token = self._sequence
        self.is_fetching = True
        self.pending_query = city
        self.error = None

        report = None
        error = None
        try:
            response = await self.http_client.post(WEATHER_ENDPOINT, json={"city": city, "unit": self.unit})
        except httpx.HTTPError:
            logger.warning("Lookup service unreachable", exc_info=True)
            error = GENERIC_ERROR_MESSAGE
        else:
            if response.is_success:
                try:
                    report = WeatherReport.model_validate(response.json())
                except ValueError:
                    logger.warning("Lookup service returned an unreadable report")
                    error = GENERIC_ERROR_MESSAGE
            else:
                error = _server_message(response) or GENERIC_ERROR_MESSAGE

        if token != self._sequence:
            logger.debug("Discarding stale response for %r", city)
            return False

        self.is_fetching = False
        self.pending_query = None
        if error is not None:
            self.report = None
            self.error = error
            return False

        self.report = report
        self.last_query = city
        self.recent_searches.add(city)
        return True


def _server_message(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str) and data["message"]:
        return data["message"]
    return None
