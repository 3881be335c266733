# ABOUTME: ASGI web entry point for the weather lookup service.
# ABOUTME: Starlette app exposing POST /api/weather, plus static client hosting in production.

import json
import logging
from contextlib import asynccontextmanager

import httpx
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from weather_lookup.config import Settings, configure_logging
from weather_lookup.deps import WeatherDeps, build_deps
from weather_lookup.errors import CityRequiredError, WeatherLookupError, WeatherProviderError
from weather_lookup.models import ErrorResponse, WeatherRequest
from weather_lookup.weather_service import lookup_weather

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files that serve index.html for any path with no matching asset."""

    async def get_response(self, path, scope):
        try:
            response = await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)
        if response.status_code == 404:
            return await super().get_response("index.html", scope)
        return response


async def parse_weather_request(request: Request) -> WeatherRequest:
    """Read the JSON body. Anything that is not an object with a string city is a missing city."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise CityRequiredError() from None
    try:
        return WeatherRequest.model_validate(body)
    except ValidationError:
        raise CityRequiredError() from None


async def weather(request: Request) -> JSONResponse:
    payload = await parse_weather_request(request)
    deps: WeatherDeps = request.app.state.deps
    try:
        report = await lookup_weather(
            deps.http_client,
            payload.city,
            payload.unit,
            geocoding_url=deps.geocoding_url,
            forecast_url=deps.forecast_url,
        )
    except WeatherLookupError:
        raise
    except Exception as e:
        logger.exception("Unexpected failure looking up %r", payload.city)
        raise WeatherProviderError() from e
    return JSONResponse(report.model_dump(mode="json", by_alias=True))


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def handle_lookup_error(request: Request, exc: WeatherLookupError) -> JSONResponse:
    return JSONResponse(ErrorResponse(message=exc.message).model_dump(), status_code=exc.status_code)


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> Starlette:
    """Build the ASGI app. A caller-supplied http_client is not closed on shutdown."""
    if settings is None:
        settings = Settings()
    configure_logging(settings.log_level)

    owns_client = http_client is None
    deps = build_deps(settings, http_client)

    routes = [
        Route("/api/weather", weather, methods=["POST"]),
        Route("/api/health", health, methods=["GET"]),
    ]
    if settings.is_production and not settings.static_dir.is_dir():
        logger.warning("Client assets not found at %s; serving the API only", settings.static_dir)
    elif settings.is_production:
        logger.info("Serving client assets from %s", settings.static_dir)
        routes.append(Mount("/", app=SPAStaticFiles(directory=settings.static_dir, html=True), name="client"))

    @asynccontextmanager
    async def lifespan(app: Starlette):
        logger.info("Weather lookup service starting (env=%s)", settings.app_env)
        yield
        if owns_client:
            await deps.http_client.aclose()

    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
        exception_handlers={WeatherLookupError: handle_lookup_error},
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.deps = deps
    return app


app = create_app()
