# ABOUTME: Starts the weather lookup service under uvicorn.
# ABOUTME: Host, port and log level come from the environment (see weather_lookup.config).

import logging

import uvicorn

from weather_lookup.config import Settings, configure_logging

logger = logging.getLogger("run_server")


if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("Server running on port %s", settings.port)

    uvicorn.run(
        "weather_lookup.web:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
