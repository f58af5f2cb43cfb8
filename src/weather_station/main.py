"""Main FastAPI application for the weather station service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_station.api.endpoints import router as weather_router
from weather_station.api.errors import register_exception_handlers
from weather_station.config import (
    HOST, PORT, DEBUG, SERVICE_NAME, SERVICE_VERSION, load_range_config
)
from weather_station.logging_config import configure_logging
from weather_station.middleware.request_logging import RequestLoggingMiddleware
from weather_station.weather.models import RangeConfig
from weather_station.weather.service import WeatherAssembler

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    config = app.state.weather_assembler.config
    logger.info(
        f"Starting {SERVICE_NAME} for {config.city.name} "
        f"({config.forecast.days} forecast days)"
    )
    try:
        yield
    finally:
        logger.info(f"Shutting down {SERVICE_NAME}")


def create_app(config: Optional[RangeConfig] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Weather range configuration (loaded from the environment if None)

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="REST API serving randomly generated current weather and forecasts",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.state.weather_assembler = WeatherAssembler(config or load_range_config())

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(weather_router)

    @app.get("/api", tags=["root"])
    async def api_info() -> dict:
        """API information endpoint.

        Returns:
            Basic service information
        """
        return {
            "message": SERVICE_NAME,
            "docs": "/docs",
            "redoc": "/redoc",
            "current": "/api/weather/current",
            "forecast": "/api/weather/forecast",
            "health": "/api/weather/health"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "weather_station.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
