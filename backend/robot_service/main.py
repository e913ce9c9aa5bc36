from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from robot_service import __version__
from robot_service.api.routes_auto import router as auto_router
from robot_service.api.routes_health import router as health_router
from robot_service.api.routes_robots import router as robots_router
from robot_service.api.routes_ws import WsHub, router as ws_router
from robot_service.config import Settings, settings as default_settings
from robot_service.observability.logging import configure_logging
from robot_service.services.auto_step import AutoStepScheduler
from robot_service.services.fleet import Fleet
from robot_service.services.geo_polygon import DOWNTOWN_LA, GeoPolygon

logger = logging.getLogger("robot_service")


def create_app(
    settings: Optional[Settings] = None,
    polygon: GeoPolygon = DOWNTOWN_LA,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """Build the API around one Fleet and one AutoStepScheduler.

    The fleet is spawned immediately; the auto-step schedule is armed in the
    lifespan once the event loop is running.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    fleet = Fleet(
        polygon,
        default_count=settings.robot_count,
        default_meters=settings.move_meters,
        rng=rng,
    )
    fleet.respawn()
    hub = WsHub()
    scheduler = AutoStepScheduler(
        fleet,
        default_meters=settings.move_meters,
        default_interval_ms=settings.move_interval_ms,
        on_tick=hub.broadcast_robots,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info("Starting Robot Service")
        logger.info("   Environment: %s", settings.environment)
        logger.info("   Robots: %d inside %d-vertex polygon", len(fleet), len(polygon))
        if settings.auto_start:
            scheduler.start()

        yield

        logger.info("Shutting down...")
        await scheduler.aclose()

    app = FastAPI(title="Robot Service API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.fleet = fleet
    app.state.scheduler = scheduler
    app.state.hub = hub

    @app.get("/")
    def root():
        return {
            "name": "Robot Service API",
            "status": "ok",
            "docs": "/docs",
            "health": "/health",
        }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health_router)
    app.include_router(robots_router)
    app.include_router(auto_router)
    app.include_router(ws_router)
    return app


app = create_app()
