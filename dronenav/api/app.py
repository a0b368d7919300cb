"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from dronenav.api.routes import (  # noqa: E402
    airspaces,
    classify,
    flight_plans,
    regulations,
)
from dronenav.persistence.errors import CatalogError  # noqa: E402
from dronenav.services.catalog_client import CatalogClient  # noqa: E402
from dronenav.services.engine import (  # noqa: E402
    PlanningEngine,
    configured_polygon_mode,
    load_engine,
)

logger = logging.getLogger(__name__)


async def _engine_from_remote(base_url: str) -> PlanningEngine:
    """Fetch both catalogs from the web application; failures give empty catalogs."""
    client = CatalogClient(base_url)
    try:
        zones = await client.fetch_zones()
        regs = await client.fetch_regulations()
    finally:
        await client.aclose()
    for name, result in (("zones", zones), ("regulations", regs)):
        if not result.success:
            logger.error("Remote %s catalog unavailable: %s", name, result.error.message)
    return PlanningEngine.from_catalogs(
        zones.unwrap_or([]),
        regs.unwrap_or([]),
        polygon_mode=configured_polygon_mode(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the zone and regulation catalogs once for the process."""
    remote_url = os.environ.get("DRONENAV_CATALOG_URL")
    if remote_url:
        engine = await _engine_from_remote(remote_url)
        logger.info("Loaded catalogs from %s", remote_url)
    else:
        try:
            engine = load_engine()
        except CatalogError as exc:
            logger.error("Catalog load failed, serving empty catalogs: %s", exc)
            engine = PlanningEngine.from_catalogs([], [])

    app.state.engine = engine
    yield


app = FastAPI(
    title="DroneNav Nepal API",
    description="Airspace classification and regulation checks for drone flights in Nepal",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(airspaces.router, prefix="/api")
app.include_router(regulations.router, prefix="/api")
app.include_router(classify.router, prefix="/api")
app.include_router(flight_plans.router, prefix="/api")


@app.get("/api/health")
async def health():
    engine: PlanningEngine = app.state.engine
    return {
        "status": "ok",
        "zone_count": len(engine.registry),
        "regulation_count": len(engine.resolver.regulations),
        "polygon_mode": engine.classifier.polygon_mode.value,
        "permission_coverage_gaps": [t.value for t in engine.resolver.permission_coverage_gaps()],
    }
