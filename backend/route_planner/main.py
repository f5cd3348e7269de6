"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from route_planner.api import buses, places, routes, search, stops, ws
from route_planner.api.errors import install_error_handlers
from route_planner.config import settings
from route_planner.core.broadcaster import Broadcaster
from route_planner.core.bus_tracker import BusTracker
from route_planner.core.geocoder import Geocoder
from route_planner.core.planner import RoutePlanner
from route_planner.core.scheduler import create_scheduler
from route_planner.core.seed import SAMPLE_BUS_STOPS, SAMPLE_BUSES, SAMPLE_ROUTES
from route_planner.core.storage import MemoryStorage, SqlStorage

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def create_store():
    """Build the reference store selected by settings, seeding it if empty."""
    if settings.storage_backend != "sql":
        return MemoryStorage(SAMPLE_ROUTES, SAMPLE_BUS_STOPS, SAMPLE_BUSES), None

    from route_planner.db.session import async_session, engine
    from route_planner.models.base import Base
    from route_planner.models import tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    store = SqlStorage(async_session)
    await store.seed(SAMPLE_ROUTES, SAMPLE_BUS_STOPS, SAMPLE_BUSES)
    return store, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    store, engine = await create_store()

    broadcaster = Broadcaster()
    await broadcaster.connect()
    planner = RoutePlanner(store, settings)
    tracker = BusTracker(store, broadcaster)
    geocoder = Geocoder()

    # Wire up API modules
    search.planner = planner
    routes.store = store
    stops.store = store
    buses.store = store
    buses.tracker = tracker
    places.geocoder = geocoder
    ws.broadcaster = broadcaster
    ws.tracker = tracker

    # Load the route snapshot before serving searches
    try:
        await planner.load()
        await tracker.load()
    except Exception:
        logger.exception("Failed to load reference data - will retry on refresh")

    scheduler = create_scheduler(planner, tracker)
    scheduler.start()
    logger.info("Route planner started (%s storage)", settings.storage_backend)

    yield

    # Shutdown
    scheduler.shutdown(wait=False)
    await geocoder.close()
    await broadcaster.close()
    if engine is not None:
        await engine.dispose()
    logger.info("Route planner shut down")


app = FastAPI(
    title="Bus Route Planner",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
install_error_handlers(app)

app.include_router(search.router)
app.include_router(routes.router)
app.include_router(stops.router)
app.include_router(buses.router)
app.include_router(places.router)
app.include_router(ws.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
