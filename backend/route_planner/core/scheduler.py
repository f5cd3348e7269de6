"""APScheduler setup for periodic tasks."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)


def create_scheduler(planner, tracker=None) -> AsyncIOScheduler:
    """Create and configure the scheduler with all jobs."""
    from route_planner.config import settings

    scheduler = AsyncIOScheduler()

    if settings.route_refresh_minutes <= 0:
        logger.info("Route refresh disabled")
        return scheduler

    scheduler.add_job(
        planner.load,
        "interval",
        minutes=settings.route_refresh_minutes,
        id="refresh_routes",
        name="Reload route snapshot from the reference store",
        max_instances=1,
    )

    # Live progress must follow the same route geometry as search
    if tracker is not None:
        scheduler.add_job(
            tracker.load_routes,
            "interval",
            minutes=settings.route_refresh_minutes,
            id="refresh_route_lines",
            name="Reload bus tracker route polylines",
            max_instances=1,
        )

    return scheduler
