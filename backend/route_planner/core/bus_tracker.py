"""Live bus positions: apply location updates, snap to routes, publish."""

import datetime
import logging

from route_planner.core.broadcaster import Broadcaster
from route_planner.core.route_matcher import RouteMatcher
from route_planner.core.storage import Bus, ReferenceStore
from route_planner.schemas.bus import BusPosition

logger = logging.getLogger(__name__)


def _millis(ts: datetime.datetime | None) -> int:
    if ts is None:
        ts = datetime.datetime.now(datetime.timezone.utc)
    return int(ts.timestamp() * 1000)


class BusTracker:
    """Keeps the latest position per bus and pushes changes to subscribers.

    The route search never reads from here; positions only feed the map.
    """

    def __init__(self, store: ReferenceStore, broadcaster: Broadcaster) -> None:
        self.store = store
        self.broadcaster = broadcaster
        self.route_matcher = RouteMatcher()
        # bus_id -> latest position
        self.current_positions: dict[str, BusPosition] = {}

    async def load(self) -> None:
        """Load route polylines and initial bus positions from the store."""
        await self.load_routes()

        buses = await self.store.get_all_buses()
        for bus in buses:
            if not bus.active or bus.current_lat is None or bus.current_lng is None:
                continue
            self.current_positions[bus.id] = self._position(bus)
        logger.info("Bus tracker loaded: %d positioned buses", len(self.current_positions))

    async def load_routes(self) -> None:
        """Rebuild route polylines from the store and swap them in."""
        routes = await self.store.get_all_routes()
        matcher = RouteMatcher()
        for route in routes:
            matcher.load_route(route.id, route.polyline())
        self.route_matcher = matcher
        logger.info("Bus tracker route lines loaded: %d routes", len(routes))

    def _position(
        self, bus: Bus, speed: float | None = None, heading: float | None = None,
    ) -> BusPosition:
        match = self.route_matcher.match(bus.route_id, bus.current_lat, bus.current_lng)
        return BusPosition(
            bus_id=bus.id,
            bus_number=bus.bus_number,
            route_id=bus.route_id,
            lat=bus.current_lat,
            lng=bus.current_lng,
            timestamp_millis=_millis(bus.last_updated),
            speed=speed,
            heading=heading,
            progress=round(match.progress, 4) if match else None,
        )

    async def update_location(
        self,
        bus_id: str,
        lat: float,
        lng: float,
        speed: float | None = None,
        heading: float | None = None,
    ) -> BusPosition | None:
        """Apply a location report. Returns None for an unknown bus."""
        bus = await self.store.update_bus_location(bus_id, lat, lng)
        if bus is None:
            logger.warning("Location update for unknown bus %s", bus_id)
            return None

        position = self._position(bus, speed=speed, heading=heading)
        if position.progress is None:
            logger.debug("Bus %s is off route %s at (%.5f, %.5f)", bus_id, bus.route_id, lat, lng)
        self.current_positions[bus_id] = position

        await self.broadcaster.publish(self.snapshot(), [position.model_dump(by_alias=True)])
        return position

    def snapshot(self) -> dict[str, dict]:
        """Current positions keyed by bus id, in wire format."""
        return {bid: p.model_dump(by_alias=True) for bid, p in self.current_positions.items()}
