"""Reference data stores: in-memory seed or relational database.

Both stores expose the same async interface. Routes, stops and buses are
reference data; only bus locations change at runtime, and suggestion
records are write-only.
"""

import datetime
import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Protocol

from sqlalchemy import func, select

from route_planner.core.route_graph import Route, ScheduleEntry, Stop
from route_planner.models import tables

logger = logging.getLogger(__name__)


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class BusStop:
    id: str
    name: str
    lat: float
    lng: float
    routes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Bus:
    id: str
    bus_number: str
    route_id: str
    current_lat: float | None = None
    current_lng: float | None = None
    last_updated: datetime.datetime | None = None
    active: bool = True
    capacity: int = 50
    current_passengers: int = 0


@dataclass(frozen=True)
class SuggestionRecord:
    from_location: str
    to_location: str
    direct_route: dict | None = None
    connecting_routes: list[dict] | None = None
    estimated_time: float | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime.datetime = field(default_factory=_utcnow)


class ReferenceStore(Protocol):
    async def get_all_routes(self) -> list[Route]: ...

    async def get_route(self, route_id: str) -> Route | None: ...

    async def get_all_bus_stops(self) -> list[BusStop]: ...

    async def get_all_buses(self) -> list[Bus]: ...

    async def get_bus(self, bus_id: str) -> Bus | None: ...

    async def update_bus_location(self, bus_id: str, lat: float, lng: float) -> Bus | None: ...

    async def record_suggestion(self, record: SuggestionRecord) -> None: ...


class MemoryStorage:
    """Dict-backed store, filled once from sample data."""

    def __init__(
        self,
        routes: list[Route] | None = None,
        bus_stops: list[BusStop] | None = None,
        buses: list[Bus] | None = None,
    ) -> None:
        self._routes: dict[str, Route] = {r.id: r for r in routes or []}
        self._bus_stops: dict[str, BusStop] = {s.id: s for s in bus_stops or []}
        now = _utcnow()
        self._buses: dict[str, Bus] = {
            b.id: b if b.last_updated else replace(b, last_updated=now) for b in buses or []
        }
        self._suggestions: dict[str, SuggestionRecord] = {}

    async def get_all_routes(self) -> list[Route]:
        return list(self._routes.values())

    async def get_route(self, route_id: str) -> Route | None:
        return self._routes.get(route_id)

    async def get_all_bus_stops(self) -> list[BusStop]:
        return list(self._bus_stops.values())

    async def get_all_buses(self) -> list[Bus]:
        return list(self._buses.values())

    async def get_bus(self, bus_id: str) -> Bus | None:
        return self._buses.get(bus_id)

    async def update_bus_location(self, bus_id: str, lat: float, lng: float) -> Bus | None:
        bus = self._buses.get(bus_id)
        if bus is None:
            return None
        updated = replace(bus, current_lat=lat, current_lng=lng, last_updated=_utcnow())
        self._buses[bus_id] = updated
        return updated

    async def record_suggestion(self, record: SuggestionRecord) -> None:
        self._suggestions[record.id] = record


def _route_from_row(row: tables.Route) -> Route:
    stops = tuple(
        Stop(name=s["name"], lat=float(s["lat"]), lng=float(s["lng"]), order=int(s["order"]))
        for s in row.stops
    )
    schedule = tuple(ScheduleEntry(time=e["time"], stop=e["stop"]) for e in row.schedule or [])
    return Route(
        id=row.id, name=row.route_name, stops=stops, active=row.is_active,
        schedule=schedule, color=row.color,
    )


def _bus_from_row(row: tables.Bus) -> Bus:
    return Bus(
        id=row.id,
        bus_number=row.bus_number,
        route_id=row.route,
        current_lat=row.current_lat,
        current_lng=row.current_lng,
        last_updated=row.last_updated,
        active=row.is_active,
        capacity=row.capacity,
        current_passengers=row.current_passengers,
    )


class SqlStorage:
    """Store backed by the relational tables in route_planner.models.tables."""

    def __init__(self, session_factory) -> None:
        self.session_factory = session_factory

    async def seed(self, routes: list[Route], bus_stops: list[BusStop], buses: list[Bus]) -> bool:
        """Insert sample data when the routes table is empty. Returns True if seeded."""
        async with self.session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(tables.Route))
            if count:
                return False
            for r in routes:
                session.add(tables.Route(
                    id=r.id,
                    route_name=r.name,
                    stops=[{"name": s.name, "lat": s.lat, "lng": s.lng, "order": s.order} for s in r.stops],
                    schedule=[{"time": e.time, "stop": e.stop} for e in r.schedule],
                    color=r.color,
                    is_active=r.active,
                ))
            for s in bus_stops:
                session.add(tables.BusStop(
                    id=s.id, name=s.name, latitude=s.lat, longitude=s.lng, routes=list(s.routes),
                ))
            now = _utcnow()
            for b in buses:
                session.add(tables.Bus(
                    id=b.id, bus_number=b.bus_number, route=b.route_id,
                    current_lat=b.current_lat, current_lng=b.current_lng,
                    last_updated=b.last_updated or now, is_active=b.active,
                    capacity=b.capacity, current_passengers=b.current_passengers,
                ))
            await session.commit()
        logger.info(
            "Seeded database: %d routes, %d stops, %d buses", len(routes), len(bus_stops), len(buses),
        )
        return True

    async def get_all_routes(self) -> list[Route]:
        async with self.session_factory() as session:
            rows = (await session.execute(select(tables.Route).order_by(tables.Route.id))).scalars().all()
        return [_route_from_row(r) for r in rows]

    async def get_route(self, route_id: str) -> Route | None:
        async with self.session_factory() as session:
            row = await session.get(tables.Route, route_id)
        return _route_from_row(row) if row else None

    async def get_all_bus_stops(self) -> list[BusStop]:
        async with self.session_factory() as session:
            rows = (await session.execute(select(tables.BusStop).order_by(tables.BusStop.name))).scalars().all()
        return [
            BusStop(id=r.id, name=r.name, lat=r.latitude, lng=r.longitude, routes=tuple(r.routes or ()))
            for r in rows
        ]

    async def get_all_buses(self) -> list[Bus]:
        async with self.session_factory() as session:
            rows = (await session.execute(select(tables.Bus).order_by(tables.Bus.id))).scalars().all()
        return [_bus_from_row(r) for r in rows]

    async def get_bus(self, bus_id: str) -> Bus | None:
        async with self.session_factory() as session:
            row = await session.get(tables.Bus, bus_id)
        return _bus_from_row(row) if row else None

    async def update_bus_location(self, bus_id: str, lat: float, lng: float) -> Bus | None:
        async with self.session_factory() as session:
            row = await session.get(tables.Bus, bus_id)
            if row is None:
                return None
            row.current_lat = lat
            row.current_lng = lng
            row.last_updated = _utcnow()
            await session.commit()
            return _bus_from_row(row)

    async def record_suggestion(self, record: SuggestionRecord) -> None:
        async with self.session_factory() as session:
            session.add(tables.RouteSuggestion(
                id=record.id,
                from_location=record.from_location,
                to_location=record.to_location,
                direct_route=record.direct_route,
                connecting_routes=record.connecting_routes,
                estimated_time=record.estimated_time,
                created_at=record.created_at,
            ))
            await session.commit()
