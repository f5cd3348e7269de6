import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from route_planner.models.base import Base


class Route(Base):
    __tablename__ = "routes"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    route_name: Mapped[str] = mapped_column(String(64), nullable=False)
    stops: Mapped[list] = mapped_column(JSON, nullable=False)  # [{name, lat, lng, order}]
    schedule: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # [{time, stop}]
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="#1a1a1a")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class BusStop(Base):
    __tablename__ = "bus_stops"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    routes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # route ids


class Bus(Base):
    __tablename__ = "buses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    bus_number: Mapped[str] = mapped_column(String(20), nullable=False)
    route: Mapped[str] = mapped_column(String(64), nullable=False)
    current_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    current_lng: Mapped[float | None] = mapped_column(Float, nullable=True)
    last_updated: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=50)
    current_passengers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class RouteSuggestion(Base):
    __tablename__ = "route_suggestions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    from_location: Mapped[str] = mapped_column(String(255), nullable=False)
    to_location: Mapped[str] = mapped_column(String(255), nullable=False)
    direct_route: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    connecting_routes: Mapped[list | None] = mapped_column(JSON, nullable=True)
    estimated_time: Mapped[float | None] = mapped_column(Float, nullable=True)  # minutes
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
