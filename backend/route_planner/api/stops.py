"""Bus stop REST API endpoints."""

from fastapi import APIRouter

from route_planner.schemas.route import BusStopInfo

router = APIRouter(prefix="/api/bus-stops", tags=["stops"])

# Will be set by main.py
store = None


@router.get("", response_model=list[BusStopInfo])
async def list_bus_stops():
    """Get all bus stops."""
    if store is None:
        return []
    stops = await store.get_all_bus_stops()
    return [
        BusStopInfo(id=s.id, name=s.name, latitude=s.lat, longitude=s.lng, routes=list(s.routes))
        for s in stops
    ]
