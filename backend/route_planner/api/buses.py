"""Bus REST API endpoints: listing and live location reports."""

from fastapi import APIRouter, HTTPException

from route_planner.schemas.bus import BusInfo, BusLocationUpdate, BusPosition

router = APIRouter(prefix="/api/buses", tags=["buses"])

# Will be set by main.py
store = None
tracker = None


@router.get("", response_model=list[BusInfo])
async def list_buses():
    """Get all active buses."""
    if store is None:
        return []
    buses = await store.get_all_buses()
    return [
        BusInfo(
            id=b.id,
            bus_number=b.bus_number,
            route=b.route_id,
            current_lat=b.current_lat,
            current_lng=b.current_lng,
            last_updated=b.last_updated.isoformat() if b.last_updated else None,
            is_active=b.active,
            capacity=b.capacity,
            current_passengers=b.current_passengers,
        )
        for b in buses if b.active
    ]


@router.get("/positions", response_model=list[BusPosition])
async def list_positions(route: str | None = None):
    """Latest live position of every tracked bus."""
    if tracker is None:
        return []
    positions = list(tracker.current_positions.values())
    if route:
        positions = [p for p in positions if p.route_id == route]
    return positions


@router.post("/{bus_id}/location", response_model=BusPosition)
async def update_location(bus_id: str, body: BusLocationUpdate):
    """Report a bus location (tracking devices)."""
    if tracker is None:
        raise HTTPException(status_code=503, detail="Tracker not initialized")
    position = await tracker.update_location(
        bus_id, body.latitude, body.longitude, speed=body.speed, heading=body.heading,
    )
    if position is None:
        raise HTTPException(status_code=404, detail="Bus not found")
    return position
