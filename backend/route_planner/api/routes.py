"""Route REST API endpoints."""

from fastapi import APIRouter, HTTPException

from route_planner.schemas.route import RouteInfo

router = APIRouter(prefix="/api/routes", tags=["routes"])

# Will be set by main.py
store = None


@router.get("", response_model=list[RouteInfo])
async def list_routes():
    """Get all active bus routes with their stops."""
    if store is None:
        return []
    routes = await store.get_all_routes()
    return [RouteInfo.from_route(r) for r in routes if r.active]


@router.get("/{route_id}", response_model=RouteInfo)
async def get_route(route_id: str):
    """Get a single route by id."""
    route = await store.get_route(route_id) if store else None
    if route is None:
        raise HTTPException(status_code=404, detail="Route not found")
    return RouteInfo.from_route(route)
