"""Place search (autocomplete) endpoint."""

from fastapi import APIRouter, Query

from route_planner.schemas.search import PlaceOut

router = APIRouter(prefix="/api/places", tags=["places"])

# Will be set by main.py
geocoder = None


@router.get("", response_model=list[PlaceOut])
async def search_places(q: str = Query(min_length=2), limit: int = Query(5, ge=1, le=20)):
    """Resolve free text to candidate places for the search form."""
    if geocoder is None:
        return []
    places = await geocoder.search(q, limit=limit)
    return [PlaceOut(name=p.name, lat=p.lat, lng=p.lng) for p in places]
