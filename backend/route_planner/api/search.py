"""Route search endpoint."""

from fastapi import APIRouter, HTTPException

from route_planner.schemas.search import SearchRequest, SearchResponse, SuggestionOut

router = APIRouter(tags=["search"])

# Will be set by main.py
planner = None


@router.post("/api/routes/search", response_model=SearchResponse)
@router.post("/search", response_model=SearchResponse, include_in_schema=False)
async def search_routes(body: SearchRequest):
    """Suggest direct, transfer and alternative bus routes between two places."""
    if planner is None:
        raise HTTPException(status_code=503, detail="Planner not initialized")
    query = body.to_query()
    suggestions = planner.search(query)
    await planner.record(query, suggestions)
    return SearchResponse(suggestions=[SuggestionOut.from_suggestion(s) for s in suggestions])
