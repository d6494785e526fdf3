"""Airport search router — autocomplete for trip intake."""

from fastapi import APIRouter, Depends, Query

from trippulse.dependencies import get_airport_service
from trippulse.services.airport_service import AirportService

router = APIRouter()


@router.get("/search")
async def search_airports(
    q: str = Query(..., min_length=2, max_length=50),
    limit: int = Query(10, ge=1, le=10),
    airports: AirportService = Depends(get_airport_service),
):
    """Search airports by IATA code, city, airport name, or country."""
    return airports.search_airports(q, limit)
