"""Offers router — offer search/refresh, persisted batches, and price history."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.database import get_db
from trippulse.dependencies import get_search_orchestrator
from trippulse.models.offer import Offer, PriceSnapshot
from trippulse.models.trip import TripRequest
from trippulse.schemas.offer import (
    OfferRefreshResponse,
    OfferResponse,
    OfferSearchRequest,
    OfferSearchResponse,
    PriceSnapshotResponse,
)
from trippulse.services.search_orchestrator import SearchOrchestrator, serialize_offer

logger = logging.getLogger(__name__)

router = APIRouter()


async def _reset_trip_status(db: AsyncSession, trip_id: uuid.UUID) -> None:
    """Reset trip status to draft on search failure."""
    try:
        await db.rollback()
        trip = await db.get(TripRequest, trip_id)
        if trip and trip.status == "searching":
            trip.status = "draft"
            await db.commit()
    except Exception as e:
        logger.warning(f"Failed to reset trip status for {trip_id}: {e}")


@router.post("/search", response_model=OfferSearchResponse)
async def search_offers(
    req: OfferSearchRequest,
    db: AsyncSession = Depends(get_db),
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
):
    """Generate and rank offers for a trip, or return its batch while the route cools down."""
    try:
        result = await orchestrator.search(db, req.trip_id, req.to_params())
    except Exception as e:
        logger.error(f"Offer search failed for trip {req.trip_id}: {e}")
        await _reset_trip_status(db, req.trip_id)
        raise HTTPException(status_code=500, detail=f"Search failed: {str(e)}")

    return OfferSearchResponse(offers=result.offers, cached=result.cached)


@router.post("/refresh", response_model=OfferRefreshResponse)
async def refresh_offers(
    req: OfferSearchRequest,
    db: AsyncSession = Depends(get_db),
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
):
    """Regenerate a trip's offers, at most once per cooldown window."""
    try:
        result = await orchestrator.refresh(db, req.trip_id, req.to_params())
    except Exception as e:
        logger.error(f"Offer refresh failed for trip {req.trip_id}: {e}")
        await _reset_trip_status(db, req.trip_id)
        raise HTTPException(status_code=500, detail=f"Refresh failed: {str(e)}")

    return OfferRefreshResponse(
        offers=result.offers, cached=result.cached, rate_limited=result.rate_limited
    )


@router.get("/trip/{trip_id}", response_model=list[OfferResponse])
async def get_offers_by_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
):
    """Persisted batch for a trip, best deal first; empty for unknown trips."""
    return await orchestrator.get_offers(db, trip_id)


async def _get_offer_or_404(db: AsyncSession, offer_id: uuid.UUID) -> Offer:
    offer = await db.get(Offer, offer_id)
    if not offer:
        raise HTTPException(status_code=404, detail="Offer not found")
    return offer


@router.get("/{offer_id}", response_model=OfferResponse)
async def get_offer_detail(offer_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    offer = await _get_offer_or_404(db, offer_id)
    return serialize_offer(offer)


@router.get("/{offer_id}/history", response_model=list[PriceSnapshotResponse])
async def get_price_history(offer_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Price snapshots for the offer's airline on its trip, newest first."""
    offer = await _get_offer_or_404(db, offer_id)
    result = await db.execute(
        select(PriceSnapshot)
        .where(
            PriceSnapshot.trip_id == offer.trip_id,
            PriceSnapshot.airline_code == offer.airline_code,
        )
        .order_by(PriceSnapshot.created_at.desc())
    )
    return [PriceSnapshotResponse.model_validate(s) for s in result.scalars().all()]
