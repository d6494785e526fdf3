import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.database import get_db
from trippulse.dependencies import get_current_user
from trippulse.models.saved_trip import SavedTrip
from trippulse.models.trip import TripRequest
from trippulse.models.user import User
from trippulse.schemas.saved import SavedTripResponse, SaveTripRequest

router = APIRouter()


@router.post("", status_code=201, response_model=SavedTripResponse)
async def save_trip(
    req: SaveTripRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    trip = await db.get(TripRequest, req.trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")

    saved = SavedTrip(
        user_id=user.id,
        trip_id=trip.id,
        offer_id=req.offer_id,
        name=req.name,
        notes=req.notes,
    )
    db.add(saved)
    trip.status = "saved"
    await db.commit()
    await db.refresh(saved)
    return SavedTripResponse.model_validate(saved)


@router.get("", response_model=list[SavedTripResponse])
async def list_saved_trips(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(SavedTrip)
        .where(SavedTrip.user_id == user.id)
        .order_by(SavedTrip.created_at.desc())
    )
    return [SavedTripResponse.model_validate(s) for s in result.scalars().all()]


@router.delete("/{saved_id}")
async def delete_saved_trip(
    saved_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete one of the current user's saved trips; other users' rows are untouched."""
    await db.execute(
        delete(SavedTrip).where(SavedTrip.id == saved_id, SavedTrip.user_id == user.id)
    )
    await db.commit()
    return {"success": True}
