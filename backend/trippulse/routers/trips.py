import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.database import get_db
from trippulse.dependencies import get_current_user, get_optional_user
from trippulse.models.trip import TripRequest
from trippulse.models.user import User
from trippulse.schemas.trip import (
    CreateTripRequest,
    CreateTripResponse,
    TripResponse,
    UpdateTripRequest,
)

router = APIRouter()


async def get_trip_or_404(db: AsyncSession, trip_id: uuid.UUID) -> TripRequest:
    trip = await db.get(TripRequest, trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.post("", status_code=201, response_model=CreateTripResponse)
async def create_trip(
    req: CreateTripRequest,
    db: AsyncSession = Depends(get_db),
    user: User | None = Depends(get_optional_user),
):
    """Create a draft trip request from intake parameters."""
    data = req.model_dump()
    if data["total_budget"] is not None:
        data["total_budget"] = Decimal(str(data["total_budget"]))
    data["currency"] = data["currency"].upper()

    trip = TripRequest(**data, user_id=user.id if user else None, status="draft")
    db.add(trip)
    await db.commit()
    return CreateTripResponse(id=trip.id, status=trip.status)


@router.get("/mine", response_model=list[TripResponse])
async def list_my_trips(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(TripRequest)
        .where(TripRequest.user_id == user.id)
        .order_by(TripRequest.created_at.desc())
    )
    return [TripResponse.model_validate(t) for t in result.scalars().all()]


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(trip_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    trip = await get_trip_or_404(db, trip_id)
    return TripResponse.model_validate(trip)


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: uuid.UUID,
    req: UpdateTripRequest,
    db: AsyncSession = Depends(get_db),
):
    """Apply a partial update; only fields present in the body change."""
    trip = await get_trip_or_404(db, trip_id)

    updates = req.model_dump(exclude_unset=True)
    if updates.get("total_budget") is not None:
        updates["total_budget"] = Decimal(str(updates["total_budget"]))
    if updates.get("currency"):
        updates["currency"] = updates["currency"].upper()
    for field_name, value in updates.items():
        setattr(trip, field_name, value)

    await db.commit()
    await db.refresh(trip)
    return TripResponse.model_validate(trip)
