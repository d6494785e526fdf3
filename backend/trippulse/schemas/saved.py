import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class SaveTripRequest(BaseModel):
    trip_id: uuid.UUID
    offer_id: uuid.UUID | None = None
    name: str | None = Field(None, max_length=256)
    notes: str | None = None


class SavedTripResponse(BaseModel):
    id: uuid.UUID
    trip_id: uuid.UUID
    offer_id: uuid.UUID | None
    name: str | None
    notes: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
