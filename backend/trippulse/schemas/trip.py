import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from trippulse.config import settings

TripStyle = Literal["sea", "city", "nature", "mixed"]
BudgetType = Literal["flights_only", "total_trip"]
TripStatus = Literal["draft", "searching", "completed", "saved"]


class CreateTripRequest(BaseModel):
    origin: str | None = Field(None, max_length=10)
    origin_city: str | None = None
    destination: str | None = Field(None, max_length=10)
    destination_city: str | None = None
    departure_date: date | None = None
    return_date: date | None = None
    travelers: int = Field(1, ge=1, le=20)
    trip_style: TripStyle | None = None
    budget_type: BudgetType = "total_trip"
    total_budget: float | None = Field(None, ge=0)
    currency: str = Field(settings.default_currency, min_length=3, max_length=3)
    flight_split: int = Field(50, ge=0, le=100)
    hotel_split: int = Field(35, ge=0, le=100)
    activity_split: int = Field(15, ge=0, le=100)
    preferences: dict | None = None
    session_id: str | None = Field(None, max_length=64)


class UpdateTripRequest(BaseModel):
    origin: str | None = Field(None, max_length=10)
    origin_city: str | None = None
    destination: str | None = Field(None, max_length=10)
    destination_city: str | None = None
    departure_date: date | None = None
    return_date: date | None = None
    travelers: int | None = Field(None, ge=1, le=20)
    trip_style: TripStyle | None = None
    budget_type: BudgetType | None = None
    total_budget: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    flight_split: int | None = Field(None, ge=0, le=100)
    hotel_split: int | None = Field(None, ge=0, le=100)
    activity_split: int | None = Field(None, ge=0, le=100)
    preferences: dict | None = None
    status: TripStatus | None = None


class TripResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID | None
    session_id: str | None
    origin: str | None
    origin_city: str | None
    destination: str | None
    destination_city: str | None
    departure_date: date | None
    return_date: date | None
    travelers: int
    trip_style: str | None
    budget_type: str
    total_budget: float | None
    currency: str
    flight_split: int
    hotel_split: int
    activity_split: int
    preferences: dict | None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CreateTripResponse(BaseModel):
    id: uuid.UUID
    status: str
