import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from trippulse.config import settings
from trippulse.schemas.trip import TripStyle
from trippulse.services.offer_synthesizer import TripParameters


class OfferSearchRequest(BaseModel):
    trip_id: uuid.UUID
    origin: str = Field(min_length=2, max_length=10)
    destination: str = Field(min_length=2, max_length=10)
    departure_date: date
    return_date: date
    travelers: int = Field(ge=1, le=20)
    currency: str = Field(settings.default_currency, min_length=3, max_length=3)
    max_stops: int | None = Field(None, ge=0)
    time_preference: Literal["morning", "afternoon", "evening", "anytime"] | None = None
    baggage: bool | None = None
    budget_per_person: float | None = Field(None, ge=0)
    trip_style: TripStyle | None = None

    def to_params(self) -> TripParameters:
        return TripParameters(
            origin=self.origin.upper(),
            destination=self.destination.upper(),
            departure_date=self.departure_date,
            return_date=self.return_date,
            travelers=self.travelers,
            currency=self.currency.upper(),
            trip_style=self.trip_style,
            budget_per_person=self.budget_per_person,
            max_stops=self.max_stops,
            time_preference=self.time_preference,
            baggage=self.baggage,
        )


class OfferResponse(BaseModel):
    id: uuid.UUID | None = None
    trip_id: uuid.UUID | None = None
    rank: int
    airline: str
    airline_code: str
    airline_logo: str | None
    flight_number: str
    departure_time: str
    arrival_time: str
    return_departure_time: str
    return_arrival_time: str
    stops: int
    return_stops: int
    duration_minutes: int
    return_duration_minutes: int
    duration: str
    return_duration: str
    flight_price: float
    hotel_estimate: float
    activity_estimate: float
    total_estimate: float
    deal_score: float
    currency: str
    booking_url: str | None
    is_estimate: bool


class OfferSearchResponse(BaseModel):
    offers: list[OfferResponse]
    cached: bool


class OfferRefreshResponse(OfferSearchResponse):
    rate_limited: bool


class PriceSnapshotResponse(BaseModel):
    id: uuid.UUID
    airline_code: str
    price: float
    currency: str
    source: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
