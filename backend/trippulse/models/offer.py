import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trippulse.database import Base, JSONVariant


class Offer(Base):
    __tablename__ = "offers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    trip_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("trip_requests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Position in the scored batch; breaks deal_score ties in generation order
    rank: Mapped[int] = mapped_column(Integer, nullable=False)
    airline: Mapped[str] = mapped_column(String(128), nullable=False)
    airline_code: Mapped[str] = mapped_column(String(10), nullable=False)
    airline_logo: Mapped[str | None] = mapped_column(String(512))
    flight_number: Mapped[str] = mapped_column(String(32), nullable=False)
    departure_time: Mapped[str] = mapped_column(String(5), nullable=False)
    arrival_time: Mapped[str] = mapped_column(String(5), nullable=False)
    return_departure_time: Mapped[str] = mapped_column(String(5), nullable=False)
    return_arrival_time: Mapped[str] = mapped_column(String(5), nullable=False)
    stops: Mapped[int] = mapped_column(Integer, default=0)
    return_stops: Mapped[int] = mapped_column(Integer, default=0)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    return_duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    flight_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    hotel_estimate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    activity_estimate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_estimate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    deal_score: Mapped[Decimal] = mapped_column(Numeric(3, 1), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="EUR")
    booking_url: Mapped[str | None] = mapped_column(String(1024))
    is_estimate: Mapped[bool] = mapped_column(Boolean, default=True)
    raw_data: Mapped[dict | None] = mapped_column(JSONVariant)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    trip: Mapped["TripRequest"] = relationship(back_populates="offers")


class PriceSnapshot(Base):
    """Price history per trip and airline; survives batch replacement."""

    __tablename__ = "price_snapshots"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    trip_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("trip_requests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    airline_code: Mapped[str] = mapped_column(String(10), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="EUR")
    source: Mapped[str | None] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
