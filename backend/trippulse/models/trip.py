import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trippulse.database import Base, JSONVariant


class TripRequest(Base):
    __tablename__ = "trip_requests"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL")
    )
    session_id: Mapped[str | None] = mapped_column(String(64))
    origin: Mapped[str | None] = mapped_column(String(10))
    origin_city: Mapped[str | None] = mapped_column(String(128))
    destination: Mapped[str | None] = mapped_column(String(10))
    destination_city: Mapped[str | None] = mapped_column(String(128))
    departure_date: Mapped[date | None] = mapped_column(Date)
    return_date: Mapped[date | None] = mapped_column(Date)
    travelers: Mapped[int] = mapped_column(Integer, default=1)
    trip_style: Mapped[str | None] = mapped_column(String(32))
    budget_type: Mapped[str] = mapped_column(String(20), default="total_trip")
    total_budget: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    currency: Mapped[str] = mapped_column(String(3), default="EUR")
    flight_split: Mapped[int] = mapped_column(Integer, default=50)
    hotel_split: Mapped[int] = mapped_column(Integer, default=35)
    activity_split: Mapped[int] = mapped_column(Integer, default=15)
    preferences: Mapped[dict | None] = mapped_column(JSONVariant)
    # draft | searching | completed | saved
    status: Mapped[str] = mapped_column(String(20), default="draft")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    offers: Mapped[list["Offer"]] = relationship(
        back_populates="trip", cascade="all, delete-orphan", order_by="Offer.rank"
    )
