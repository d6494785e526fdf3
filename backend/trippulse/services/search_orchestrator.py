"""Search orchestrator — rate-limited offer generation with cached-batch fallback."""

import asyncio
import logging
import time
import uuid
import weakref
from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.config import settings
from trippulse.models.offer import Offer, PriceSnapshot
from trippulse.models.trip import TripRequest
from trippulse.services.api_log_service import ApiLogService, api_log_service
from trippulse.services.deal_scorer import ScoredOffer
from trippulse.services.flight_service import MOCK_ENDPOINT, FlightService, flight_service
from trippulse.services.offer_synthesizer import TripParameters, format_duration
from trippulse.services.rate_limiter import InMemoryRateLimiter, RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    offers: list[dict] = field(default_factory=list)
    cached: bool = False
    rate_limited: bool = False


def serialize_offer(row: Offer) -> dict:
    """Flatten a persisted offer row into the API shape."""
    return {
        "id": row.id,
        "trip_id": row.trip_id,
        "rank": row.rank,
        "airline": row.airline,
        "airline_code": row.airline_code,
        "airline_logo": row.airline_logo,
        "flight_number": row.flight_number,
        "departure_time": row.departure_time,
        "arrival_time": row.arrival_time,
        "return_departure_time": row.return_departure_time,
        "return_arrival_time": row.return_arrival_time,
        "stops": row.stops,
        "return_stops": row.return_stops,
        "duration_minutes": row.duration_minutes,
        "return_duration_minutes": row.return_duration_minutes,
        "duration": format_duration(row.duration_minutes),
        "return_duration": format_duration(row.return_duration_minutes),
        "flight_price": float(row.flight_price),
        "hotel_estimate": float(row.hotel_estimate),
        "activity_estimate": float(row.activity_estimate),
        "total_estimate": float(row.total_estimate),
        "deal_score": float(row.deal_score),
        "currency": row.currency,
        "booking_url": row.booking_url,
        "is_estimate": row.is_estimate,
    }


class SearchOrchestrator:
    """Coordinates rate limiting, offer generation, and batch persistence per trip."""

    def __init__(
        self,
        flight_service: FlightService,
        rate_limiter: RateLimiter,
        api_logs: ApiLogService = api_log_service,
    ):
        self._flight_service = flight_service
        self._rate_limiter = rate_limiter
        self._api_logs = api_logs
        # One writer per trip; entries disappear once no request holds the lock
        self._trip_locks: weakref.WeakValueDictionary[uuid.UUID, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    @staticmethod
    def search_key(params: TripParameters) -> str:
        return f"{params.origin}-{params.destination}-{params.departure_date.isoformat()}"

    @staticmethod
    def refresh_key(trip_id: uuid.UUID) -> str:
        return f"refresh-{trip_id}"

    async def search(
        self, db: AsyncSession, trip_id: uuid.UUID, params: TripParameters
    ) -> SearchResult:
        """Generate a ranked batch for the trip, or return its batch while the route cools down."""
        if not self._rate_limiter.allow(self.search_key(params)):
            cached = await self.get_offers(db, trip_id)
            if cached:
                logger.info(f"Search rate limited for trip {trip_id}, returning cached batch")
                return SearchResult(offers=cached, cached=True)

        offers = await self._generate_and_persist(db, trip_id, params)
        return SearchResult(offers=offers, cached=False)

    async def refresh(
        self, db: AsyncSession, trip_id: uuid.UUID, params: TripParameters
    ) -> SearchResult:
        """Regenerate the trip's batch at most once per cooldown window."""
        if not self._rate_limiter.allow(self.refresh_key(trip_id)):
            cached = await self.get_offers(db, trip_id)
            if cached:
                logger.info(f"Refresh rate limited for trip {trip_id}, returning cached batch")
                return SearchResult(offers=cached, cached=True, rate_limited=True)

        offers = await self._generate_and_persist(db, trip_id, params)
        return SearchResult(offers=offers, cached=False, rate_limited=False)

    async def get_offers(self, db: AsyncSession, trip_id: uuid.UUID) -> list[dict]:
        """Persisted batch for a trip, best deal first."""
        result = await db.execute(
            select(Offer)
            .where(Offer.trip_id == trip_id)
            .order_by(Offer.deal_score.desc(), Offer.rank.asc())
        )
        return [serialize_offer(row) for row in result.scalars().all()]

    def _trip_lock(self, trip_id: uuid.UUID) -> asyncio.Lock:
        lock = self._trip_locks.get(trip_id)
        if lock is None:
            lock = asyncio.Lock()
            self._trip_locks[trip_id] = lock
        return lock

    async def _mark_searching(self, db: AsyncSession, trip_id: uuid.UUID) -> None:
        """Move a draft trip to 'searching' once generation is actually going to run."""
        try:
            trip = await db.get(TripRequest, trip_id)
            if trip and trip.status == "draft":
                trip.status = "searching"
                await db.commit()
        except Exception as e:
            logger.warning(f"Failed to set trip status to searching for {trip_id}: {e}")
            await db.rollback()

    async def _generate_and_persist(
        self, db: AsyncSession, trip_id: uuid.UUID, params: TripParameters
    ) -> list[dict]:
        lock = self._trip_lock(trip_id)
        async with lock:
            await self._mark_searching(db, trip_id)
            start_time = time.monotonic()
            try:
                scored = await self._flight_service.generate_and_score_offers(params)
                offers = await self._replace_batch(db, trip_id, scored, params)
            except Exception as e:
                elapsed_ms = int((time.monotonic() - start_time) * 1000)
                logger.error(f"Offer generation failed for trip {trip_id}: {e}")
                await db.rollback()
                await self._api_logs.log_call(
                    db,
                    endpoint=MOCK_ENDPOINT,
                    method="POST",
                    status_code=500,
                    duration_ms=elapsed_ms,
                    request_body=params.as_dict(),
                    error_message=str(e),
                )
                raise

            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            await self._api_logs.log_call(
                db,
                endpoint=MOCK_ENDPOINT,
                method="POST",
                status_code=200,
                duration_ms=elapsed_ms,
                request_body=params.as_dict(),
                response_body={"count": len(scored)},
            )
            logger.info(f"Generated {len(scored)} offers for trip {trip_id} in {elapsed_ms}ms")
            return offers

    async def _replace_batch(
        self,
        db: AsyncSession,
        trip_id: uuid.UUID,
        scored: list[ScoredOffer],
        params: TripParameters,
    ) -> list[dict]:
        """Delete the trip's previous batch, insert the new one, and complete the trip."""
        trip = await db.get(TripRequest, trip_id)
        if trip is None:
            logger.warning(f"Trip {trip_id} not found, returning offers without persisting")
            return [s.as_dict() | {"id": None, "trip_id": None, "rank": i} for i, s in enumerate(scored)]

        await db.execute(delete(Offer).where(Offer.trip_id == trip.id))

        rows = []
        for rank, s in enumerate(scored):
            o = s.offer
            row = Offer(
                id=uuid.uuid4(),
                trip_id=trip.id,
                rank=rank,
                airline=o.airline,
                airline_code=o.airline_code,
                airline_logo=o.airline_logo,
                flight_number=o.flight_number,
                departure_time=o.departure_time,
                arrival_time=o.arrival_time,
                return_departure_time=o.return_departure_time,
                return_arrival_time=o.return_arrival_time,
                stops=o.stops,
                return_stops=o.return_stops,
                duration_minutes=o.duration_minutes,
                return_duration_minutes=o.return_duration_minutes,
                flight_price=Decimal(o.flight_price),
                hotel_estimate=Decimal(o.hotel_estimate),
                activity_estimate=Decimal(o.activity_estimate),
                total_estimate=Decimal(o.total_estimate),
                deal_score=Decimal(str(s.deal_score)),
                currency=o.currency,
                booking_url=o.booking_url,
                is_estimate=o.is_estimate,
                raw_data={"params": params.as_dict()},
            )
            rows.append(row)
            db.add(row)
            db.add(
                PriceSnapshot(
                    trip_id=trip.id,
                    airline_code=o.airline_code,
                    price=Decimal(o.flight_price),
                    currency=o.currency,
                    source="mock",
                )
            )

        trip.status = "completed"
        await db.commit()
        return [serialize_offer(row) for row in rows]


search_orchestrator = SearchOrchestrator(
    flight_service=flight_service,
    rate_limiter=InMemoryRateLimiter(settings.search_rate_limit_seconds),
)
