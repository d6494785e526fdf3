import asyncio
import random
import uuid

import pytest
from sqlalchemy import func, select

from trippulse.models.api_log import ApiLog
from trippulse.models.offer import Offer, PriceSnapshot
from trippulse.models.trip import TripRequest
from trippulse.services.flight_service import FlightService
from trippulse.services.rate_limiter import InMemoryRateLimiter
from trippulse.services.search_orchestrator import SearchOrchestrator


class ExplodingFlightService:
    async def generate_and_score_offers(self, params):
        raise RuntimeError("supplier down")


async def _count(db, model, *where) -> int:
    result = await db.execute(select(func.count()).select_from(model).where(*where))
    return result.scalar_one()


async def test_search_generates_and_persists(db, trip, orchestrator, make_params):
    result = await orchestrator.search(db, trip.id, make_params())

    assert result.cached is False
    assert 5 <= len(result.offers) <= 10
    scores = [o["deal_score"] for o in result.offers]
    assert scores == sorted(scores, reverse=True)
    assert all(o["id"] is not None for o in result.offers)

    assert await _count(db, Offer, Offer.trip_id == trip.id) == len(result.offers)
    await db.refresh(trip)
    assert trip.status == "completed"


async def test_search_writes_api_log(db, trip, orchestrator, make_params):
    result = await orchestrator.search(db, trip.id, make_params())

    logs = (await db.execute(select(ApiLog))).scalars().all()
    assert len(logs) == 1
    assert logs[0].endpoint == "/mock/search_flights"
    assert logs[0].status_code == 200
    assert logs[0].response_body == {"count": len(result.offers)}
    assert logs[0].request_body["origin"] == "FCO"


async def test_rate_limited_search_returns_cached_batch(
    db, trip, orchestrator, rate_limiter, make_params
):
    first = await orchestrator.search(db, trip.id, make_params())
    rate_limiter.allowed = False

    second = await orchestrator.search(db, trip.id, make_params())

    assert second.cached is True
    assert [o["id"] for o in second.offers] == [o["id"] for o in first.offers]
    assert rate_limiter.keys == ["FCO-BCN-2026-04-01", "FCO-BCN-2026-04-01"]


async def test_rate_limited_search_without_batch_still_generates(
    db, trip, orchestrator, rate_limiter, make_params
):
    rate_limiter.allowed = False
    result = await orchestrator.search(db, trip.id, make_params())

    assert result.cached is False
    assert 5 <= len(result.offers) <= 10


async def test_same_route_for_another_trip_generates(db, flight_service, make_params):
    """Route cooldown only falls back to a cache when the trip has its own batch."""
    orchestrator = SearchOrchestrator(flight_service, InMemoryRateLimiter(10))
    trip_a = TripRequest(origin="FCO", destination="BCN", travelers=2)
    trip_b = TripRequest(origin="FCO", destination="BCN", travelers=2)
    db.add_all([trip_a, trip_b])
    await db.commit()

    first = await orchestrator.search(db, trip_a.id, make_params())
    second = await orchestrator.search(db, trip_b.id, make_params())

    assert first.cached is False
    assert second.cached is False
    assert await _count(db, Offer, Offer.trip_id == trip_b.id) == len(second.offers)

    again = await orchestrator.search(db, trip_a.id, make_params())
    assert again.cached is True


async def test_refresh_replaces_batch(db, trip, orchestrator, make_params):
    first = await orchestrator.search(db, trip.id, make_params())
    second = await orchestrator.refresh(db, trip.id, make_params())

    assert second.cached is False
    assert second.rate_limited is False
    first_ids = {o["id"] for o in first.offers}
    stored = (await db.execute(select(Offer.id).where(Offer.trip_id == trip.id))).scalars().all()
    assert set(stored) == {o["id"] for o in second.offers}
    assert first_ids.isdisjoint(stored)

    snapshots = await _count(db, PriceSnapshot, PriceSnapshot.trip_id == trip.id)
    assert snapshots == len(first.offers) + len(second.offers)


async def test_rate_limited_refresh_flags_response(
    db, trip, orchestrator, rate_limiter, make_params
):
    await orchestrator.search(db, trip.id, make_params())
    rate_limiter.allowed = False

    result = await orchestrator.refresh(db, trip.id, make_params())

    assert result.cached is True
    assert result.rate_limited is True
    assert rate_limiter.keys[-1] == f"refresh-{trip.id}"


async def test_cached_batch_order_matches_generation(
    db, trip, orchestrator, rate_limiter, make_params
):
    first = await orchestrator.search(db, trip.id, make_params(budget_per_person=200))
    rate_limiter.allowed = False
    cached = await orchestrator.refresh(db, trip.id, make_params())

    assert [o["airline_code"] for o in cached.offers] == [o["airline_code"] for o in first.offers]


async def test_unknown_trip_returns_offers_without_persisting(db, orchestrator, make_params):
    missing = uuid.uuid4()
    result = await orchestrator.search(db, missing, make_params())

    assert result.cached is False
    assert 5 <= len(result.offers) <= 10
    assert all(o["id"] is None for o in result.offers)
    assert await _count(db, Offer) == 0


async def test_generation_failure_is_logged_and_raised(db, trip, rate_limiter, make_params):
    orchestrator = SearchOrchestrator(ExplodingFlightService(), rate_limiter)

    with pytest.raises(RuntimeError, match="supplier down"):
        await orchestrator.search(db, trip.id, make_params())

    logs = (await db.execute(select(ApiLog))).scalars().all()
    assert len(logs) == 1
    assert logs[0].status_code == 500
    assert logs[0].error_message == "supplier down"
    assert await _count(db, Offer) == 0


async def test_totals_survive_persistence(db, trip, make_params, rate_limiter):
    orchestrator = SearchOrchestrator(
        FlightService(rng=random.Random(123), delay_min_ms=0, delay_max_ms=0), rate_limiter
    )
    result = await orchestrator.search(db, trip.id, make_params(travelers=3))
    for o in result.offers:
        assert o["total_estimate"] == o["flight_price"] + o["hotel_estimate"] + o["activity_estimate"]
        assert o["is_estimate"] is True


def test_rate_limit_keys(make_params):
    trip_id = uuid.UUID("12345678-1234-5678-1234-567812345678")
    assert SearchOrchestrator.search_key(make_params()) == "FCO-BCN-2026-04-01"
    assert SearchOrchestrator.refresh_key(trip_id) == f"refresh-{trip_id}"


class TrackingFlightService(FlightService):
    """Real generation with a supplier delay; records how many calls overlap."""

    def __init__(self):
        super().__init__(rng=random.Random(5), delay_min_ms=20, delay_max_ms=40)
        self.active = 0
        self.max_active = 0

    async def generate_and_score_offers(self, params):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            return await super().generate_and_score_offers(params)
        finally:
            self.active -= 1


async def test_concurrent_searches_for_one_trip_do_not_interleave(
    db, trip, session_factory, rate_limiter, make_params
):
    supplier = TrackingFlightService()
    orchestrator = SearchOrchestrator(supplier, rate_limiter)

    async def run_search():
        async with session_factory() as session:
            return await orchestrator.search(session, trip.id, make_params())

    first, second = await asyncio.gather(run_search(), run_search())

    assert supplier.max_active == 1
    stored = set(
        (await db.execute(select(Offer.id).where(Offer.trip_id == trip.id))).scalars().all()
    )
    batches = [{o["id"] for o in r.offers} for r in (first, second)]
    assert stored in batches
    assert batches[0].isdisjoint(batches[1])
    snapshots = await _count(db, PriceSnapshot, PriceSnapshot.trip_id == trip.id)
    assert snapshots == len(first.offers) + len(second.offers)


async def test_status_is_searching_only_while_generating(db, trip, rate_limiter, make_params):
    seen = []

    class RecordingFlightService(FlightService):
        async def generate_and_score_offers(self, params):
            row = await db.get(TripRequest, trip.id)
            seen.append(row.status)
            return await super().generate_and_score_offers(params)

    orchestrator = SearchOrchestrator(
        RecordingFlightService(rng=random.Random(8), delay_min_ms=0, delay_max_ms=0),
        rate_limiter,
    )
    await orchestrator.search(db, trip.id, make_params())

    assert seen == ["searching"]
    await db.refresh(trip)
    assert trip.status == "completed"


async def test_cached_search_leaves_status_alone(db, trip, orchestrator, rate_limiter, make_params):
    await orchestrator.search(db, trip.id, make_params())
    trip.status = "draft"
    await db.commit()
    rate_limiter.allowed = False

    result = await orchestrator.search(db, trip.id, make_params())

    assert result.cached is True
    await db.refresh(trip)
    assert trip.status == "draft"
