"""Flight service — mock supplier: synthesize, score, and rank an offer batch.

There is no real supplier integration; every offer is an estimate.
"""

import asyncio
import logging
import random

from trippulse.config import settings
from trippulse.services.deal_scorer import ScoredOffer, score_offers
from trippulse.services.offer_synthesizer import TripParameters, generate_offers

logger = logging.getLogger(__name__)

MOCK_ENDPOINT = "/mock/search_flights"


class FlightService:
    """Mock flight search with a simulated supplier round-trip."""

    def __init__(
        self,
        rng: random.Random | None = None,
        delay_min_ms: int = 500,
        delay_max_ms: int = 1500,
    ):
        self._rng = rng or random.Random()
        self.delay_min_ms = delay_min_ms
        self.delay_max_ms = delay_max_ms

    async def _simulate_latency(self) -> None:
        if self.delay_max_ms <= 0:
            return
        delay_ms = self._rng.randint(self.delay_min_ms, self.delay_max_ms)
        await asyncio.sleep(delay_ms / 1000)

    async def generate_and_score_offers(self, params: TripParameters) -> list[ScoredOffer]:
        """Return a ranked batch for the trip; no side effects beyond the delay."""
        await self._simulate_latency()
        raw_offers = generate_offers(params, self._rng)
        scored = score_offers(raw_offers, params)
        logger.debug(
            f"Generated {len(scored)} offers for {params.origin}->{params.destination} "
            f"on {params.departure_date.isoformat()}"
        )
        return scored


flight_service = FlightService(
    delay_min_ms=settings.mock_delay_min_ms,
    delay_max_ms=settings.mock_delay_max_ms,
)
