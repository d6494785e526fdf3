"""Deal scorer — rates each offer 1-10 relative to its batch.

Scoring needs the full price list of the batch, so it runs only after the
whole batch has been synthesized. It is deterministic for fixed inputs.
"""

import math
from dataclasses import asdict, dataclass

from trippulse.services.offer_synthesizer import RawOffer, TripParameters

BASELINE_SCORE = 5.0
MIN_SCORE = 1.0
MAX_SCORE = 10.0

# (max price/budget ratio, points); first matching threshold wins
BUDGET_FIT_STEPS: tuple[tuple[float, float], ...] = (
    (0.3, 3.0),
    (0.5, 2.0),
    (0.7, 1.0),
)
OVER_BUDGET_PENALTY = -2.0
CHEAPNESS_WEIGHT = 2.0
NONSTOP_BONUS = 0.5
MAX_STOPS_PENALTY = -1.5


@dataclass(frozen=True)
class ScoredOffer:
    """Non-mutating scored wrapper around a RawOffer."""

    offer: RawOffer
    deal_score: float

    def as_dict(self) -> dict:
        data = asdict(self.offer)
        data["duration"] = self.offer.duration
        data["return_duration"] = self.offer.return_duration
        data["deal_score"] = self.deal_score
        return data


def budget_fit_points(flight_price: float, budget_per_person: float | None) -> float:
    """
    Points for how the itinerary price sits against the per-traveler budget.

    The whole-itinerary price (already multiplied by travelers) is compared
    directly with the per-traveler budget.
    """
    if not budget_per_person or budget_per_person <= 0:
        return 0.0
    ratio = flight_price / budget_per_person
    for threshold, points in BUDGET_FIT_STEPS:
        if ratio <= threshold:
            return points
    if ratio > 1:
        return OVER_BUDGET_PENALTY
    return 0.0


def cheapness_points(flight_price: float, all_prices: list[float]) -> float:
    """Up to CHEAPNESS_WEIGHT points; the cheapest offer in the batch gets all of them."""
    if len(all_prices) <= 1:
        return 0.0
    low = min(all_prices)
    high = max(all_prices)
    price_range = (high - low) or 1
    return (1 - (flight_price - low) / price_range) * CHEAPNESS_WEIGHT


def routing_points(stops: int, max_stops: int | None) -> float:
    points = NONSTOP_BONUS if stops == 0 else 0.0
    if max_stops is not None and stops > max_stops:
        points += MAX_STOPS_PENALTY
    return points


def round_half_up(score: float) -> float:
    """Round to one decimal with halves going up (7.25 -> 7.3), unlike round()."""
    return math.floor(score * 10 + 0.5) / 10


def score_offer(offer: RawOffer, all_prices: list[float], params: TripParameters) -> float:
    score = BASELINE_SCORE
    score += budget_fit_points(offer.flight_price, params.budget_per_person)
    score += cheapness_points(offer.flight_price, all_prices)
    score += routing_points(offer.stops, params.max_stops)
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(score)))


def score_offers(offers: list[RawOffer], params: TripParameters) -> list[ScoredOffer]:
    """
    Score a whole batch and rank it.

    Returns offers sorted by deal_score descending; equal scores keep
    generation order.
    """
    all_prices = [o.flight_price for o in offers]
    scored = [ScoredOffer(o, score_offer(o, all_prices, params)) for o in offers]
    scored.sort(key=lambda s: s.deal_score, reverse=True)
    return scored
