"""Offer synthesizer — builds plausible flight itineraries without a real supplier.

Each selected airline is sampled independently; its cost tier biases the fare
range and the stop-count distribution. Hotel and activity estimates are
derived from static rate tables scaled by trip style, length, and party size.
"""

import math
import random
from dataclasses import dataclass, field
from datetime import date

from trippulse.data.airlines import AIRLINES, Airline
from trippulse.data.destination_rates import (
    ACTIVITY_BASE_RATES,
    DEFAULT_ACTIVITY_RATE,
    DEFAULT_HOTEL_RATE,
    HOTEL_BASE_RATES,
    STYLE_HOTEL_MULTIPLIERS,
)

MIN_OFFERS = 5
MAX_OFFERS = 10

# Departure hour windows (inclusive) by time-of-day preference
TIME_WINDOWS: dict[str, tuple[int, int]] = {
    "morning": (6, 11),
    "afternoon": (12, 17),
    "evening": (18, 23),
}
ANYTIME_WINDOW = (6, 23)
DEPARTURE_MINUTES = (0, 15, 30, 45)

BOOKING_URL_TEMPLATE = (
    "https://www.google.com/travel/flights?q={origin}+to+{destination}"
    "&utm_source=trippulse&utm_medium=referral"
)


@dataclass(frozen=True)
class TripParameters:
    origin: str
    destination: str
    departure_date: date
    return_date: date
    travelers: int = 1
    currency: str = "EUR"
    origin_city: str | None = None
    destination_city: str | None = None
    trip_style: str | None = None  # sea | city | nature | mixed
    budget_per_person: float | None = None
    max_stops: int | None = None
    time_preference: str | None = None  # morning | afternoon | evening | anytime
    baggage: bool | None = None  # accepted, does not affect generation

    @property
    def trip_nights(self) -> int:
        return max(1, (self.return_date - self.departure_date).days)

    def as_dict(self) -> dict:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "departure_date": self.departure_date.isoformat(),
            "return_date": self.return_date.isoformat(),
            "travelers": self.travelers,
            "currency": self.currency,
            "trip_style": self.trip_style,
            "budget_per_person": self.budget_per_person,
            "max_stops": self.max_stops,
            "time_preference": self.time_preference,
            "baggage": self.baggage,
        }


@dataclass(frozen=True)
class RawOffer:
    """One synthesized itinerary, not yet scored."""

    airline: str
    airline_code: str
    airline_logo: str
    flight_number: str
    departure_time: str
    arrival_time: str
    return_departure_time: str
    return_arrival_time: str
    stops: int
    return_stops: int
    duration_minutes: int
    return_duration_minutes: int
    flight_price: int
    hotel_estimate: int
    activity_estimate: int
    total_estimate: int
    currency: str
    booking_url: str
    is_estimate: bool = field(default=True)

    @property
    def duration(self) -> str:
        return format_duration(self.duration_minutes)

    @property
    def return_duration(self) -> str:
        return format_duration(self.return_duration_minutes)


def format_duration(minutes: int) -> str:
    """Format minutes as e.g. '2h 35m'."""
    return f"{minutes // 60}h {minutes % 60}m"


def add_duration(clock: str, minutes: int) -> str:
    """Add minutes to an HH:MM clock time, wrapping at 24h (no date rollover)."""
    h, m = (int(part) for part in clock.split(":"))
    total = h * 60 + m + minutes
    return f"{(total // 60) % 24:02d}:{total % 60:02d}"


def pick_departure_time(rng: random.Random, preference: str | None) -> str:
    start, end = TIME_WINDOWS.get(preference or "", ANYTIME_WINDOW)
    hour = rng.randint(start, end)
    minute = DEPARTURE_MINUTES[rng.randint(0, len(DEPARTURE_MINUTES) - 1)]
    return f"{hour:02d}:{minute:02d}"


def estimate_hotel_per_night(rng: random.Random, destination: str, trip_style: str | None) -> int:
    base = HOTEL_BASE_RATES.get(destination, DEFAULT_HOTEL_RATE)
    base *= STYLE_HOTEL_MULTIPLIERS.get(trip_style or "", 1.0)
    return round(base + rng.randint(-15, 15))


def estimate_activities_per_day(rng: random.Random, trip_style: str | None) -> int:
    base = ACTIVITY_BASE_RATES.get(trip_style or "", DEFAULT_ACTIVITY_RATE)
    return round(base + rng.randint(-10, 10))


def _draw_stops(rng: random.Random, low_cost: bool) -> int:
    if low_cost:
        # Nonstop 70% of the time, otherwise one stop
        return 1 if rng.random() > 0.7 else 0
    return rng.randint(0, 2)


def _draw_duration(rng: random.Random, stops: int) -> int:
    return rng.randint(90, 240) + stops * rng.randint(60, 120)


def select_airlines(rng: random.Random, roster: tuple[Airline, ...] = AIRLINES) -> list[Airline]:
    """Pick between MIN_OFFERS and MAX_OFFERS distinct airlines."""
    count = rng.randint(MIN_OFFERS, min(MAX_OFFERS, len(roster)))
    shuffled = list(roster)
    rng.shuffle(shuffled)
    return shuffled[:count]


def build_offer(rng: random.Random, airline: Airline, params: TripParameters) -> RawOffer:
    low_cost = airline.is_low_cost
    base_fare = rng.randint(25, 120) if low_cost else rng.randint(80, 400)

    stops = _draw_stops(rng, low_cost)
    return_stops = _draw_stops(rng, low_cost)
    duration = _draw_duration(rng, stops)
    return_duration = _draw_duration(rng, return_stops)

    dep_time = pick_departure_time(rng, params.time_preference)
    ret_dep_time = pick_departure_time(rng, params.time_preference)

    nights = params.trip_nights
    rooms = math.ceil(params.travelers / 2)
    hotel_night = estimate_hotel_per_night(rng, params.destination, params.trip_style)
    activity_day = estimate_activities_per_day(rng, params.trip_style)

    flight_price = round(base_fare * params.travelers)
    hotel_estimate = round(hotel_night * nights * rooms)
    activity_estimate = round(activity_day * nights * params.travelers)

    return RawOffer(
        airline=airline.name,
        airline_code=airline.code,
        airline_logo=airline.logo,
        flight_number=f"{airline.code}{rng.randint(100, 9999)}",
        departure_time=dep_time,
        arrival_time=add_duration(dep_time, duration),
        return_departure_time=ret_dep_time,
        return_arrival_time=add_duration(ret_dep_time, return_duration),
        stops=stops,
        return_stops=return_stops,
        duration_minutes=duration,
        return_duration_minutes=return_duration,
        flight_price=flight_price,
        hotel_estimate=hotel_estimate,
        activity_estimate=activity_estimate,
        total_estimate=flight_price + hotel_estimate + activity_estimate,
        currency=params.currency,
        booking_url=BOOKING_URL_TEMPLATE.format(
            origin=params.origin, destination=params.destination
        ),
    )


def generate_offers(params: TripParameters, rng: random.Random | None = None) -> list[RawOffer]:
    """Synthesize one unscored offer per selected airline."""
    rng = rng or random.Random()
    return [build_offer(rng, airline, params) for airline in select_airlines(rng)]
