from trippulse.models.user import User
from trippulse.models.trip import TripRequest
from trippulse.models.offer import Offer, PriceSnapshot
from trippulse.models.saved_trip import SavedTrip
from trippulse.models.api_log import ApiLog

__all__ = [
    "ApiLog",
    "Offer",
    "PriceSnapshot",
    "SavedTrip",
    "TripRequest",
    "User",
]
