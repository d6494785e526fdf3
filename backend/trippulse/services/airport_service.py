"""Airport service — autocomplete search over the static airport directory."""

from trippulse.data.airports import AIRPORTS, Airport

MIN_QUERY_LENGTH = 2


class AirportService:
    """Searches airports by IATA code, city, airport name, or country."""

    def __init__(self, airports: tuple[Airport, ...] = AIRPORTS):
        self._airports = airports

    def search_airports(self, query: str, limit: int = 10) -> list[dict]:
        """Case-insensitive substring search, in table order, at most `limit` hits."""
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []

        q = query.lower()
        matches = []
        for a in self._airports:
            if (
                q in a.iata.lower()
                or q in a.city.lower()
                or q in a.name.lower()
                or q in a.country.lower()
            ):
                matches.append(
                    {"iata": a.iata, "name": a.name, "city": a.city, "country": a.country}
                )
                if len(matches) >= limit:
                    break
        return matches


airport_service = AirportService()
