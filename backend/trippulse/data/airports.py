"""Static airport directory used for intake autocomplete.

Order matters: search results are returned in table order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    iata: str
    name: str
    city: str
    country: str


AIRPORTS: tuple[Airport, ...] = (
    Airport("FCO", "Leonardo da Vinci–Fiumicino", "Rome", "Italy"),
    Airport("MXP", "Milan Malpensa", "Milan", "Italy"),
    Airport("LIN", "Milan Linate", "Milan", "Italy"),
    Airport("NAP", "Naples International", "Naples", "Italy"),
    Airport("VCE", "Venice Marco Polo", "Venice", "Italy"),
    Airport("BLQ", "Bologna Guglielmo Marconi", "Bologna", "Italy"),
    Airport("CTA", "Catania-Fontanarossa", "Catania", "Italy"),
    Airport("PMO", "Palermo Falcone-Borsellino", "Palermo", "Italy"),
    Airport("FLR", "Florence Peretola", "Florence", "Italy"),
    Airport("TRN", "Turin Caselle", "Turin", "Italy"),
    Airport("LHR", "London Heathrow", "London", "UK"),
    Airport("LGW", "London Gatwick", "London", "UK"),
    Airport("STN", "London Stansted", "London", "UK"),
    Airport("CDG", "Paris Charles de Gaulle", "Paris", "France"),
    Airport("ORY", "Paris Orly", "Paris", "France"),
    Airport("BCN", "Barcelona El Prat", "Barcelona", "Spain"),
    Airport("MAD", "Madrid Barajas", "Madrid", "Spain"),
    Airport("AMS", "Amsterdam Schiphol", "Amsterdam", "Netherlands"),
    Airport("FRA", "Frankfurt am Main", "Frankfurt", "Germany"),
    Airport("MUC", "Munich", "Munich", "Germany"),
    Airport("BER", "Berlin Brandenburg", "Berlin", "Germany"),
    Airport("ZRH", "Zurich", "Zurich", "Switzerland"),
    Airport("VIE", "Vienna International", "Vienna", "Austria"),
    Airport("IST", "Istanbul", "Istanbul", "Turkey"),
    Airport("ATH", "Athens International", "Athens", "Greece"),
    Airport("LIS", "Lisbon Humberto Delgado", "Lisbon", "Portugal"),
    Airport("DUB", "Dublin", "Dublin", "Ireland"),
    Airport("CPH", "Copenhagen", "Copenhagen", "Denmark"),
    Airport("ARN", "Stockholm Arlanda", "Stockholm", "Sweden"),
    Airport("OSL", "Oslo Gardermoen", "Oslo", "Norway"),
    Airport("HEL", "Helsinki-Vantaa", "Helsinki", "Finland"),
    Airport("WAW", "Warsaw Chopin", "Warsaw", "Poland"),
    Airport("PRG", "Vaclav Havel Prague", "Prague", "Czech Republic"),
    Airport("BUD", "Budapest Ferenc Liszt", "Budapest", "Hungary"),
    Airport("OTP", "Bucharest Henri Coanda", "Bucharest", "Romania"),
    Airport("JFK", "John F. Kennedy", "New York", "USA"),
    Airport("LAX", "Los Angeles International", "Los Angeles", "USA"),
    Airport("ORD", "Chicago O'Hare", "Chicago", "USA"),
    Airport("MIA", "Miami International", "Miami", "USA"),
    Airport("SFO", "San Francisco International", "San Francisco", "USA"),
    Airport("DXB", "Dubai International", "Dubai", "UAE"),
    Airport("SIN", "Singapore Changi", "Singapore", "Singapore"),
    Airport("HND", "Tokyo Haneda", "Tokyo", "Japan"),
    Airport("NRT", "Tokyo Narita", "Tokyo", "Japan"),
    Airport("BKK", "Suvarnabhumi", "Bangkok", "Thailand"),
    Airport("HKG", "Hong Kong International", "Hong Kong", "China"),
    Airport("ICN", "Incheon International", "Seoul", "South Korea"),
    Airport("SYD", "Sydney Kingsford Smith", "Sydney", "Australia"),
    Airport("GRU", "São Paulo Guarulhos", "São Paulo", "Brazil"),
    Airport("MEX", "Mexico City International", "Mexico City", "Mexico"),
    Airport("CUN", "Cancún International", "Cancún", "Mexico"),
    Airport("CAI", "Cairo International", "Cairo", "Egypt"),
    Airport("JNB", "O.R. Tambo", "Johannesburg", "South Africa"),
    Airport("DEL", "Indira Gandhi International", "New Delhi", "India"),
    Airport("BOM", "Chhatrapati Shivaji Maharaj", "Mumbai", "India"),
    Airport("PEK", "Beijing Capital", "Beijing", "China"),
    Airport("PVG", "Shanghai Pudong", "Shanghai", "China"),
    Airport("DOH", "Hamad International", "Doha", "Qatar"),
    Airport("AUH", "Abu Dhabi International", "Abu Dhabi", "UAE"),
    Airport("CMB", "Bandaranaike International", "Colombo", "Sri Lanka"),
    Airport("MLE", "Velana International", "Malé", "Maldives"),
    Airport("PMI", "Palma de Mallorca", "Palma de Mallorca", "Spain"),
    Airport("IBZ", "Ibiza", "Ibiza", "Spain"),
    Airport("TFS", "Tenerife South", "Tenerife", "Spain"),
    Airport("SKG", "Thessaloniki Macedonia", "Thessaloniki", "Greece"),
    Airport("HER", "Heraklion Nikos Kazantzakis", "Heraklion", "Greece"),
    Airport("SPU", "Split", "Split", "Croatia"),
    Airport("DBV", "Dubrovnik", "Dubrovnik", "Croatia"),
    Airport("TLV", "Ben Gurion", "Tel Aviv", "Israel"),
    Airport("CMN", "Mohammed V", "Casablanca", "Morocco"),
    Airport("RAK", "Marrakech Menara", "Marrakech", "Morocco"),
    Airport("AGP", "Malaga-Costa del Sol", "Malaga", "Spain"),
    Airport("NCE", "Nice Côte d'Azur", "Nice", "France"),
    Airport("BRU", "Brussels", "Brussels", "Belgium"),
    Airport("EDI", "Edinburgh", "Edinburgh", "UK"),
    Airport("MAN", "Manchester", "Manchester", "UK"),
)
