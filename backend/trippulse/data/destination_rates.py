"""Static rate tables for hotel and activity cost estimates."""

# Nightly hotel base rate by destination IATA code
HOTEL_BASE_RATES: dict[str, float] = {
    "LHR": 120, "CDG": 110, "BCN": 85, "MAD": 75, "AMS": 100, "FRA": 95,
    "MUC": 90, "ZRH": 150, "VIE": 80, "IST": 55, "ATH": 65, "LIS": 70,
    "DXB": 130, "SIN": 110, "HND": 120, "BKK": 40, "MLE": 180, "JFK": 160,
    "LAX": 140, "MIA": 120, "SFO": 150, "SYD": 130,
}
DEFAULT_HOTEL_RATE: float = 80

# Applied to the nightly base rate; styles not listed use 1.0
STYLE_HOTEL_MULTIPLIERS: dict[str, float] = {
    "sea": 1.1,
    "nature": 0.85,
    "city": 1.05,
    "mixed": 1.0,
}

# Daily activity spend per traveler by trip style
ACTIVITY_BASE_RATES: dict[str, float] = {
    "sea": 25,
    "city": 40,
    "nature": 45,
}
DEFAULT_ACTIVITY_RATE: float = 30
