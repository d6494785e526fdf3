"""Airline roster for synthetic offers, with cost tier classification.

Tiers: "legacy" (full-service) and "low_cost". The tier biases fare range
and stop-count distribution in the offer synthesizer.
"""

from dataclasses import dataclass

LOGO_URL_TEMPLATE = "https://logos.skyscnr.com/images/airlines/favicon/{code}.png"


@dataclass(frozen=True)
class Airline:
    name: str
    code: str

    @property
    def logo(self) -> str:
        return LOGO_URL_TEMPLATE.format(code=self.code)

    @property
    def is_low_cost(self) -> bool:
        return self.code in LOW_COST_CODES


AIRLINES: tuple[Airline, ...] = (
    Airline("Ryanair", "FR"),
    Airline("EasyJet", "U2"),
    Airline("Lufthansa", "LH"),
    Airline("Alitalia/ITA", "AZ"),
    Airline("British Airways", "BA"),
    Airline("Air France", "AF"),
    Airline("KLM", "KL"),
    Airline("Vueling", "VY"),
    Airline("Wizz Air", "W6"),
    Airline("Turkish Airlines", "TK"),
    Airline("Emirates", "EK"),
    Airline("Swiss", "LX"),
)

AIRLINE_TIERS: dict[str, str] = {
    "FR": "low_cost",  # Ryanair
    "U2": "low_cost",  # easyJet
    "VY": "low_cost",  # Vueling
    "W6": "low_cost",  # Wizz Air
    "LH": "legacy",    # Lufthansa
    "AZ": "legacy",    # ITA Airways
    "BA": "legacy",    # British Airways
    "AF": "legacy",    # Air France
    "KL": "legacy",    # KLM
    "TK": "legacy",    # Turkish Airlines
    "EK": "legacy",    # Emirates
    "LX": "legacy",    # Swiss
}

LOW_COST_CODES: frozenset[str] = frozenset(
    code for code, tier in AIRLINE_TIERS.items() if tier == "low_cost"
)
