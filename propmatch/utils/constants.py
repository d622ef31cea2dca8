"""
Application-wide constants for PropMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "PropMatch"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Enums
# =============================================================================


class PropertyType(str, Enum):
    """Broad class of a property or requirement."""

    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"


class Intent(str, Enum):
    """What the client wants to do with the property."""

    BUY = "Buy"
    RENT = "Rent"


class ClientStatus(str, Enum):
    """Status of a client in the agent's pipeline."""

    NEW = "New"
    COLD = "Cold"
    WARM = "Warm"
    HOT = "Hot"
    CANCELLED = "Cancelled"


class PropertyCategory(str, Enum):
    """Listing category shown as tabs in the inventory."""

    RESALE = "Resale"
    NEW_PROJECT = "New Project"


class Furnishing(str, Enum):
    """Furnishing level of a property."""

    UNFURNISHED = "Unfurnished"
    SEMI_FURNISHED = "Semi-Furnished"
    FULLY_FURNISHED = "Fully-Furnished"


# =============================================================================
# Matching Constants
# =============================================================================

# Minimum score for a pair to be reported as a match
MATCH_THRESHOLD: Final[int] = 60

# Listings priced above this are treated as sale listings, at or below as rentals
RENT_PRICE_CEILING: Final[float] = 100_000

# Points awarded per criterion (sum is 100)
MATCH_POINTS: Final[dict[str, int]] = {
    "base": 40,
    "budget": 25,
    "location_exact": 20,
    "location_main": 15,
    "configuration": 10,
    "size": 5,
}

# Upper-bound tolerance multipliers
BUDGET_TOLERANCE: Final[dict[Intent, float]] = {
    Intent.RENT: 1.15,
    Intent.BUY: 1.10,
}
SIZE_TOLERANCE: Final[float] = 1.15


class MatchReason(str, Enum):
    """Reason tags emitted by the matching engine, in evaluation order."""

    TYPE_AND_INTENT = "Type & Intent"
    BUDGET = "Budget"
    LOCATION = "Location"
    CONFIGURATION = "Configuration"
    SIZE = "Size"


# =============================================================================
# Domain Catalogs
# =============================================================================

KOLKATA_LOCATIONS: Final[dict[str, list[str]]] = {
    "Rajarhat": [
        "Chinar Park", "Salua", "Dasdrone", "Reckjuani", "Rajarhat Chowmatha",
        "Rajarhat Main Road", "Bishnupur", "Patharghata", "Other",
    ],
    "New Town": [
        "Action Area 1", "Action Area 2", "Action Area 3", "Narkelbagan",
        "Ghuni", "Mahisbathan", "Jatragachi", "Other",
    ],
    "Salt Lake": [
        "Salt Lake Sector-1", "Salt Lake Sector-2", "Salt Lake Sector-3",
        "Salt Lake Sector-V", "Karunamoyee", "Other",
    ],
    "EM Bypass": [
        "Ruby Crossing", "VIP Nagar", "Kalikapur", "Science City Area",
        "Avishikta", "Ajoy Nagar", "Mukundapur", "Other",
    ],
    "Alipore": [
        "New Alipore", "Alipore Road", "Belvedere Road", "Judges Court Road",
        "Chetla", "Burdwan Road", "Other",
    ],
    "Ballygunge": [
        "Ballygunge Phari", "Ballygunge Place", "Gariahat", "Dover Lane",
        "Sunny Park", "Ekdalia", "Mandeville Gardens", "Other",
    ],
    "Tollygunge": [
        "Tollygunge Metro Area", "Siriti More", "Karunamoyee", "Naktala",
        "Bansdroni", "Ranikuthi", "Kudghat", "Other",
    ],
    "Garia": [
        "Garia Station", "Boral", "Mahamayatala", "Kavi Nazrul Metro",
        "Patuli Township", "Narendrapur", "Kamalgazi", "Other",
    ],
    "Jadavpur": [
        "Jadavpur 8B", "Sulekha More", "Santoshpur", "Baghajatin",
        "Jadavpur University Area", "Poddar Nagar", "Other",
    ],
    "Behala": [
        "Behala Chowrasta", "Sakher Bazar", "Parnasree Pally", "Taratala",
        "Behala Tram Depot", "Barisha", "Silpara", "Other",
    ],
    "Dum Dum": [
        "Dum Dum Cantonment", "Nagerbazar", "Motijheel", "Gorabazar",
        "Dum Dum Park", "Jessore Road", "Other",
    ],
    "Baguiati": [
        "Kestopur", "Teghoria", "Joramandir", "Baguiati VIP Road Crossing",
        "Aswini Nagar", "Other",
    ],
    "Joka": [
        "IIM Joka Area", "Joka Metro", "Thakurpukur", "Diamond Park",
        "Pailan", "Other",
    ],
    "Howrah": [
        "Shibpur", "Kadamtala", "Bally", "Salkia", "Howrah Maidan", "Belur",
        "Liluah", "Other",
    ],
    "Uttarpara": [
        "Hindmotor", "Makhla", "Bhadrakali", "Uttarpara Station Road", "Other",
    ],
}

CONFIGURATION_OPTIONS: Final[tuple[str, ...]] = (
    "1 BHK",
    "2 BHK",
    "3 BHK",
    "4 BHK",
    "4+ BHK",
    "Office",
    "Shop",
)

CANCEL_REASONS: Final[tuple[str, ...]] = (
    "Budget Mismatch",
    "Location Mismatch",
    "No Response",
    "Chose Other Property",
    "Not Interested Anymore",
    "Other",
)
