"""Client-property matching engine module."""

from .matching_engine import (
    ClientMatchResult,
    MatchingEngine,
    MatchResult,
    MatchScore,
    find_matching_clients,
    find_matching_properties,
    get_matching_engine,
    is_rental_listing,
    score,
)

__all__ = [
    "ClientMatchResult",
    "MatchingEngine",
    "MatchResult",
    "MatchScore",
    "find_matching_clients",
    "find_matching_properties",
    "get_matching_engine",
    "is_rental_listing",
    "score",
]
