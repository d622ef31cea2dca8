"""
Client-property matching engine.

Scores a client's requirement against a property listing and ranks
matches in both directions: properties for a client, and clients for
a property. Scoring combines hard filters (property type, rent/sale
price band) with additive criteria for budget, location,
configuration and size.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from propmatch.data.models import Client, ClientRequirement, Property
from propmatch.utils.constants import (
    BUDGET_TOLERANCE,
    MATCH_POINTS,
    MATCH_THRESHOLD,
    RENT_PRICE_CEILING,
    SIZE_TOLERANCE,
    Intent,
    MatchReason,
)
from propmatch.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchScore:
    """Score of one requirement/listing pair and the criteria that contributed."""

    score: int = 0
    reasons: tuple[str, ...] = ()

    @property
    def disqualified(self) -> bool:
        """True when a hard filter rejected the pair."""
        return self.score == 0


@dataclass
class MatchResult:
    """A property matched for a client."""

    property: Property
    score: int
    reasons: list[str] = field(default_factory=list)


@dataclass
class ClientMatchResult:
    """A client matched for a property."""

    client: Client
    score: int
    reasons: list[str] = field(default_factory=list)


def is_rental_listing(listing: Property) -> bool:
    """
    Infer whether a listing is a rental from its price alone.

    Listings at or below ``RENT_PRICE_CEILING`` are treated as monthly
    rents, anything above as a sale price.
    """
    return listing.price <= RENT_PRICE_CEILING


class MatchingEngine:
    """
    Engine for scoring client requirements against property listings.

    The engine holds no state besides its acceptance threshold; every
    method is a pure function of its arguments. Both directional
    entry points go through ``score`` so a pair scores the same no
    matter which side initiated the query.
    """

    def __init__(self, min_score: int = MATCH_THRESHOLD):
        """
        Initialize the matching engine.

        Args:
            min_score: Minimum score for a pair to be reported
        """
        self.min_score = min_score

    def score(self, requirement: ClientRequirement, listing: Property) -> MatchScore:
        """
        Score a listing against a client requirement.

        Args:
            requirement: The client's requirement
            listing: The property to evaluate

        Returns:
            MatchScore with the total and reason tags in evaluation order
        """
        if requirement.property_type != listing.property_type:
            return MatchScore()

        is_rent = requirement.intent == Intent.RENT
        if is_rent != is_rental_listing(listing):
            return MatchScore()

        total = MATCH_POINTS["base"]
        reasons = [MatchReason.TYPE_AND_INTENT.value]

        if self._budget_fits(requirement, listing):
            total += MATCH_POINTS["budget"]
            reasons.append(MatchReason.BUDGET.value)

        location_score = self._location_score(requirement, listing)
        if location_score > 0:
            total += location_score
            reasons.append(MatchReason.LOCATION.value)

        if listing.bhk in requirement.configurations:
            total += MATCH_POINTS["configuration"]
            reasons.append(MatchReason.CONFIGURATION.value)

        if self._size_fits(requirement, listing):
            total += MATCH_POINTS["size"]
            reasons.append(MatchReason.SIZE.value)

        return MatchScore(score=total, reasons=tuple(reasons))

    def _budget_fits(self, requirement: ClientRequirement, listing: Property) -> bool:
        """Price within budget, allowing the intent's tolerance over the maximum."""
        tolerance = BUDGET_TOLERANCE[Intent(requirement.intent)]
        return requirement.min_budget <= listing.price <= requirement.max_budget * tolerance

    def _size_fits(self, requirement: ClientRequirement, listing: Property) -> bool:
        return requirement.min_size <= listing.size_sqft <= requirement.max_size * SIZE_TOLERANCE

    def _location_score(self, requirement: ClientRequirement, listing: Property) -> int:
        """Best location sub-score over the client's preferences."""
        best = 0
        for preference in requirement.locations:
            if preference.main_location != listing.main_location:
                continue
            if listing.sub_location in preference.sub_locations:
                # Nothing scores higher than an exact sub-location match
                return MATCH_POINTS["location_exact"]
            best = max(best, MATCH_POINTS["location_main"])
        return best

    def find_matching_properties(
        self,
        client: Client,
        listings: Sequence[Property],
    ) -> list[MatchResult]:
        """
        Find and rank properties for a client.

        Args:
            client: The client whose requirement drives the search
            listings: Candidate properties

        Returns:
            Matches at or above ``min_score``, highest first; equal scores
            keep their input order
        """
        matches = []
        for listing in listings:
            result = self.score(client.requirement, listing)
            if result.score >= self.min_score:
                matches.append(
                    MatchResult(property=listing, score=result.score, reasons=list(result.reasons))
                )

        logger.debug(
            f"Client {client.id}: {len(matches)} of {len(listings)} properties matched"
        )
        return self.rank(matches)

    def find_matching_clients(
        self,
        listing: Property,
        clients: Sequence[Client],
    ) -> list[ClientMatchResult]:
        """
        Find and rank clients for a property.

        Args:
            listing: The property to place
            clients: Candidate clients

        Returns:
            Matches at or above ``min_score``, highest first; equal scores
            keep their input order
        """
        matches = []
        for client in clients:
            result = self.score(client.requirement, listing)
            if result.score >= self.min_score:
                matches.append(
                    ClientMatchResult(client=client, score=result.score, reasons=list(result.reasons))
                )

        logger.debug(
            f"Property {listing.id}: {len(matches)} of {len(clients)} clients matched"
        )
        return self.rank(matches)

    @staticmethod
    def rank(matches: list) -> list:
        """
        Rank matches by score.

        ``sorted`` is stable, so ties stay in input order.
        """
        return sorted(matches, key=lambda m: m.score, reverse=True)


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None
_default_engine = MatchingEngine()


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton configured from settings."""
    global _matching_engine
    if _matching_engine is None:
        from propmatch.utils.config import get_settings

        _matching_engine = MatchingEngine(min_score=get_settings().matching.min_score)
    return _matching_engine


def score(requirement: ClientRequirement, listing: Property) -> MatchScore:
    """Score a listing against a requirement with the default engine."""
    return _default_engine.score(requirement, listing)


def find_matching_properties(client: Client, listings: Sequence[Property]) -> list[MatchResult]:
    """Properties matching a client, using the default threshold."""
    return _default_engine.find_matching_properties(client, listings)


def find_matching_clients(listing: Property, clients: Sequence[Client]) -> list[ClientMatchResult]:
    """Clients matching a property, using the default threshold."""
    return _default_engine.find_matching_clients(listing, clients)
