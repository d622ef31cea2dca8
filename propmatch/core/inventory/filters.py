"""
Search filters over the client book and property inventory.

A field left as ``None`` means "All" and does not restrict results.
Filtering never reorders or mutates its input.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from propmatch.data.models import Client, Property
from propmatch.utils.constants import ClientStatus, PropertyCategory, PropertyType


@dataclass
class PropertyFilter:
    """Criteria from the inventory screen."""

    search: str = ""
    category: Optional[PropertyCategory] = None
    property_type: Optional[PropertyType] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    bhk: Optional[str] = None
    main_location: Optional[str] = None
    sub_location: Optional[str] = None

    def matches(self, prop: Property) -> bool:
        term = self.search.strip().lower()
        if term and not any(
            term in text.lower()
            for text in (prop.project_name, prop.main_location, prop.sub_location)
        ):
            return False
        if self.category is not None and prop.category != self.category:
            return False
        if self.property_type is not None and prop.property_type != self.property_type:
            return False
        if self.min_price is not None and prop.price < self.min_price:
            return False
        if self.max_price is not None and prop.price > self.max_price:
            return False
        if self.bhk is not None and prop.bhk != self.bhk:
            return False
        if self.main_location is not None and prop.main_location != self.main_location:
            return False
        if self.sub_location is not None and prop.sub_location != self.sub_location:
            return False
        return True


@dataclass
class ClientFilter:
    """Criteria from the clients screen."""

    search: str = ""
    status: Optional[ClientStatus] = None
    source: Optional[str] = None
    created_on: Optional[date] = None

    def matches(self, client: Client) -> bool:
        term = self.search.strip()
        if term and term.lower() not in client.name.lower() and term not in client.phone:
            return False
        if self.status is not None and client.status != self.status:
            return False
        if self.source:
            if not client.source or self.source.lower() not in client.source.lower():
                return False
        if self.created_on is not None and client.created_at.date() != self.created_on:
            return False
        return True


def filter_properties(properties: Iterable[Property], criteria: PropertyFilter) -> list[Property]:
    """Return the properties that satisfy every criterion, in input order."""
    return [p for p in properties if criteria.matches(p)]


def filter_clients(clients: Iterable[Client], criteria: ClientFilter) -> list[Client]:
    """Return the clients that satisfy every criterion, in input order."""
    return [c for c in clients if criteria.matches(c)]


def configuration_options(
    properties: Iterable[Property],
    property_type: Optional[PropertyType] = None,
) -> list[str]:
    """Distinct configuration labels present in the inventory, sorted."""
    return sorted({
        p.bhk for p in properties
        if property_type is None or p.property_type == property_type
    })
