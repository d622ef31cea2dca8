"""
Shared test fixtures for the PropMatch test suite.

Sets environment variables before any propmatch imports so settings and
console logging stay quiet, then provides factory fixtures for
requirements, clients, properties and application state.
"""

import os

# === Set environment BEFORE any propmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from propmatch.core.matching.matching_engine import MatchingEngine
from propmatch.data.models import (
    Agent,
    Client,
    ClientRequirement,
    FollowUp,
    LocationPreference,
    Property,
)
from propmatch.data.state import AppState
from propmatch.utils.config import RESOURCES_DIR
from propmatch.utils.constants import (
    ClientStatus,
    Furnishing,
    Intent,
    PropertyCategory,
    PropertyType,
)


SAMPLE_DATA_FILE = RESOURCES_DIR / "sample_data.json"


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_requirement():
    """Factory for ClientRequirement; defaults describe a 3 BHK buyer in New Town."""

    def _factory(
        property_type: PropertyType = PropertyType.RESIDENTIAL,
        intent: Intent = Intent.BUY,
        configurations: Optional[list[str]] = None,
        min_budget: float = 8_000_000,
        max_budget: float = 12_000_000,
        min_size: float = 1400,
        max_size: float = 2000,
        locations: Optional[list[Any]] = None,
    ) -> ClientRequirement:
        if configurations is None:
            configurations = ["3 BHK"]
        if locations is None:
            locations = [
                LocationPreference(main_location="New Town", sub_locations=["Action Area 1"]),
            ]
        return ClientRequirement(
            property_type=property_type,
            intent=intent,
            configurations=configurations,
            min_budget=min_budget,
            max_budget=max_budget,
            min_size=min_size,
            max_size=max_size,
            locations=locations,
        )

    return _factory


@pytest.fixture
def make_property():
    """Factory for Property; defaults score 100 against the default requirement."""

    def _factory(
        id: Optional[str] = None,
        property_type: PropertyType = PropertyType.RESIDENTIAL,
        price: float = 11_000_000,
        size_sqft: float = 1800,
        bhk: str = "3 BHK",
        main_location: str = "New Town",
        sub_location: str = "Action Area 1",
        project_name: str = "DLF The Banyan Tree",
        category: PropertyCategory = PropertyCategory.NEW_PROJECT,
        **kwargs,
    ) -> Property:
        fields = dict(
            agent_id="agent1",
            category=category,
            property_type=property_type,
            project_name=project_name,
            main_location=main_location,
            sub_location=sub_location,
            bhk=bhk,
            size_sqft=size_sqft,
            price=price,
            furnishing=Furnishing.SEMI_FURNISHED,
            **kwargs,
        )
        if id is not None:
            fields["id"] = id
        return Property(**fields)

    return _factory


@pytest.fixture
def make_client(make_requirement):
    """Factory for Client wrapping a requirement."""

    def _factory(
        id: Optional[str] = None,
        name: str = "Amit Kumar",
        phone: str = "+919988776655",
        status: ClientStatus = ClientStatus.HOT,
        requirement: Optional[ClientRequirement] = None,
        **kwargs,
    ) -> Client:
        fields = dict(
            agent_id="agent1",
            name=name,
            phone=phone,
            status=status,
            requirement=requirement or make_requirement(),
            **kwargs,
        )
        if id is not None:
            fields["id"] = id
        return Client(**fields)

    return _factory


# ---------------------------------------------------------------------------
# Sample fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_agent():
    return Agent(
        id="agent1",
        name="Raj Sharma",
        phone="+919876543210",
        email="raj.sharma@superagent.com",
    )


@pytest.fixture
def sample_follow_ups():
    return [
        FollowUp(
            id="fu1",
            client_id="client1",
            due_at=datetime(2026, 10, 19, 11, 0, tzinfo=timezone.utc),
            note="Call to confirm site visit on Saturday.",
        ),
        FollowUp(
            id="fu2",
            client_id="client1",
            due_at=datetime(2026, 10, 16, 11, 0, tzinfo=timezone.utc),
            note="Initial call made, client is interested.",
            is_completed=True,
        ),
        FollowUp(
            id="fu3",
            client_id="client2",
            due_at=datetime(2026, 10, 20, 11, 0, tzinfo=timezone.utc),
            note="Send more rental options.",
        ),
    ]


@pytest.fixture
def matching_engine():
    """MatchingEngine with the default acceptance threshold."""
    return MatchingEngine()


@pytest.fixture
def sample_state(sample_agent, sample_follow_ups, make_client, make_property, matching_engine):
    """AppState with one buyer, one cancelled renter and two properties."""
    renter = make_client(
        id="client2",
        name="Priya Singh",
        phone="+919123456789",
        status=ClientStatus.CANCELLED,
    )
    return AppState(
        agent=sample_agent,
        clients=[make_client(id="client1"), renter],
        properties=[
            make_property(id="prop1"),
            make_property(id="prop2", property_type=PropertyType.COMMERCIAL, bhk="Office"),
        ],
        follow_ups=sample_follow_ups,
        engine=matching_engine,
    )


@pytest.fixture
def sample_data_file():
    return SAMPLE_DATA_FILE
