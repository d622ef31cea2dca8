"""
In-memory application state for PropMatch.

AppState owns the agent profile, client book, property inventory and
follow-ups for one session. Views and the CLI receive it explicitly
and ask it for matches; the matching engine itself never sees it.
"""

from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field

from propmatch.core.matching import (
    ClientMatchResult,
    MatchingEngine,
    MatchResult,
    get_matching_engine,
)
from propmatch.data.models import Agent, Client, EmbeddedModel, FollowUp, Property
from propmatch.utils.constants import ClientStatus
from propmatch.utils.logger import LoggerMixin


class Snapshot(EmbeddedModel):
    """Serialized form of an AppState, used for sample and fixture data."""

    agent: Agent
    clients: list[Client] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    follow_ups: list[FollowUp] = Field(default_factory=list)


class AppState(LoggerMixin):
    """
    Application state shared by the views of one session.

    Records are replaced wholesale on update, keyed by id. Lookups and
    updates for an unknown id return None rather than raising.
    """

    def __init__(
        self,
        agent: Agent,
        clients: Optional[list[Client]] = None,
        properties: Optional[list[Property]] = None,
        follow_ups: Optional[list[FollowUp]] = None,
        engine: Optional[MatchingEngine] = None,
    ):
        self.agent = agent
        self.clients: list[Client] = list(clients or [])
        self.properties: list[Property] = list(properties or [])
        self.follow_ups: list[FollowUp] = list(follow_ups or [])
        self.engine = engine or get_matching_engine()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], engine: Optional[MatchingEngine] = None) -> "AppState":
        """Build state from a snapshot dictionary."""
        snapshot = Snapshot.model_validate(data)
        return cls(
            agent=snapshot.agent,
            clients=snapshot.clients,
            properties=snapshot.properties,
            follow_ups=snapshot.follow_ups,
            engine=engine,
        )

    @classmethod
    def from_json(cls, path: Union[str, Path], engine: Optional[MatchingEngine] = None) -> "AppState":
        """
        Load state from a JSON snapshot file.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the file is not a valid snapshot
        """
        path = Path(path)
        snapshot = Snapshot.model_validate_json(path.read_text(encoding="utf-8"))
        state = cls(
            agent=snapshot.agent,
            clients=snapshot.clients,
            properties=snapshot.properties,
            follow_ups=snapshot.follow_ups,
            engine=engine,
        )
        state.logger.info(
            f"Loaded {len(state.clients)} clients, {len(state.properties)} properties "
            f"and {len(state.follow_ups)} follow-ups from {path}"
        )
        return state

    def to_snapshot(self) -> Snapshot:
        return Snapshot(
            agent=self.agent,
            clients=self.clients,
            properties=self.properties,
            follow_ups=self.follow_ups,
        )

    # -------------------------------------------------------------------------
    # Agent
    # -------------------------------------------------------------------------

    def update_agent(self, agent: Agent) -> Agent:
        """Replace the agent profile."""
        self.agent = agent
        self.logger.debug(f"Agent profile updated: {agent.id}")
        return agent

    # -------------------------------------------------------------------------
    # Clients
    # -------------------------------------------------------------------------

    def get_client(self, client_id: str) -> Optional[Client]:
        return next((c for c in self.clients if c.id == client_id), None)

    def add_client(self, client: Client) -> Client:
        self.clients.append(client)
        self.logger.debug(f"Client added: {client.id}")
        return client

    def update_client(self, client: Client) -> Optional[Client]:
        """Replace the stored client with the same id."""
        for index, existing in enumerate(self.clients):
            if existing.id == client.id:
                client.touch()
                self.clients[index] = client
                return client
        self.logger.warning(f"Client not found for update: {client.id}")
        return None

    def cancel_client(self, client_id: str, reason: str) -> Optional[Client]:
        """Mark a client as cancelled with the given reason."""
        client = self.get_client(client_id)
        if client is None:
            self.logger.warning(f"Client not found for cancel: {client_id}")
            return None
        updated = client.model_copy(
            update={"status": ClientStatus.CANCELLED.value, "cancel_reason": reason}
        )
        return self.update_client(updated)

    @property
    def active_clients(self) -> list[Client]:
        return [c for c in self.clients if c.is_active]

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def get_property(self, property_id: str) -> Optional[Property]:
        return next((p for p in self.properties if p.id == property_id), None)

    def add_property(self, prop: Property) -> Property:
        self.properties.append(prop)
        self.logger.debug(f"Property added: {prop.id}")
        return prop

    def update_property(self, prop: Property) -> Optional[Property]:
        """Replace the stored property with the same id."""
        for index, existing in enumerate(self.properties):
            if existing.id == prop.id:
                prop.touch()
                self.properties[index] = prop
                return prop
        self.logger.warning(f"Property not found for update: {prop.id}")
        return None

    # -------------------------------------------------------------------------
    # Follow-ups
    # -------------------------------------------------------------------------

    def add_follow_up(self, follow_up: FollowUp) -> FollowUp:
        self.follow_ups.append(follow_up)
        return follow_up

    def update_follow_up(self, follow_up: FollowUp) -> Optional[FollowUp]:
        for index, existing in enumerate(self.follow_ups):
            if existing.id == follow_up.id:
                self.follow_ups[index] = follow_up
                return follow_up
        self.logger.warning(f"Follow-up not found for update: {follow_up.id}")
        return None

    def complete_follow_up(self, follow_up_id: str) -> Optional[FollowUp]:
        existing = next((f for f in self.follow_ups if f.id == follow_up_id), None)
        if existing is None:
            return None
        return self.update_follow_up(existing.model_copy(update={"is_completed": True}))

    def follow_ups_for(self, client_id: str) -> list[FollowUp]:
        """Follow-ups for one client, soonest first."""
        return sorted(
            (f for f in self.follow_ups if f.client_id == client_id),
            key=lambda f: f.due_at,
        )

    def todays_follow_ups(self, today: date) -> list[FollowUp]:
        """Open follow-ups due on the given day."""
        return [f for f in self.follow_ups if not f.is_completed and f.is_due_on(today)]

    def dashboard_stats(self, today: date) -> dict[str, int]:
        """Headline counts for the dashboard."""
        return {
            "active_clients": len(self.active_clients),
            "properties_listed": len(self.properties),
            "todays_follow_ups": len(self.todays_follow_ups(today)),
        }

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def matches_for_client(self, client_id: str) -> Optional[list[MatchResult]]:
        """Ranked properties for a client, or None if the client is unknown."""
        client = self.get_client(client_id)
        if client is None:
            return None
        return self.engine.find_matching_properties(client, self.properties)

    def matches_for_property(self, property_id: str) -> Optional[list[ClientMatchResult]]:
        """Ranked clients for a property, or None if the property is unknown."""
        prop = self.get_property(property_id)
        if prop is None:
            return None
        return self.engine.find_matching_clients(prop, self.clients)
