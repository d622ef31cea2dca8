"""
Client data models for PropMatch.

Defines the schema for clients in the agent's book and the housing
requirement each of them carries.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from propmatch.utils.constants import ClientStatus, Intent, PropertyType

from .base import EmbeddedModel, TimestampMixin, new_id


class LocationPreference(EmbeddedModel):
    """A preferred main location and the sub-locations acceptable within it."""

    id: str = Field(default_factory=new_id)
    main_location: str
    sub_locations: list[str] = Field(default_factory=list)


class ClientRequirement(EmbeddedModel):
    """What a client is looking for."""

    id: str = Field(default_factory=new_id)
    property_type: PropertyType
    intent: Intent
    configurations: list[str] = Field(default_factory=list)  # e.g. "3 BHK", "Office"
    min_budget: float = Field(default=0, ge=0)
    max_budget: float = Field(default=0, ge=0)
    min_size: float = Field(default=0, ge=0)  # sq. ft.
    max_size: float = Field(default=0, ge=0)
    locations: list[LocationPreference] = Field(default_factory=list)


class Client(EmbeddedModel, TimestampMixin):
    """A client in the agent's book."""

    id: str = Field(default_factory=new_id)
    agent_id: str
    name: str
    phone: str
    email: Optional[EmailStr] = None
    source: Optional[str] = None  # e.g. "Reference", "Walk-in"
    status: ClientStatus = ClientStatus.NEW
    cancel_reason: Optional[str] = None
    notes: Optional[str] = None
    requirement: ClientRequirement

    @field_validator("name", "phone")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        """Strip surrounding whitespace from required text fields."""
        return v.strip()

    @property
    def is_active(self) -> bool:
        """Cancelled clients are kept on file but no longer worked."""
        return self.status != ClientStatus.CANCELLED
