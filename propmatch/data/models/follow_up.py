"""
Follow-up and agent profile models for PropMatch.
"""

from datetime import date, datetime

from pydantic import EmailStr, Field

from .base import EmbeddedModel, new_id


class FollowUp(EmbeddedModel):
    """A scheduled reminder to get back to a client."""

    id: str = Field(default_factory=new_id)
    client_id: str
    due_at: datetime
    note: str
    is_completed: bool = False

    def is_due_on(self, day: date) -> bool:
        """Check whether this follow-up falls on the given calendar day."""
        return self.due_at.date() == day


class Agent(EmbeddedModel):
    """The agent who owns the client book and inventory."""

    id: str = Field(default_factory=new_id)
    name: str
    phone: str
    email: EmailStr
