"""
Pydantic data models for PropMatch.

This module provides the records the matching engine and the
surrounding application read: clients with their requirements,
the property inventory, follow-ups and the agent profile.
"""

# Base models
from .base import EmbeddedModel, TimestampMixin, new_id, utc_now

# Client models
from .client import Client, ClientRequirement, LocationPreference

# Property models
from .property import Property

# Follow-up / agent models
from .follow_up import Agent, FollowUp

__all__ = [
    # Base
    "EmbeddedModel",
    "TimestampMixin",
    "new_id",
    "utc_now",
    # Client
    "Client",
    "ClientRequirement",
    "LocationPreference",
    # Property
    "Property",
    # Follow-up / agent
    "Agent",
    "FollowUp",
]
