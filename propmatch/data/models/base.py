"""
Base model classes for PropMatch data models.

Provides common fields and functionality shared across all models.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Timezone-aware current time used for record timestamps."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate an opaque record identifier."""
    return uuid4().hex


class EmbeddedModel(BaseModel):
    """
    Base model for all PropMatch records.

    Enum fields are stored as their plain string values so records
    round-trip through JSON snapshots unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )


class TimestampMixin(BaseModel):
    """Mixin providing timestamp fields for models."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        """Refresh ``updated_at``."""
        self.updated_at = utc_now()
