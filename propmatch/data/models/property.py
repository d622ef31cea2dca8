"""
Property data models for PropMatch.

A Property is one listing in the agent's inventory.
"""

from typing import Optional

from pydantic import Field

from propmatch.utils.constants import Furnishing, PropertyCategory, PropertyType

from .base import EmbeddedModel, TimestampMixin, new_id


class Property(EmbeddedModel, TimestampMixin):
    """A property listed in the agent's inventory."""

    id: str = Field(default_factory=new_id)
    agent_id: str
    category: PropertyCategory = PropertyCategory.RESALE
    property_type: PropertyType
    project_name: str
    city: str = "Kolkata"
    main_location: str
    sub_location: str
    address_text: Optional[str] = None
    bhk: str  # configuration label, e.g. "2 BHK" or "Office"
    size_sqft: float = Field(ge=0)
    floor: str = ""
    furnishing: Furnishing = Furnishing.UNFURNISHED
    parking_count: int = Field(default=0, ge=0)
    price: float = Field(ge=0)  # total price for sale, monthly rent for rentals
    brokerage_percent: float = Field(default=0, ge=0)
    google_map_link: Optional[str] = None
    media_uri: str = ""
