"""
Display formatting helpers for PropMatch.

Currency and dates are rendered the way Indian agents expect them
(en-IN conventions), and listings can be turned into a share message
for messaging apps.
"""

from datetime import datetime

from propmatch.data.models import Agent, Property


def _group_indian(digits: str) -> str:
    """Group an integer digit string as lakhs/crores: 1,10,00,000."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def _plain_number(value: float) -> str:
    """Render 1800.0 as "1800" and 1.5 as "1.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_currency(amount: float) -> str:
    """
    Format an amount in rupees with Indian digit grouping.

    Args:
        amount: Amount in INR

    Returns:
        String like "₹1,10,00,000" (rounded to whole rupees)
    """
    rounded = int(round(abs(amount)))
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}₹{_group_indian(str(rounded))}"


def format_date(value: datetime) -> str:
    """Format as "19 Oct 2026"."""
    return f"{value.day} {value:%b %Y}"


def format_datetime(value: datetime) -> str:
    """Format as "19 Oct 2026, 03:05 PM"."""
    return f"{format_date(value)}, {value:%I:%M %p}"


def generate_share_message(property: Property, agent: Agent) -> str:
    """
    Build the text an agent sends to share a listing.

    Args:
        property: The listing to share
        agent: The agent whose phone number is included

    Returns:
        Multi-line share message
    """
    lines = [
        f"📢 Stock for Sale – {property.property_type}",
        "",
        f"📍 Project Name: {property.project_name}, {property.sub_location}, {property.main_location}",
        f"🛏 BHK: {property.bhk}",
        f"📏 Size: {_plain_number(property.size_sqft)} sq. ft.",
        f"🏢 Floor: {property.floor}",
        f"🛋 Furnishing: {property.furnishing}",
        f"🚗 Car Parking: {property.parking_count}",
        f"💰 Price: {format_currency(property.price)}",
        f"💼 Brokerage: {_plain_number(property.brokerage_percent)}%",
        "",
        f"📲 Call Us {agent.phone}",
        "",
        f"Google Location - {property.google_map_link or 'Not available'}",
    ]
    return "\n".join(lines)
