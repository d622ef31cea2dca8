"""
Form validation for PropMatch records.

Validators take raw form input (values as typed, usually strings) and
return a ValidationResult mapping field names to error messages,
instead of toggling error flags on the form. Records are only built
from input that validated cleanly.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from pydantic import EmailStr, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)


@dataclass
class ValidationResult:
    """Outcome of validating one form."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        """Record an error; the first error per field wins."""
        self.errors.setdefault(field_name, message)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return False
    return not math.isnan(number)


def _require(
    result: ValidationResult,
    data: Mapping[str, Any],
    fields: Mapping[str, str],
) -> None:
    for name, message in fields.items():
        if _is_blank(data.get(name)):
            result.add(name, message)


def validate_client_form(data: Mapping[str, Any]) -> ValidationResult:
    """Validate the contact step of the client form."""
    result = ValidationResult()
    _require(result, data, {
        "name": "Name is required.",
        "phone": "Phone number is required.",
    })
    return result


def validate_property_form(data: Mapping[str, Any]) -> ValidationResult:
    """Validate the add/edit property form."""
    result = ValidationResult()
    _require(result, data, {
        "category": "Category is required.",
        "project_name": "Project name is required.",
        "main_location": "Main location is required.",
        "sub_location": "Sub location is required.",
        "property_type": "Property type is required.",
        "bhk": "BHK/Configuration is required.",
    })

    for name, message in (
        ("size_sqft", "A valid size is required."),
        ("price", "A valid price is required."),
    ):
        value = data.get(name)
        if _is_blank(value) or not _is_number(value):
            result.add(name, message)

    return result


def validate_follow_up_form(data: Mapping[str, Any]) -> ValidationResult:
    """Validate the add follow-up form."""
    result = ValidationResult()
    _require(result, data, {"note": "Note is required."})

    due_at = data.get("due_at")
    if isinstance(due_at, datetime):
        return result
    try:
        datetime.fromisoformat(str(due_at).strip())
    except ValueError:
        result.add("due_at", "A valid due date is required.")
    return result


def validate_agent_profile(data: Mapping[str, Any]) -> ValidationResult:
    """Validate the edit-profile form."""
    result = ValidationResult()
    _require(result, data, {
        "name": "Name is required.",
        "phone": "Phone number is required.",
    })

    email = data.get("email")
    if _is_blank(email):
        result.add("email", "A valid email is required.")
    else:
        try:
            _email_adapter.validate_python(str(email).strip())
        except ValidationError:
            result.add("email", "A valid email is required.")

    return result
