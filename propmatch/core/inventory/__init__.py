"""Inventory and client-book search filters."""

from .filters import (
    ClientFilter,
    PropertyFilter,
    configuration_options,
    filter_clients,
    filter_properties,
)

__all__ = [
    "ClientFilter",
    "PropertyFilter",
    "configuration_options",
    "filter_clients",
    "filter_properties",
]
