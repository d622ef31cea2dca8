"""
Tests for propmatch.core.inventory.filters: inventory and client search.
"""

from datetime import date, datetime, timezone

import pytest

from propmatch.core.inventory import (
    ClientFilter,
    PropertyFilter,
    configuration_options,
    filter_clients,
    filter_properties,
)
from propmatch.utils.constants import ClientStatus, PropertyCategory, PropertyType


@pytest.fixture
def inventory(make_property):
    return [
        make_property(id="banyan"),
        make_property(
            id="sunrise", project_name="Sunrise Apartments", price=25_000,
            main_location="Garia", sub_location="Patuli Township", bhk="2 BHK",
            category=PropertyCategory.RESALE,
        ),
        make_property(
            id="hub", project_name="Bengal Silicon Valley Hub", price=6_800_000,
            property_type=PropertyType.COMMERCIAL, bhk="Office",
            main_location="Salt Lake", sub_location="Salt Lake Sector-V",
        ),
    ]


@pytest.fixture
def book(make_client):
    return [
        make_client(id="amit", name="Amit Kumar", phone="+919988776655", source="Reference",
                    created_at=datetime(2026, 10, 19, 9, tzinfo=timezone.utc)),
        make_client(id="priya", name="Priya Singh", phone="+919123456789", source="Online Portal",
                    status=ClientStatus.WARM,
                    created_at=datetime(2026, 10, 17, 9, tzinfo=timezone.utc)),
        make_client(id="rohan", name="Rohan Bose", phone="+918877665544", status=ClientStatus.COLD),
    ]


def ids(records):
    return [r.id for r in records]


class TestFilterProperties:
    def test_no_criteria_returns_all(self, inventory):
        assert ids(filter_properties(inventory, PropertyFilter())) == ["banyan", "sunrise", "hub"]

    def test_search_project_case_insensitive(self, inventory):
        assert ids(filter_properties(inventory, PropertyFilter(search="SUNRISE"))) == ["sunrise"]

    def test_search_sub_location(self, inventory):
        assert ids(filter_properties(inventory, PropertyFilter(search="sector-v"))) == ["hub"]

    def test_category(self, inventory):
        result = filter_properties(inventory, PropertyFilter(category=PropertyCategory.RESALE))
        assert ids(result) == ["sunrise"]

    def test_property_type(self, inventory):
        result = filter_properties(inventory, PropertyFilter(property_type=PropertyType.COMMERCIAL))
        assert ids(result) == ["hub"]

    def test_price_range_inclusive(self, inventory):
        result = filter_properties(inventory, PropertyFilter(min_price=25_000, max_price=6_800_000))
        assert ids(result) == ["sunrise", "hub"]

    def test_locations(self, inventory):
        result = filter_properties(
            inventory, PropertyFilter(main_location="New Town", sub_location="Action Area 1"),
        )
        assert ids(result) == ["banyan"]

    def test_bhk(self, inventory):
        assert ids(filter_properties(inventory, PropertyFilter(bhk="2 BHK"))) == ["sunrise"]


class TestFilterClients:
    def test_search_name(self, book):
        assert ids(filter_clients(book, ClientFilter(search="priya"))) == ["priya"]

    def test_search_phone(self, book):
        assert ids(filter_clients(book, ClientFilter(search="665544"))) == ["rohan"]

    def test_status(self, book):
        assert ids(filter_clients(book, ClientFilter(status=ClientStatus.WARM))) == ["priya"]

    def test_source_substring(self, book):
        assert ids(filter_clients(book, ClientFilter(source="portal"))) == ["priya"]

    def test_source_excludes_clients_without_source(self, book):
        assert "rohan" not in ids(filter_clients(book, ClientFilter(source="ref")))

    def test_created_on(self, book):
        assert ids(filter_clients(book, ClientFilter(created_on=date(2026, 10, 17)))) == ["priya"]


class TestConfigurationOptions:
    def test_all(self, inventory):
        assert configuration_options(inventory) == ["2 BHK", "3 BHK", "Office"]

    def test_by_type(self, inventory):
        assert configuration_options(inventory, PropertyType.RESIDENTIAL) == ["2 BHK", "3 BHK"]
