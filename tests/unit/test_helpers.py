"""
Tests for propmatch.utils.helpers: currency, dates and share messages.
"""

from datetime import datetime

import pytest

from propmatch.utils.helpers import (
    format_currency,
    format_date,
    format_datetime,
    generate_share_message,
)


class TestFormatCurrency:
    @pytest.mark.parametrize("amount,expected", [
        (0, "₹0"),
        (999, "₹999"),
        (25000, "₹25,000"),
        (100000, "₹1,00,000"),
        (6800000, "₹68,00,000"),
        (11000000, "₹1,10,00,000"),
        (1234567890, "₹1,23,45,67,890"),
    ])
    def test_indian_grouping(self, amount, expected):
        assert format_currency(amount) == expected

    def test_rounds_to_whole_rupees(self):
        assert format_currency(25000.6) == "₹25,001"

    def test_negative(self):
        assert format_currency(-1500) == "-₹1,500"


class TestFormatDates:
    def test_format_date(self):
        assert format_date(datetime(2026, 10, 9)) == "9 Oct 2026"

    def test_format_datetime(self):
        assert format_datetime(datetime(2026, 10, 19, 15, 5)) == "19 Oct 2026, 03:05 PM"


class TestShareMessage:
    def test_contents(self, make_property, sample_agent):
        prop = make_property(floor="12th (out of G+20)", parking_count=2, brokerage_percent=1)
        message = generate_share_message(prop, sample_agent)
        lines = message.splitlines()
        assert lines[0] == "📢 Stock for Sale – Residential"
        assert "📍 Project Name: DLF The Banyan Tree, Action Area 1, New Town" in lines
        assert "📏 Size: 1800 sq. ft." in lines
        assert "💰 Price: ₹1,10,00,000" in lines
        assert "💼 Brokerage: 1%" in lines
        assert "📲 Call Us +919876543210" in lines
        assert lines[-1] == "Google Location - Not available"

    def test_map_link(self, make_property, sample_agent):
        prop = make_property(google_map_link="https://maps.app.goo.gl/example")
        message = generate_share_message(prop, sample_agent)
        assert message.endswith("Google Location - https://maps.app.goo.gl/example")

    def test_fractional_brokerage(self, make_property, sample_agent):
        message = generate_share_message(make_property(brokerage_percent=1.5), sample_agent)
        assert "💼 Brokerage: 1.5%" in message
