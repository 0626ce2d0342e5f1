"""Tests for phone number extraction."""

import pytest

from patra.extraction.phones import canonicalize_phone, extract_phones, find_phones


class TestCanonicalizePhone:
    """Tests for raw match canonicalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("+91 98765-43210", "+919876543210"),
            ("919876543210", "+919876543210"),
            ("९८७६५४३२१०", "9876543210"),
            ("(987) 654 3210", "9876543210"),
        ],
    )
    def test_valid_shapes(self, raw, expected):
        assert canonicalize_phone(raw) == expected

    @pytest.mark.parametrize("raw", ["12345", "5876543210", "02412345678", "+1 2025550123"])
    def test_invalid_shapes_dropped(self, raw):
        """Anything that is not a mobile number is discarded, not an error."""
        assert canonicalize_phone(raw) is None


class TestExtractPhones:
    """Tests for phone extraction from letter text."""

    def test_devanagari_label(self):
        """Devanagari digits after a label are normalized."""
        assert extract_phones("मोबाइल: ९८७६५४३२१०") == "9876543210"

    def test_international_prefix(self):
        """The +91 form is kept and the bare form is not repeated."""
        assert extract_phones("+91 9876543210") == "+919876543210"

    def test_grouped_number(self):
        assert extract_phones("संपर्क: 98765 43210") == "9876543210"

    def test_multiple_numbers_keep_order(self):
        text = "मो. 9876543210, दूरध्वनी 9123456789\nपुन्हा मो. 9876543210"
        assert extract_phones(text) == "9876543210, 9123456789"

    def test_english_labels(self):
        assert extract_phones("Mob. 8888877777\nPhone: 7000012345") == "8888877777, 7000012345"

    def test_not_phone_numbers(self):
        """Dates and reference numbers are not phone numbers."""
        assert extract_phones("दिनांक 15/03/2024, जावक क्र. 1234567890") == ""

    @pytest.mark.parametrize("text", ["", "   ", "नमस्कार", "no numbers here"])
    def test_no_matches(self, text):
        assert extract_phones(text) == ""

    def test_find_phones_returns_list(self):
        assert find_phones("मो. 9876543210") == ["9876543210"]
