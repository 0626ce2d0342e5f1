"""Tests for field cleaning."""

import pytest

from patra.extraction.cleaner import clean_field, clean_record
from patra.models import StructuredRecord


class TestCleanField:
    """Tests for single field cleaning."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            ("", ""),
            ("  पोलीस   अधीक्षक \n कार्यालय ", "पोलीस अधीक्षक कार्यालय"),
            (3, "3"),
        ],
    )
    def test_values(self, value, expected):
        assert clean_field(value) == expected


class TestCleanRecord:
    """Tests for whole-record cleaning."""

    def test_structured_record(self):
        record = StructuredRecord(letter_subject="  रस्ता \t दुरुस्ती ", office_type="SP")
        cleaned = clean_record(record)
        assert isinstance(cleaned, StructuredRecord)
        assert cleaned.letter_subject == "रस्ता दुरुस्ती"
        assert cleaned.office_type == "SP"

    def test_mapping(self):
        cleaned = clean_record({"remarks": None, "letterDate": " 15/03/2024 "})
        assert cleaned == {"remarks": "", "letterDate": "15/03/2024"}

    def test_idempotent(self):
        record = {"a": "  x  y ", "b": None, "c": "\n"}
        once = clean_record(record)
        assert clean_record(once) == once

    def test_every_field_string(self):
        cleaned = clean_record(StructuredRecord()).to_dict()
        assert all(isinstance(value, str) for value in cleaned.values())
