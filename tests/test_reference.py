"""Tests for outward number and enclosure count extraction."""

import pytest

from patra.extraction.reference import (
    ReferenceCandidate,
    extract_copy_count,
    extract_outward_number,
)


class TestOutwardNumber:
    """Tests for scored reference number extraction."""

    def test_jawak_number(self, sp_letter):
        assert extract_outward_number(sp_letter) == "एसपी/अर्ज/1234/2024"

    def test_devanagari_digits(self):
        assert extract_outward_number("जावक क्रमांक: १२३/२०२४") == "123/2024"

    def test_english_outward(self):
        assert extract_outward_number("Outward No. DESK-5/789/2024") == "DESK-5/789/2024"

    def test_best_score_wins(self):
        """A labelled outward number beats an unlabelled file number."""
        text = "File No. 55/2023\nजावक क्र. SP/1234/2024"
        assert extract_outward_number(text) == "SP/1234/2024"

    def test_scoring(self):
        assert ReferenceCandidate("123/2024", "जावक क्र. 123/2024").score == 3 + 5 + 2
        assert ReferenceCandidate("12345", "File No. 12345").score == 0

    def test_bare_date_is_not_a_number(self, complaint_letter):
        """An unlabelled D/M/YYYY token is the letter date."""
        assert extract_outward_number(complaint_letter) == ""
        assert extract_outward_number("दिनांक 5/3/2024 रोजी") == ""

    def test_bare_file_number_kept(self):
        assert extract_outward_number("प्रकरण 123/CR/2024 बाबत") == "123/CR/2024"

    @pytest.mark.parametrize("text", ["", "नमस्कार", "Reference: see above", "File No. 12345"])
    def test_none(self, text):
        """Unscored or missing numbers give ""."""
        assert extract_outward_number(text) == ""


class TestCopyCount:
    """Tests for enclosure count extraction."""

    @pytest.mark.parametrize(
        "text,count",
        [
            ("सहपत्र: ३", "3"),
            ("सह कागद पत्रे - 2", "2"),
            ("Encl: 4", "4"),
            ("Enclosures - 12", "12"),
            ("5 copies enclosed", "5"),
        ],
    )
    def test_counts(self, text, count):
        assert extract_copy_count(text) == count

    def test_default(self, complaint_letter):
        assert extract_copy_count(complaint_letter) == "1"
        assert extract_copy_count("सहपत्र: 0") == "1"
        assert extract_copy_count(None) == "1"
