"""Tests for text normalization and rule tables."""

from patra.extraction.rules import NO_MATCH, RuleMatch, RuleTable, rule
from patra.extraction.text import clean_ocr_text, collapse_whitespace, normalize_digits, split_lines


class TestNormalizeDigits:
    """Tests for Devanagari digit normalization."""

    def test_all_digits(self):
        """Each Devanagari digit maps to its ASCII digit."""
        assert normalize_digits("०१२३४५६७८९") == "0123456789"

    def test_other_characters_pass_through(self):
        """Letters, ASCII digits and punctuation are unchanged."""
        text = "दिनांक: १५/03/2024, Mob. 98"
        assert normalize_digits(text) == "दिनांक: 15/03/2024, Mob. 98"

    def test_empty(self):
        assert normalize_digits("") == ""


class TestCleanOcrText:
    """Tests for OCR markdown cleanup."""

    def test_strips_markdown(self):
        """Image tags, bold and heading markers are removed."""
        text = "# शीर्षक\n![img-0.jpeg](img-0.jpeg)\n**विषय:** तक्रार"
        assert clean_ocr_text(text) == "शीर्षक\nविषय: तक्रार"

    def test_collapses_blank_lines(self):
        assert clean_ocr_text("एक\n\n\n   \nदोन") == "एक\nदोन"

    def test_non_string_is_empty(self):
        """Non-string input is treated as empty text."""
        assert clean_ocr_text(None) == ""
        assert clean_ocr_text(42) == ""

    def test_helpers(self):
        assert collapse_whitespace("  a \t b\n c ") == "a b c"
        assert split_lines(" a \n\n bcd \n", min_length=2) == ["bcd"]


class TestRuleTable:
    """Tests for ordered first-match rule tables."""

    @staticmethod
    def table():
        return RuleTable(
            "sample",
            [
                rule(r"तक्रारी\s+अर्ज", "तक्रारी अर्ज", "अर्ज"),
                rule(r"अर्ज", "अर्ज", "अर्ज"),
            ],
        )

    def test_first_declared_rule_wins(self):
        """The earlier, more specific rule takes precedence."""
        result = self.table().first_match("हा तक्रारी अर्ज आहे, अर्ज क्र. 5")
        assert result == RuleMatch(True, "तक्रारी अर्ज", "अर्ज")

    def test_no_match(self):
        """No matching rule yields the untagged result."""
        result = self.table().first_match("पत्र")
        assert result is NO_MATCH
        assert not result.matched
        assert result.label_or("सामान्य") == "सामान्य"

    def test_table_is_immutable_sequence(self):
        table = self.table()
        assert len(table) == 2
        assert isinstance(table.rules, tuple)
