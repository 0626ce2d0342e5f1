"""Text normalization shared by every extractor."""

import re

# Devanagari digits ० to ९
DEVANAGARI_DIGITS = str.maketrans("०१२३४५६७८९", "0123456789")

MARKDOWN_IMAGE = re.compile(r"!\[.*?\]\(.*?\)")
BOLD_MARKER = re.compile(r"\*\*")
HEADING_MARKER = re.compile(r"#+")
BLANK_LINES = re.compile(r"\n\s*\n")
WHITESPACE_RUN = re.compile(r"\s+")


def normalize_digits(text: str) -> str:
    """Convert Devanagari digits to ASCII digits; other characters pass through."""
    return text.translate(DEVANAGARI_DIGITS)


def clean_ocr_text(text: str) -> str:
    """Strip OCR markdown artifacts so extractors see plain text.

    Removes image tags, bold and heading markers and collapses blank lines.
    Line structure is kept because several extractors work line by line.
    """
    if not isinstance(text, str):
        return ""
    cleaned = MARKDOWN_IMAGE.sub("", text)
    cleaned = BOLD_MARKER.sub("", cleaned)
    cleaned = BLANK_LINES.sub("\n", cleaned)
    cleaned = HEADING_MARKER.sub("", cleaned)
    return cleaned.strip()


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return WHITESPACE_RUN.sub(" ", text).strip()


def split_lines(text: str, min_length: int = 1) -> list[str]:
    """Split into trimmed lines, dropping those shorter than min_length."""
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if len(line) >= min_length]
