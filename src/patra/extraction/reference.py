"""Outward reference numbers and enclosure counts.

Government letters carry several number-like tokens (outward number, file
number, FIR number, receipt number). Every candidate is scored and the
best one is kept as the outward letter number.
"""

import logging
import re
from dataclasses import dataclass

from .text import normalize_digits

logger = logging.getLogger(__name__)

DEV = "ऀ-ॿ"
TOKEN = rf"[A-Z0-9/\-{DEV}]"
SEP = r"[:\s.]*"

OUTWARD_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        # Marathi labels
        rf"जावक[ \t]*पत्र[ \t]*क्रमांक{SEP}({TOKEN}{{3,40}})",
        rf"जावक[ \t]*(?:क्रमांक|क्र\.?){SEP}({TOKEN}{{3,40}})",
        rf"बाह्य[ \t]*पत्र[ \t]*क्रमांक{SEP}({TOKEN}{{3,40}})",
        rf"(?:फाइल|फाईल|नस्ती)[ \t]*क्र\.?{SEP}({TOKEN}{{3,25}})",
        rf"पत्र[ \t]*क्रमांक{SEP}({TOKEN}{{3,25}})",
        # English labels
        r"outward[ \t]*letter[ \t]*number[:\s.]*([A-Z0-9/\-]{3,30})",
        r"outward[ \t]*no[:\s.]*([A-Z0-9/\-]{3,30})",
        r"reference[ \t]*no[:\s.]*([A-Z0-9/\-]{3,30})",
        r"letter[ \t]*ref[:\s.]*([A-Z0-9/\-]{3,30})",
        r"letter[ \t]*no[:\s.]*([A-Z0-9/\-]{3,25})",
        r"file[ \t]*no[:\s.]*([A-Z0-9/\-]{3,25})",
        r"(?:receipt|comp\.|complaint)[ \t]*(?:no|number)[:\s.]*([A-Z0-9/\-]{3,25})",
        r"(?:FIR|case|NCR)[ \t]*no[:\s.]*([A-Z0-9/\-]{3,20})",
        r"\bref\b[:\s.]*([A-Z0-9/\-]{3,20})",
    ]
)

# Unlabelled government file numbers
BARE_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        r"(?<![A-Z0-9/])([A-Z]{1,6}/[0-9]{1,8}/[0-9]{4})(?![0-9])",
        r"(?<![A-Z0-9/])([0-9]{1,6}/[A-Z0-9]{1,8}/[0-9]{4})(?![0-9])",
        r"(DESK-\d+[A-Z\-]*)",
    ]
)

# An unlabelled D/M/YYYY token is a date, not a file number
DATE_SHAPED = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")

YEAR_IN_NUMBER = re.compile(r"20[2-3]\d")
DIGIT = re.compile(r"\d")


@dataclass
class ReferenceCandidate:
    """A number-like token and the labelled context it was found in."""

    number: str
    context: str

    @property
    def score(self) -> int:
        score = 0
        context = self.context.lower()
        if "/" in self.number:
            score += 3
        if "outward" in context or "जावक" in context:
            score += 5
        if "ref" in context or "letter" in context:
            score += 4
        if YEAR_IN_NUMBER.search(self.number):
            score += 2
        if len(self.number) > 10:
            score += 1
        return score


def find_reference_candidates(text: str) -> list[ReferenceCandidate]:
    normalized = normalize_digits(text)
    candidates = []
    for pattern in OUTWARD_PATTERNS + BARE_PATTERNS:
        for match in pattern.finditer(normalized):
            number = match.group(1).strip(" -/")
            if len(number) < 3 or not DIGIT.search(number):
                continue
            if pattern in BARE_PATTERNS and DATE_SHAPED.fullmatch(number):
                continue
            candidates.append(ReferenceCandidate(number, match.group(0)))
    return candidates


def extract_outward_number(text: str) -> str:
    """Return the best-scoring reference number, or "" if none scores."""
    if not isinstance(text, str) or not text:
        return ""

    best = ""
    best_score = 0
    for candidate in find_reference_candidates(text):
        # Ties keep the earlier pattern
        if candidate.score > best_score:
            best, best_score = candidate.number, candidate.score

    if best:
        logger.debug("Outward number %r (score %d)", best, best_score)
    return best


DEFAULT_COPY_COUNT = "1"

COPY_COUNT_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        r"सहपत्र[ \t]*(?:संख्या)?[:\-\s]*(\d{1,3})",
        r"सह[ \t]*कागद[ \t]*(?:पत्रे)?[:\-\s]*(\d{1,3})",
        r"copies[ \t]*[:\-]?[ \t]*(\d{1,3})",
        r"(\d{1,3})[ \t]+copies",
        r"Encl(?:osures?)?\.?[ \t]*[:\-]?[ \t]*(\d{1,3})",
    ]
)


def extract_copy_count(text: str) -> str:
    """Return the enclosure count named in the letter, default "1"."""
    if not isinstance(text, str) or not text:
        return DEFAULT_COPY_COUNT
    normalized = normalize_digits(text)
    for pattern in COPY_COUNT_PATTERNS:
        match = pattern.search(normalized)
        if match and int(match.group(1)) > 0:
            return str(int(match.group(1)))
    return DEFAULT_COPY_COUNT
