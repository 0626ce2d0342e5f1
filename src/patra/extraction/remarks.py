"""Subject line and remarks summary.

Remarks are synthesized in three tiers and are never empty:

1. the first subject/intent sentence longer than 15 characters that is not
   just a reference number,
2. the first relevant content line longer than 25 characters,
3. a fixed fallback sentence.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from patra.config import settings

from .text import split_lines

logger = logging.getLogger(__name__)

REMARKS_FALLBACK = "दस्तऐवजाचा मुख्य मजकूर उपलब्ध नाही"


@dataclass(frozen=True)
class LineWith:
    """Captures every whole line that contains `keyword`."""

    keyword: str

    def captures(self, text: str) -> Iterator[str]:
        return (line for line in text.split("\n") if self.keyword in line)


Capture = Union[re.Pattern, LineWith]


def _table(entries: list) -> tuple[Capture, ...]:
    return tuple(
        entry if isinstance(entry, LineWith) else re.compile(entry, re.IGNORECASE)
        for entry in entries
    )


SUBJECT_PATTERNS = _table(
    [
        r"विषय(?![ऀ-ॿ])[ \t]*[:\-–]*[ \t]*([^\n]+)",
        r"Subject[ \t]*[:\-–]*[ \t]*([^\n]+)",
        r"\bSub\.[ \t]*[:\-–]*[ \t]*([^\n]+)",
        r"\bRE[ \t]*:[ \t]*([^\n]+)",
        r"regarding[ \t]*:[ \t]*([^\n]+)",
        LineWith("बाबत"),
    ]
)

INTENT_PATTERNS = _table(
    [
        r"विषय(?![ऀ-ॿ])[ \t]*[:\-–]*[ \t]*([^\n]+)",
        r"Subject[ \t]*[:\-–]*[ \t]*([^\n]+)",
        r"उपरोक्त[ \t]+विषयान्वये[ \t,]*([^\n।]+)",
        r"कळविण्यात[ \t]+येते[ \t]+की[ \t,]*([^\n।]+)",
        r"सादर[ \t]+करण्यात[ \t]+येते[ \t]+की[ \t,]*([^\n।]+)",
        r"विनंती[ \t]+(?:करण्यात[ \t]+येते[ \t]+)?की[ \t,]*([^\n।]+)",
        LineWith("बाबत"),
        LineWith("संदर्भात"),
        r"(?:requested|request[ \t]+you)[ \t]+to[ \t]+([^\n.]+)",
        r"regarding[ \t]*:?[ \t]*([^\n]+)",
    ]
)


def captures(pattern: Capture, text: str) -> Iterator[str]:
    """Yield the first capture group of every match, in text order."""
    if isinstance(pattern, LineWith):
        return pattern.captures(text)
    return (match.group(1) for match in pattern.finditer(text))


RELEVANCE_KEYWORDS = (
    "साहित्य",
    "उपकरणे",
    "संगणक",
    "धोरण",
    "वाटप",
    "करणे",
    "मागणी",
    "विनंती",
    "बाबत",
    "संदर्भात",
    "अनुदान",
    "योजना",
    "कार्यक्रम",
)

NOISE_LINE = re.compile(
    r"कार्यालय|\boffice\b|@|www\.|https?://|मो\.|मोबा[इई]ल|फोन|दूरध्वनी|\bMob|\bTel|\bPhone",
    re.IGNORECASE,
)

MIN_INTENT_LENGTH = 15
MIN_LINE_LENGTH = 25


def is_reference_shaped(value: str) -> bool:
    """True for strings made mostly of digits and slashes, like "123/2024"."""
    chars = [c for c in value if not c.isspace()]
    if not chars:
        return True
    numeric = sum(1 for c in chars if c.isdigit() or c == "/")
    return numeric / len(chars) > 0.4


def _first_intent(text: str) -> Optional[str]:
    for pattern in INTENT_PATTERNS:
        for capture in captures(pattern, text):
            candidate = capture.strip(" \t:-–,")
            if len(candidate) > MIN_INTENT_LENGTH and not is_reference_shaped(candidate):
                return candidate
    return None


def _first_relevant_line(text: str) -> Optional[str]:
    for line in split_lines(text, MIN_LINE_LENGTH + 1):
        if NOISE_LINE.search(line):
            continue
        if any(keyword in line for keyword in RELEVANCE_KEYWORDS):
            return line[: settings.remarks_max_length]
    return None


def synthesize_remarks(text: str) -> str:
    """Summarize what the letter is about; never returns ""."""
    if not isinstance(text, str) or not text.strip():
        return REMARKS_FALLBACK

    remarks = _first_intent(text)
    if remarks is None:
        remarks = _first_relevant_line(text)
    if remarks is None:
        logger.debug("No remarks found, using fallback sentence")
        return REMARKS_FALLBACK
    return remarks


def extract_subject(text: str) -> str:
    """Return the subject line of the letter, or ""."""
    if not isinstance(text, str) or not text:
        return ""
    for pattern in SUBJECT_PATTERNS:
        subject = next(captures(pattern, text), None)
        if subject is not None:
            subject = subject.strip(" \t:-–")
            if len(subject) > 5:
                return subject
    return ""
