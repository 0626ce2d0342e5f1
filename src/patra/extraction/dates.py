"""Letter date and receipt date extraction.

Labelled dates are preferred over bare ones. A candidate is accepted only
when its four-digit year is plausible relative to a reference date, which
rejects stray digit runs such as outward numbers shaped like dates.

The receipt date comes from the inward stamp or diary entry. Dates on a line
carrying a receipt marker are never taken as the letter date.
"""

import logging
import re
from datetime import date
from typing import Iterable, Optional

from patra.config import settings

from .text import normalize_digits

logger = logging.getLogger(__name__)

DATE_LABEL = r"(?:दिनांक|दि\.|तारीख|Dated|Date)\s*[:\-–]*\s*"
NUMERIC_DATE = r"\d{1,2}[ \t]*[/\-.][ \t]*\d{1,2}[ \t]*[/\-.][ \t]*\d{4}"

MONTHS = (
    r"(?:जानेवारी|फेब्रुवारी|मार्च|एप्रिल|मे|जून|जुलै|ऑगस्ट|सप्टेंबर|ऑक्टोबर|नोव्हेंबर|डिसेंबर"
    r"|Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
DAY_MONTH_YEAR = rf"\d{{1,2}}(?:st|nd|rd|th)?[ \t]+{MONTHS}[ \t,]+\d{{4}}"
MONTH_DAY_YEAR = rf"{MONTHS}[ \t]+\d{{1,2}}(?:st|nd|rd|th)?,?[ \t]+\d{{4}}"

DATE_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        # Labelled
        DATE_LABEL + rf"({NUMERIC_DATE})",
        DATE_LABEL + rf"({DAY_MONTH_YEAR})",
        DATE_LABEL + rf"({MONTH_DAY_YEAR})",
        # Bare
        rf"(?<!\d)({NUMERIC_DATE})(?!\d)",
        rf"(?<!\d)({DAY_MONTH_YEAR})",
        rf"({MONTH_DAY_YEAR})",
    ]
)

RECEIPT_SEP = r"[:\-–\s]*"
# Inward stamps print the month abbreviated in capitals
STAMP_MONTHS = r"(?:JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC)"

_RECEIPT_LABELS = [
    r"प्राप्त[ \t]*झाल्याचा[ \t]*दिनांक",
    r"प्राप्त[ \t]*दिनांक",
    r"मिळाल्याचा[ \t]*दिनांक",
    r"येत[ \t]*दिनांक",
    r"आले[ \t]*दिनांक",
    r"प्राप्ती[ \t]*दिनांक",
    r"इनवर्ड[ \t]*दिनांक",
    r"received[ \t]*on",
    r"received[ \t]*date",
    r"receipt[ \t]*date",
    r"date[ \t]*received",
    r"डायरी[ \t]*दिनांक",
    r"diary[ \t]*date",
    r"diarised[ \t]*date",
]

# Plain दिनांक and Marathi month dates name the letter date, not the receipt
RECEIPT_DATE_PATTERNS = (
    tuple(re.compile(label + RECEIPT_SEP + rf"({NUMERIC_DATE})", re.IGNORECASE) for label in _RECEIPT_LABELS)
    + (
        re.compile(rf"diarised[ \t]*by[^\n]*?({NUMERIC_DATE})", re.IGNORECASE),
        re.compile(rf"(?<!\d)(\d{{1,2}}[ \t]+{STAMP_MONTHS}[ \t]+\d{{4}})(?![A-Za-z0-9])"),
    )
    + tuple(
        re.compile(p, re.IGNORECASE)
        for p in [
            # Marker and date on the same line
            rf"प्राप्त[^\n]*?({NUMERIC_DATE})",
            rf"received[^\n]*?({NUMERIC_DATE})",
            rf"({NUMERIC_DATE})[^\n]*प्राप्त",
            rf"({NUMERIC_DATE})[^\n]*received",
            rf"स्टॅम्प[^\n]*?({NUMERIC_DATE})",
            rf"stamp[^\n]*?({NUMERIC_DATE})",
        ]
    )
)

RECEIPT_LINE = re.compile(
    r"प्राप्त|मिळाल्याचा|इनवर्ड|डायरी|स्टॅम्प|received|receipt|diary|diarised|stamp",
    re.IGNORECASE,
)

YEAR = re.compile(r"\d{4}")


def is_plausible_year(year: int, reference_date: Optional[date] = None) -> bool:
    """Check a year against the window configured around `reference_date`."""
    reference = reference_date or date.today()
    earliest = reference.year - settings.date_years_back
    latest = reference.year + settings.date_years_ahead
    return earliest <= year <= latest


def _line_at(text: str, position: int) -> str:
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    return text[start:] if end == -1 else text[start:end]


def _first_plausible(
    patterns: Iterable[re.Pattern],
    text: str,
    reference_date: Optional[date],
    skip_receipt_lines: bool = False,
) -> str:
    for pattern in patterns:
        for match in pattern.finditer(text):
            if skip_receipt_lines and RECEIPT_LINE.search(_line_at(text, match.start(1))):
                continue
            token = match.group(1).strip()
            year = YEAR.search(token)
            if year and is_plausible_year(int(year.group(0)), reference_date):
                logger.debug("Date matched %r with %s", token, pattern.pattern[:40])
                return token
    return ""


def extract_date(text: str, reference_date: Optional[date] = None) -> str:
    """Return the first plausible letter date token, or "".

    Devanagari digits are normalized before matching, so the returned token
    always uses ASCII digits.
    """
    if not isinstance(text, str) or not text:
        return ""
    return _first_plausible(DATE_PATTERNS, normalize_digits(text), reference_date, skip_receipt_lines=True)


def extract_receipt_date(text: str, reference_date: Optional[date] = None) -> str:
    """Return the date the letter was received (inward stamp, diary), or ""."""
    if not isinstance(text, str) or not text:
        return ""
    return _first_plausible(RECEIPT_DATE_PATTERNS, normalize_digits(text), reference_date)
