"""Telephone number extraction from mixed-script letters.

Numbers are found with several regex families, then canonicalized to one
of three shapes: `+91XXXXXXXXXX`, or a bare 10-digit mobile number
starting with 6-9. Anything else is not a phone number and is dropped.
"""

import logging
import re
from typing import Optional

from .text import normalize_digits

logger = logging.getLogger(__name__)

# Digits in either script plus the separators seen in printed numbers.
# Horizontal whitespace only, so a label capture never runs onto the next line.
_NUMBER_CHARS = r"[0-9०-९+ \t\-()]{10,16}"

LABEL_PATTERNS = [
    rf"दूरध्वनी\s*(?:क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"दुरध्वनी\s*(?:क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"मोबाइल\s*(?:नंबर|क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"मोबाईल\s*(?:नंबर|क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"फोन\s*(?:नंबर|क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"संपर्क\s*(?:क्रमांक|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"मो\.\s*(?:नं\.?|क्र\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"(?:mobile|phone|contact)\s*(?:number|no\.?)?\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"(?:telephone|tel\.?)\s*[:\-]*\s*({_NUMBER_CHARS})",
    rf"(?:Mo|Mob)\.?\s*[:\-]*\s*({_NUMBER_CHARS})",
]

DIRECT_PATTERNS = [
    # +91 prefixed
    r"\+91[\s\-]?[6-9]\d{9}(?!\d)",
    # 5+5 grouped
    r"(?<!\d)[6-9]\d{4}[\s\-]\d{5}(?!\d)",
    # 3+3+4 grouped
    r"(?<!\d)[6-9]\d{2}[\s\-]\d{3}[\s\-]\d{4}(?!\d)",
    # bare 10 digits
    r"(?<![\d+])[6-9]\d{9}(?!\d)",
]

PHONE_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE) for p in LABEL_PATTERNS + DIRECT_PATTERNS
)

NON_PHONE_CHARS = re.compile(r"[^\d+]")
MOBILE_NUMBER = re.compile(r"^[6-9]\d{9}$")


def canonicalize_phone(raw: str) -> Optional[str]:
    """Canonicalize a raw match, or return None if it is not a phone number."""
    number = NON_PHONE_CHARS.sub("", normalize_digits(raw))
    if number.startswith("+91") and len(number) == 13:
        return number
    if number.startswith("91") and len(number) == 12:
        return "+" + number
    if MOBILE_NUMBER.match(number):
        return number
    return None


def find_phones(text: str) -> list[str]:
    """Return canonical phone numbers in order of appearance, deduplicated."""
    if not isinstance(text, str) or not text:
        return []

    variants = [text]
    normalized = normalize_digits(text)
    if normalized != text:
        variants.append(normalized)

    # Digit normalization keeps offsets, so positions in both variants agree
    hits: list[tuple[int, str]] = []
    for pattern in PHONE_PATTERNS:
        for variant in variants:
            for match in pattern.finditer(variant):
                group = 1 if match.lastindex else 0
                number = canonicalize_phone(match.group(group))
                if number is not None:
                    hits.append((match.start(group), number))

    found: list[str] = []
    seen_national: set[str] = set()
    for _, number in sorted(hits, key=lambda hit: hit[0]):
        # +919876543210 and 9876543210 are the same line
        national = number[-10:]
        if national in seen_national:
            continue
        seen_national.add(national)
        found.append(number)

    return found


def extract_phones(text: str) -> str:
    """Extract phone numbers as a comma-joined string, empty if none."""
    numbers = find_phones(text)
    if numbers:
        logger.debug("Found phone numbers: %s", numbers)
    return ", ".join(numbers)
