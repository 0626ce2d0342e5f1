"""Office and recipient extraction.

Scanned government correspondence has no fixed layout, so both extractors
are a prioritized list of narrow patterns rather than one general one:

- `extract_office`: the office the letter was received by / addressed from,
  taken from letterhead or title lines.
- `extract_recipients`: "name, designation" pairs and bare titles found in
  addressing blocks, `प्रति` lists and signature blocks.
"""

import logging
import re
from typing import Iterable, Optional

from patra.config import settings

from .text import collapse_whitespace, split_lines

logger = logging.getLogger(__name__)

# Devanagari block
DEV = "ऀ-ॿ"
MR_WORD = rf"[{DEV}]+\.?"
# Two to four words, shortest first so a trailing designation is not swallowed
MR_NAME = MR_WORD + r"(?:[ \t]+" + MR_WORD + r"){1,3}?"
EN_NAME = r"[A-Z][A-Za-z.]*(?:[ \t]+[A-Z][A-Za-z.]*){0,3}?"
POLICE = r"पोल[ीि]स"

MR_DESIGNATIONS = [
    rf"विशेष\s+{POLICE}\s+महानिरीक्षक",
    rf"{POLICE}\s+महानिरीक्षक",
    rf"अपर\s+{POLICE}\s+महासंचालक",
    rf"{POLICE}\s+महासंचालक",
    rf"अप(?:्प)?र\s+{POLICE}\s+अधीक्षक",
    rf"{POLICE}\s+उप\s*अधीक्षक",
    rf"{POLICE}\s+अधीक्षक",
    rf"उप\s*विभागीय\s+{POLICE}\s+अधिकारी",
    rf"सहायक\s+{POLICE}\s+निरीक्षक",
    rf"{POLICE}\s+उप\s*निरीक्षक",
    rf"{POLICE}\s+निरीक्षक",
    rf"{POLICE}\s+आयुक्त",
    r"विभागीय\s+आयुक्त",
    r"उप\s*जिल्हाधिकारी",
    r"जिल्हाधिकारी",
    r"तहस[िी]लदार",
    r"गट\s*विकास\s+अधिकारी",
    r"मुख्य\s+कार्यकारी\s+अधिकारी",
    r"कार्यकारी\s+अभियंता",
    r"उप\s*अभियंता",
    r"प्रभारी\s+अधिकारी",
    r"कक्ष\s+अधिकारी",
    r"(?:अवर|उप|सह)\s*सचिव",
    r"सचिव",
    r"संचालक",
    r"अध्यक्ष",
    r"सरपंच",
    r"ग्रामसेवक",
    r"प्राचार्य",
    r"मुख्याध्यापक",
]
EN_DESIGNATIONS = [
    r"Additional\s+Superintendent\s+of\s+Police",
    r"Deputy\s+Superintendent\s+of\s+Police",
    r"Superintendent\s+of\s+Police",
    r"(?:Special\s+)?Inspector\s+General\s+of\s+Police",
    r"(?:Additional\s+)?Director\s+General\s+of\s+Police",
    r"Sub[\s-]*Divisional\s+Police\s+Officer",
    r"(?:Assistant\s+)?Police\s+Inspector",
    r"(?:Police\s+)?Sub[\s-]*Inspector",
    r"Commissioner\s+of\s+Police",
    r"(?:District\s+)?Collector",
    r"Tahsildar",
    r"(?:Deputy\s+|Joint\s+)?Director",
    r"(?:Under|Deputy|Joint|Principal)?\s*Secretary",
    r"Executive\s+Engineer",
    r"Chief\s+Executive\s+Officer",
    r"Commandant",
    r"Colonel",
]
MR_DESIGNATION = "(?:" + "|".join(MR_DESIGNATIONS) + ")"
EN_DESIGNATION = "(?i:" + "|".join(EN_DESIGNATIONS) + ")"
ANY_DESIGNATION = f"(?:{MR_DESIGNATION}|{EN_DESIGNATION})"

MR_HONORIFIC = r"(?:श्रीमती|श्री|सौ|कु|डॉ|ॲड|अॅड)(?:\.\s*|\s+)"
SURNAMES = (
    r"(?:पाटील|जाधव|पवार|शिंदे|देशमुख|कुलकर्णी|जोशी|देशपांडे|गायकवाड|चव्हाण"
    r"|मोरे|कदम|भोसले|सोनवणे|वाघ|शेख|खान|काळे|गोसावी|कांबळे)"
)
PLACE = rf"[{DEV}]+(?:[ \t]+[{DEV}]+)?"


# -- Office patterns --------------------------------------------------------

OFFICE_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE | re.MULTILINE)
    for p in [
        r"(जिल्हाधिकारी\s+(?:व|आणि)\s+जिल्हा\s+दंडाधिकारी\s+(?:यांचे\s+)?कार्यालय[, \t]*[^\n।]*)",
        r"(जिल्हाधिकारी\s+(?:यांचे\s+)?कार्यालय[, \t]*[^\n।]*)",
        rf"((?:विशेष\s+)?{POLICE}\s+महानिरीक्षक[^\n।]*कार्यालय[^\n।]*)",
        rf"((?:अपर\s+)?{POLICE}\s+महासंचालक[^\n।]*कार्यालय[^\n।]*)",
        rf"((?:जिल्हा\s+)?{POLICE}\s+अधीक्षक\s+(?:यांचे\s+)?कार्यालय[, \t]*[^\n।]*)",
        rf"(उप\s*विभागीय\s+{POLICE}\s+अधिकारी(?:\s+कार्यालय)?[, \t]*[^\n।]*)",
        rf"({POLICE}\s+आयुक्त(?:ालय|\s+कार्यालय)[, \t]*[^\n।]*)",
        rf"([^\n]*{POLICE}\s+(?:स्टेशन|ठाणे)[^\n।]*)",
        r"(तहसील\s*कार्यालय[, \t]*[^\n।]*)",
        r"(जिल्हा\s+परिषद[^\n।]*)",
        r"([^\n]*(?:महानगरपालिका|नगर\s*परिषद|नगरपालिका)[^\n।]*)",
        r"^([^\n।]*(?:कार्यालय|विभाग|मंत्रालय)[^\n।]*)",
        r"^([^\n]*\b(?:Office|Department|Ministry|Commissionerate)\b[^\n]*)",
    ]
)

OFFICE_FALLBACK_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        r"([^\n]*(?:कार्यालय|कचेरी|office)[^\n]*)",
        r"([^\n]*(?:शाखा|branch|कक्ष)[^\n]*)",
    ]
)

NOT_OFFICE_LINE = re.compile(r"विषय|subject|क्रमांक", re.IGNORECASE)
OFFICE_PUNCTUATION = re.compile(r"[#*(),।]")


def _clean_office(value: str) -> str:
    return collapse_whitespace(OFFICE_PUNCTUATION.sub("", value))


def _office_lines(text: str) -> str:
    """Keep only lines that can hold an office name."""
    lines = [
        line
        for line in split_lines(text, min_length=6)
        if len(line) <= 200 and not NOT_OFFICE_LINE.search(line)
    ]
    return "\n".join(lines)


def _first_office(patterns: Iterable[re.Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        for match in pattern.finditer(text):
            office = _clean_office(match.group(1) if match.lastindex else match.group(0))
            if len(office) > 5:
                return office
    return None


def extract_office(text: str) -> str:
    """Extract the receiving office name, or an empty string."""
    if not isinstance(text, str):
        return ""
    candidates = _office_lines(text)
    office = _first_office(OFFICE_PATTERNS, candidates)
    if office is None:
        office = _first_office(OFFICE_FALLBACK_PATTERNS, candidates)
    if office:
        logger.debug("Office: %s", office)
    return office or ""


# -- Recipient patterns -----------------------------------------------------
# Each pattern yields `name` and/or `title` named groups. Both present gives a
# "name, title" pair, a title alone is kept as a bare title.

ADDRESSING_PATTERNS = tuple(
    re.compile(p)
    for p in [
        # मा. पोलीस अधीक्षक, अहिल्यानगर
        rf"(?P<title>मा\.\s*{MR_DESIGNATION}(?:\s*,\s*{PLACE})?)",
        # मा. X साहेब
        rf"(?P<title>मा\.\s*[{DEV}]+(?:\s+[{DEV}]+){{0,3}}\s+साहेब)",
        # श्री. राम पाटील, पोलीस निरीक्षक
        rf"{MR_HONORIFIC}(?P<name>{MR_NAME})\s*,?\s*\(?(?P<title>{MR_DESIGNATION})",
        # Dr. A. Kumar, Superintendent of Police
        rf"(?:Dr|Adv|Mr|Mrs|Ms|Shri|Smt)\.?\s+(?P<name>{EN_NAME})\s*,?\s*\(?(?P<title>{EN_DESIGNATION})",
        # पोलीस निरीक्षक श्री. राम पाटील
        rf"(?P<title>{MR_DESIGNATION})\s*[,:\-]?\s*{MR_HONORIFIC}(?P<name>{MR_NAME})",
        # राम पाटील, महसूल विभाग
        rf"(?P<name>{MR_NAME})\s*,\s*(?P<title>(?:[{DEV}]+\s+){{1,2}}विभाग)",
        # (राम पाटील)\nपोलीस निरीक्षक
        rf"\(\s*(?P<name>[{DEV}A-Za-z.]+(?:\s+[{DEV}A-Za-z.]+){{1,3}})\s*\)\s*\n\s*(?P<title>{ANY_DESIGNATION}[^\n]{{0,40}})",
        # राम पाटील पोलीस निरीक्षक
        rf"(?P<name>[{DEV}]+\s+(?:[{DEV}]+\s+)?{SURNAMES})\s*,?\s*\(?(?P<title>{MR_DESIGNATION})",
    ]
)

TITLE_PATTERNS = tuple(
    re.compile(p)
    for p in [
        rf"\bThe\s+(?P<title>{EN_DESIGNATION}(?:\s*,\s*[A-Z][A-Za-z]+(?:\s+[A-Z][A-Za-z]+)?)?)",
        rf"(?P<title>(?:विशेष\s+|अपर\s+)?{POLICE}\s+(?:महासंचालक|महानिरीक्षक|अधीक्षक|आयुक्त)(?:\s*,\s*{PLACE})?)",
        rf"(?P<title>(?:अवर\s+|उप\s+|सह\s+)?सचिव\s*,\s*[{DEV}]+(?:\s+[{DEV}]+){{0,2}}\s+विभाग)",
    ]
)

PRATI_BLOCK = re.compile(r"प्रति\s*[,:]?\s*\n((?:[^\n]*\n?){1,10})")
NUMBERED_ENTRY = re.compile(r"^\s*[0-9०-९]{1,2}\s*[).]\s*(?P<title>[^\n]{5,80})$", re.MULTILINE)

SIGN_OFF = re.compile(
    r"आपला\s+विश्वासू|आपली\s+विश्वासू|आपले\s+विश्वासू|yours\s+(?:faithfully|sincerely)"
    r"|स्वाक्षरी|सही\s*/?-",
    re.IGNORECASE,
)
SIGNATURE_CHARS = re.compile(r"[()\[\]{}]|सही\s*/?-|/-")
DESIGNATION_LINE = re.compile(ANY_DESIGNATION)

HONORIFIC_PREFIX = re.compile(rf"^{MR_HONORIFIC}")
NAME_STOPWORDS = re.compile(
    r"कार्यालय|विभाग|पोल[ीि]स|स्टेशन|जिल्हा|यांचे|यांना|यांच्या|साहेब|विषय"
    r"|संदर्भ|दिनांक|क्रमांक|अर्ज|पत्र|शाखा|प्रति|मा\."
)

# Candidate noise
NUMERIC_ONLY = re.compile(r"^[\d०-९\s/\-.,()+:]+$")
URL_OR_EMAIL = re.compile(r"https?://|www\.|\S+@\S+", re.IGNORECASE)
PHONE_LABEL = re.compile(r"(?:^|\s)(?:मो|Mo|Mob)\.|मोबाइल|मोबाईल|दूरध्वनी|फोन|phone", re.IGNORECASE)
DATE_LABEL = re.compile(r"^(?:दिनांक|दि\.|तारीख|date\b)|दिनांक", re.IGNORECASE)
EDGE_PUNCTUATION = " ,.;:-|"


def _clean_name(name: str) -> str:
    return HONORIFIC_PREFIX.sub("", collapse_whitespace(name)).strip(EDGE_PUNCTUATION)


def _candidate(match: re.Match) -> Optional[str]:
    groups = match.groupdict()
    title = collapse_whitespace(groups.get("title") or "").strip(EDGE_PUNCTUATION)
    name = groups.get("name")
    if name is not None:
        name = _clean_name(name)
        if not name or NAME_STOPWORDS.search(name):
            return None
        return f"{name}, {title}" if title else name
    return title or None


def _scan(patterns: Iterable[re.Pattern], text: str) -> list[str]:
    found = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            candidate = _candidate(match)
            if candidate:
                found.append(candidate)
    return found


def _prati_entries(text: str) -> list[str]:
    """Numbered entries of the `प्रति` (to) list."""
    found = []
    for block in PRATI_BLOCK.finditer(text):
        for entry in NUMBERED_ENTRY.finditer(block.group(1)):
            found.append(collapse_whitespace(entry.group("title")).strip(EDGE_PUNCTUATION))
    return found


def _signature_entries(text: str) -> list[str]:
    """Name (and designation) lines following a sign-off."""
    lines = split_lines(text)
    found = []
    for index, line in enumerate(lines):
        if not SIGN_OFF.search(line):
            continue
        following = [
            collapse_whitespace(SIGNATURE_CHARS.sub(" ", candidate))
            for candidate in lines[index + 1:index + 4]
        ]
        following = [c for c in following if c and not SIGN_OFF.search(c)]
        if not following:
            continue
        name = _clean_name(following[0])
        if len(name) <= 3 or DESIGNATION_LINE.match(name):
            # Designation printed without a name
            found.append(following[0])
            continue
        if len(following) > 1 and DESIGNATION_LINE.search(following[1]):
            found.append(f"{name}, {following[1]}")
        else:
            found.append(name)
    return found


def is_noise(candidate: str) -> bool:
    """True for candidates that are numbers, links, phone or date labels."""
    return bool(
        len(candidate) <= 5
        or NUMERIC_ONLY.match(candidate)
        or URL_OR_EMAIL.search(candidate)
        or PHONE_LABEL.search(candidate)
        or DATE_LABEL.search(candidate)
    )


def filter_recipients(candidates: Iterable[str], limit: Optional[int] = None) -> list[str]:
    """Deduplicate and drop noise, keeping first-seen order and at most `limit`."""
    limit = settings.max_recipients if limit is None else limit
    seen = set()
    kept = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            continue
        candidate = collapse_whitespace(candidate).strip(EDGE_PUNCTUATION)
        if is_noise(candidate):
            continue
        key = candidate.casefold()
        if key in seen:
            continue
        seen.add(key)
        kept.append(candidate)
        if len(kept) >= limit:
            break
    return kept


def find_recipients(text: str) -> list[str]:
    """All recipient candidates, unfiltered, in pass order."""
    if not isinstance(text, str) or not text:
        return []
    candidates = _scan(ADDRESSING_PATTERNS, text)
    candidates.extend(_prati_entries(text))
    candidates.extend(_scan(TITLE_PATTERNS, text))
    candidates.extend(_signature_entries(text))
    return candidates


def extract_recipients(text: str) -> str:
    """Extract recipient names and designations as a ' | '-joined string."""
    recipients = filter_recipients(find_recipients(text))
    if recipients:
        logger.debug("Recipients: %s", recipients)
    return " | ".join(recipients)
