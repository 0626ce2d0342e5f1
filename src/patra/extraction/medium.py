"""How the letter reached the office."""

import re

from .rules import RuleMatch, RuleTable, rule

SOFT_COPY = "soft copy"
HARD_COPY = "hard copy"
DEFAULT_LETTER_MEDIUM = HARD_COPY

# Letterheads print an email address on almost every letter, so a bare
# "email" is not enough to call it a soft copy.
LETTER_MEDIUM_RULES = RuleTable(
    "letter_medium",
    [
        rule(
            r"soft\s*copy|(?:ई-?मेल|ईमेल|e-?mail)[ \t]*(?:द्वारे|ने|व्दारे)"
            r"|by[ \t]+e-?mail|through[ \t]+e-?mail|eOffice|ई-?ऑफिस"
            r"|ऑनला[इई]न[ \t]+(?:प्राप्त|सादर)|received[ \t]+online",
            SOFT_COPY,
        ),
        rule(r"फॅक्स|फॅक्सद्वारे|\bfax\b", "fax"),
        rule(r"कुरिअर|कुरियर|courier", "courier"),
        rule(r"स्पीड[ \t]*पोस्ट|speed[ \t]*post", "speed post"),
        rule(r"व्हॉट्सअॅप|व्हॉट्सॲप|व्हाट्सअप|whatsapp|\bSMS\b|एसएमएस", "whatsapp/sms"),
        rule(r"hard\s*copy|डाकेने|टपालाने|हस्तपोच|हाताने|by[ \t]+hand|registered[ \t]+post|रजिस्टर[ \t]+पोस्ट", HARD_COPY),
    ],
)

DIGITAL_CONTEXT = re.compile(r"\bPDF\b|\bscan|digital|संगणक|स्कॅन", re.IGNORECASE)
POSTAL_CONTEXT = re.compile(r"डाक|पोस्ट|वितरण|delivery", re.IGNORECASE)


def match_letter_medium(text: str) -> RuleMatch:
    """Match the medium table, then fall back to context keywords.

    The keyword fallback still reports a match; only text with neither a
    rule nor a keyword comes back unmatched.
    """
    if not isinstance(text, str):
        return RuleMatch()
    result = LETTER_MEDIUM_RULES.first_match(text)
    if result.matched:
        return result
    if DIGITAL_CONTEXT.search(text):
        return RuleMatch(True, SOFT_COPY)
    if POSTAL_CONTEXT.search(text):
        return RuleMatch(True, HARD_COPY)
    return result


def classify_letter_medium(text: str) -> str:
    return match_letter_medium(text).label_or(DEFAULT_LETTER_MEDIUM)
