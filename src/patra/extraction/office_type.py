"""Resolution of the addressed office level and district.

Both results are closed sets: `OfficeType` for the level and `OfficeName`
for the district. Anything outside them resolves to "" rather than a
free-text guess.
"""

import logging

from patra.models.base import OfficeName, OfficeType

from .rules import RuleTable, rule

logger = logging.getLogger(__name__)

POLICE = r"पोल[ीि]स"

OFFICE_TYPE_RULES = RuleTable(
    "office_type",
    [
        rule(r"विशेष[ \t]+" + POLICE + r"[ \t]+महानिरीक्षक|Special[ \t]+Inspector[ \t]+General", OfficeType.IGP.value),
        rule(POLICE + r"[ \t]+महानिरीक्षक|Inspector[ \t]+General[ \t]+of[ \t]+Police|\bI\.?G\.?P\b", OfficeType.IGP.value),
        rule(
            r"उप[ \t]*विभागीय[ \t]+" + POLICE + r"[ \t]+अधिकारी|" + POLICE + r"[ \t]+उप[ \t]*अधीक्षक"
            r"|Sub[ \t\-]*Divisional[ \t]+Police[ \t]+Officer|\bS\.?D\.?P\.?O\b",
            OfficeType.SDPO.value,
        ),
        rule(POLICE + r"[ \t]+अधीक्षक|Superintendent[ \t]+of[ \t]+Police|\bS\.?P\b", OfficeType.SP.value),
        rule(POLICE + r"[ \t]+(?:स्टेशन|ठाणे)|Police[ \t]+Station", OfficeType.POLICE_STATION.value),
    ],
)

# Looser keyword checks when no title pattern matched
OFFICE_TYPE_KEYWORDS = (
    (("महानिरीक्षक", "inspector general"), OfficeType.IGP),
    (("अधीक्षक", "superintendent"), OfficeType.SP),
    (("उप विभागीय", "sub divisional"), OfficeType.SDPO),
    (("पोलीस स्टेशन", "पोलिस स्टेशन", "police station"), OfficeType.POLICE_STATION),
)

OFFICE_NAME_RULES = RuleTable(
    "office_name",
    [
        rule(r"अहिल्यानगर|अहमदनगर|Ahilyanagar|Ahmednagar|Ahmadnagar", OfficeName.AHILYANAGAR.value),
        rule(r"पुणे[ \t]+ग्रामीण|Pune[ \t]+Rural", OfficeName.PUNE_RURAL.value),
        rule(r"जळगा[ंव]व?|Jalgaon", OfficeName.JALGAON.value),
        rule(r"नंदुरबार|Nandurbar", OfficeName.NANDURBAR.value),
        rule(r"नाशिक[ \t]+ग्रामीण|Nashik[ \t]+Rural", OfficeName.NASHIK_RURAL.value),
    ],
)


def resolve_office_type(text: str) -> str:
    """Return the `OfficeType` value of the office level named, or ""."""
    if not isinstance(text, str) or not text:
        return ""
    result = OFFICE_TYPE_RULES.first_match(text)
    if result.matched:
        return result.label

    lowered = text.lower()
    for keywords, office_type in OFFICE_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            logger.debug("Office type %s from keyword fallback", office_type.value)
            return office_type.value
    return ""


def resolve_office_name(text: str) -> str:
    """Return the `OfficeName` value of a served district, or ""."""
    if not isinstance(text, str) or not text:
        return ""
    return OFFICE_NAME_RULES.first_match(text).label_or("")
