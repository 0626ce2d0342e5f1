"""Action expected from the receiving office."""

from .rules import RuleMatch, RuleTable, rule

DEFAULT_ACTION_TYPE = "सामान्य"

# Urgency overrides whatever else the letter asks for; the catch-all
# "कार्यवाही" goes last.
ACTION_TYPE_RULES = RuleTable(
    "action_type",
    [
        rule(r"तात[डत]ी|अति[ \t]*तात्काळ|त्वरित|urgent|immediate", "तातडीची कार्यवाही"),
        rule(r"चौकशी|inquiry|enquiry", "चौकशी करणे"),
        rule(r"तपासणी|पडताळणी|inspection|verification", "तपासणी"),
        rule(r"खुलासा|स्पष्टीकरण|explanation", "खुलासा सादर करणे"),
        rule(r"उत्तर|प्रत्युत्तर|\breply\b", "उत्तर देणे"),
        rule(r"अग्रेषित|forward", "अग्रेषित करणे"),
        rule(r"अहवाल[ \t]+(?:सादर|पाठव)|submit[ \t]+(?:the[ \t]+)?report", "अहवाल सादर करणे"),
        rule(r"माहितीस्तव|for[ \t]+(?:your[ \t]+)?information", "माहितीस्तव"),
        rule(r"माहिती[ \t]+(?:सादर|पाठव|द्यावी)", "माहिती सादर करणे"),
        rule(r"मंजुरी|मान्यता|approval|sanction", "मंजुरी"),
        rule(r"अभिप्राय|opinion|comments", "अभिप्राय"),
        rule(r"अनुपालन|पालन[ \t]+(?:करावे|करणे|अहवाल)|compliance", "अनुपालन"),
        rule(r"नोंद[ \t]+(?:घ्यावी|घेणे|घेऊन)|take[ \t]+note", "नोंद घेणे"),
        rule(r"उपस्थित[ \t]+रहा|उपस्थिती|attend", "उपस्थित राहणे"),
        rule(r"कार्यवाही|कारवाई|\baction\b", "कार्यवाही"),
    ],
)


def match_action_type(text: str) -> RuleMatch:
    if not isinstance(text, str):
        return RuleMatch()
    return ACTION_TYPE_RULES.first_match(text)


def classify_action_type(text: str) -> str:
    """Classify the requested action; "सामान्य" when nothing is asked."""
    return match_action_type(text).label_or(DEFAULT_ACTION_TYPE)
