"""Tests for the letter medium, action type and office classifiers."""

import pytest

from patra.extraction.action import DEFAULT_ACTION_TYPE, classify_action_type, match_action_type
from patra.extraction.medium import classify_letter_medium, match_letter_medium
from patra.extraction.office_type import resolve_office_name, resolve_office_type
from patra.models import OfficeName, OfficeType


class TestLetterMedium:
    """Tests for letter medium classification."""

    @pytest.mark.parametrize(
        "text,medium",
        [
            ("सदर पत्र ई-मेल द्वारे प्राप्त झाले", "soft copy"),
            ("Forwarded by email for necessary action", "soft copy"),
            ("फॅक्स संदेश", "fax"),
            ("कुरिअरने पाठविले", "courier"),
            ("स्पीड पोस्टाने पाठविले", "speed post"),
            ("व्हॉट्सअॅप वर प्राप्त", "whatsapp/sms"),
            ("पत्र हस्तपोच सादर", "hard copy"),
        ],
    )
    def test_rules(self, text, medium):
        assert classify_letter_medium(text) == medium

    def test_letterhead_email_is_not_soft_copy(self):
        """An email address on the letterhead says nothing about the medium."""
        assert classify_letter_medium("Email: sp.ahmednagar@mahapolice.gov.in") == "hard copy"

    def test_digital_context_fallback(self):
        assert classify_letter_medium("सोबत स्कॅन प्रत जोडली आहे") == "soft copy"
        assert classify_letter_medium("attached PDF") == "soft copy"

    def test_postal_context_fallback(self):
        assert classify_letter_medium("डाक वितरण विभाग") == "hard copy"
        assert match_letter_medium("डाक वितरण विभाग").matched

    def test_default(self):
        assert classify_letter_medium("नमस्कार") == "hard copy"
        assert not match_letter_medium("नमस्कार").matched


class TestActionType:
    """Tests for action type classification."""

    @pytest.mark.parametrize(
        "text,action",
        [
            ("अति तात्काळ: सदर प्रकरणी चौकशी करावी", "तातडीची कार्यवाही"),
            ("अर्जाची चौकशी करून अहवाल सादर करावा", "चौकशी करणे"),
            ("सविस्तर अहवाल सादर करावा", "अहवाल सादर करणे"),
            ("आपल्या माहितीस्तव सादर", "माहितीस्तव"),
            ("खालील माहिती सादर करावी", "माहिती सादर करणे"),
            ("पत्र पुढील कार्यवाहीसाठी अग्रेषित", "अग्रेषित करणे"),
            ("बैठकीस उपस्थित रहावे", "उपस्थित राहणे"),
            ("नियमानुसार कार्यवाही करावी", "कार्यवाही"),
        ],
    )
    def test_rules(self, text, action):
        assert classify_action_type(text) == action

    def test_default(self, complaint_letter):
        """Action type has no fallback; unmatched text is सामान्य."""
        assert classify_action_type(complaint_letter) == DEFAULT_ACTION_TYPE
        assert not match_action_type("").matched


class TestOfficeType:
    """Tests for office level resolution."""

    @pytest.mark.parametrize(
        "text,office_type",
        [
            ("विशेष पोलीस महानिरीक्षक, नाशिक परिक्षेत्र", OfficeType.IGP),
            ("पोलीस अधीक्षक, अहिल्यानगर", OfficeType.SP),
            ("उप विभागीय पोलीस अधिकारी, शिर्डी", OfficeType.SDPO),
            ("कोतवाली पोलीस स्टेशन", OfficeType.POLICE_STATION),
            ("Superintendent of Police, Jalgaon", OfficeType.SP),
        ],
    )
    def test_patterns(self, text, office_type):
        assert resolve_office_type(text) == office_type.value

    def test_keyword_fallback(self):
        """Bare keywords resolve when no title pattern matched."""
        assert resolve_office_type("महानिरीक्षक यांचे पत्र") == "IGP"
        assert resolve_office_type("अधीक्षक भूमी अभिलेख") == "SP"

    def test_unknown(self, complaint_letter):
        assert resolve_office_type(complaint_letter) == ""
        assert resolve_office_type("") == ""


class TestOfficeName:
    """Tests for closed-set district resolution."""

    @pytest.mark.parametrize(
        "text,name",
        [
            ("पोलीस अधीक्षक, अहिल्यानगर", OfficeName.AHILYANAGAR),
            ("पोलीस अधीक्षक कार्यालय, अहमदनगर", OfficeName.AHILYANAGAR),
            ("पोलीस अधीक्षक, पुणे ग्रामीण", OfficeName.PUNE_RURAL),
            ("जळगाव जिल्हा", OfficeName.JALGAON),
            ("Superintendent of Police, Nandurbar", OfficeName.NANDURBAR),
            ("नाशिक ग्रामीण पोलीस", OfficeName.NASHIK_RURAL),
        ],
    )
    def test_served_districts(self, text, name):
        assert resolve_office_name(text) == name.value

    @pytest.mark.parametrize("text", ["मुंबई पोलीस", "जिल्हाधिकारी कार्यालय, पुणे", "नाशिक शहर", ""])
    def test_other_offices_not_captured(self, text):
        """Offices outside the five districts resolve to "", never free text."""
        assert resolve_office_name(text) == ""
