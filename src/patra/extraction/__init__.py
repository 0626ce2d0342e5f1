"""Structured data extraction from letter OCR text.

Field extractors, each an ordered table of narrow regex rules:
- phones: mobile and telephone numbers
- office: receiving office and recipients
- letter_type, medium, action: first-match classifiers
- dates, reference, remarks: letter date, outward number, subject and remarks
- office_type: closed-set office level and district
"""

from .action import classify_action_type, match_action_type
from .cleaner import clean_field, clean_record
from .dates import extract_date, extract_receipt_date
from .extractor import FIELD_DEFAULTS, StructuredDataExtractor, extract_structured_data
from .letter_type import classify_letter_type, match_letter_type
from .medium import classify_letter_medium, match_letter_medium
from .office import extract_office, extract_recipients, filter_recipients
from .office_type import resolve_office_name, resolve_office_type
from .phones import canonicalize_phone, extract_phones
from .reference import extract_copy_count, extract_outward_number
from .remarks import extract_subject, synthesize_remarks
from .rules import Rule, RuleMatch, RuleTable
from .text import clean_ocr_text, normalize_digits

__all__ = [
    # Orchestration
    "FIELD_DEFAULTS",
    "StructuredDataExtractor",
    "extract_structured_data",
    # Text
    "clean_ocr_text",
    "normalize_digits",
    # Rule tables
    "Rule",
    "RuleMatch",
    "RuleTable",
    # Extractors
    "canonicalize_phone",
    "extract_copy_count",
    "extract_date",
    "extract_office",
    "extract_outward_number",
    "extract_phones",
    "extract_receipt_date",
    "extract_recipients",
    "extract_subject",
    "filter_recipients",
    "synthesize_remarks",
    # Classifiers
    "classify_action_type",
    "classify_letter_medium",
    "classify_letter_type",
    "match_action_type",
    "match_letter_medium",
    "match_letter_type",
    "resolve_office_name",
    "resolve_office_type",
    # Cleaning
    "clean_field",
    "clean_record",
]
