"""Structured data extraction from letter OCR text.

Runs every field extractor independently over the cleaned text, applies the
field defaults in one place, then normalizes the assembled record.
"""

import logging
from datetime import date
from typing import Optional, Union

from patra.models import ExtractionInput, LetterStatus, StructuredRecord

from .action import DEFAULT_ACTION_TYPE, match_action_type
from .cleaner import clean_record
from .dates import extract_date, extract_receipt_date
from .letter_type import DEFAULT_CLASSIFICATION, DEFAULT_LETTER_TYPE, match_letter_type
from .medium import DEFAULT_LETTER_MEDIUM, match_letter_medium
from .office import extract_office, extract_recipients
from .office_type import resolve_office_name, resolve_office_type
from .phones import extract_phones
from .reference import DEFAULT_COPY_COUNT, extract_copy_count, extract_outward_number
from .remarks import REMARKS_FALLBACK, extract_subject, synthesize_remarks
from .text import clean_ocr_text

logger = logging.getLogger(__name__)

# Values used when an extractor found nothing. Fields missing here stay "".
FIELD_DEFAULTS = {
    "letterType": DEFAULT_LETTER_TYPE,
    "letterClassification": DEFAULT_CLASSIFICATION,
    "actionType": DEFAULT_ACTION_TYPE,
    "letterMedium": DEFAULT_LETTER_MEDIUM,
    "letterStatus": LetterStatus.PENDING.value,
    "numberOfCopies": DEFAULT_COPY_COUNT,
    "remarks": REMARKS_FALLBACK,
}


def apply_defaults(fields: dict[str, str]) -> dict[str, str]:
    """Fill empty fields from `FIELD_DEFAULTS`."""
    filled = dict(fields)
    for key, default in FIELD_DEFAULTS.items():
        if not filled.get(key):
            filled[key] = default
    return filled


class StructuredDataExtractor:
    """
    Builds a `StructuredRecord` from the OCR text of one letter.

    Stateless apart from the reference date used for the date plausibility
    window, so one instance can be shared across documents.
    """

    def __init__(self, reference_date: Optional[date] = None):
        self.reference_date = reference_date

    def extract_fields(self, text: str) -> dict[str, str]:
        """Run every extractor over cleaned text; unmatched fields are ""."""
        letter_type = match_letter_type(text)
        return {
            "receivedByOffice": extract_office(text),
            "recipientNameAndDesignation": extract_recipients(text),
            "letterType": letter_type.label,
            "letterClassification": letter_type.group if letter_type.matched else "",
            "letterDate": extract_date(text, self.reference_date),
            "dateOfReceiptOfLetter": extract_receipt_date(text, self.reference_date),
            "mobileNumber": extract_phones(text),
            "remarks": synthesize_remarks(text),
            "actionType": match_action_type(text).label,
            "letterStatus": LetterStatus.PENDING.value,
            "letterMedium": match_letter_medium(text).label,
            "letterSubject": extract_subject(text),
            "officeType": resolve_office_type(text),
            "officeName": resolve_office_name(text),
            "outwardLetterNumber": extract_outward_number(text),
            "numberOfCopies": extract_copy_count(text),
        }

    def extract(self, source: Union[ExtractionInput, str]) -> StructuredRecord:
        """
        Extract a structured record.

        Args:
            source: OCR output, or the raw OCR text itself. Anything that is
                not a string is treated as empty text.

        Returns:
            A cleaned StructuredRecord with defaults applied
        """
        raw = source.text if isinstance(source, ExtractionInput) else source
        text = clean_ocr_text(raw)

        fields = apply_defaults(self.extract_fields(text))
        record = clean_record(StructuredRecord.model_validate(fields))

        logger.info(
            "Extracted letter: type=%s, office=%r, date=%r, phones=%d",
            record.letter_type,
            record.received_by_office,
            record.letter_date,
            len(record.mobile_number.split(", ")) if record.mobile_number else 0,
        )
        return record


def extract_structured_data(text: str, reference_date: Optional[date] = None) -> StructuredRecord:
    """Extract a structured record from raw OCR text."""
    return StructuredDataExtractor(reference_date).extract(text)
