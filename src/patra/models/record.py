"""Extraction input and output models."""

from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel, Field

from .base import LetterStatus, OfficeName, OfficeType


class ExtractionInput(BaseModel):
    """Raw OCR output handed to the extraction engine."""

    text: str = Field(default="", description="Full OCR text, pages joined")
    page_count: int = Field(default=0, ge=0)
    model: str = Field(default="", description="OCR engine that produced the text")
    processed_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        frozen = True


class StructuredRecord(BaseModel):
    """
    Structured fields inferred from one scanned letter.

    Every field is a string; unknown values are empty strings or the
    documented default label. Serialized with camelCase names so the
    record can be dropped straight into letter-creation forms.
    """

    received_by_office: str = Field(default="", alias="receivedByOffice")
    recipient_name_and_designation: str = Field(
        default="",
        alias="recipientNameAndDesignation",
        description="' | '-joined 'name, designation' pairs or bare titles",
    )
    letter_type: str = Field(default="", alias="letterType")
    letter_classification: str = Field(default="", alias="letterClassification")
    letter_date: str = Field(default="", alias="letterDate")
    date_of_receipt_of_letter: str = Field(
        default="",
        alias="dateOfReceiptOfLetter",
        description="Inward stamp or diary date, kept apart from the letter date",
    )
    mobile_number: str = Field(default="", alias="mobileNumber")
    remarks: str = Field(default="", alias="remarks")
    action_type: str = Field(default="", alias="actionType")
    letter_status: str = Field(default=LetterStatus.PENDING.value, alias="letterStatus")
    letter_medium: str = Field(default="", alias="letterMedium")
    letter_subject: str = Field(default="", alias="letterSubject")
    office_type: Union[OfficeType, Literal[""]] = Field(default="", alias="officeType")
    office_name: Union[OfficeName, Literal[""]] = Field(default="", alias="officeName")
    outward_letter_number: str = Field(default="", alias="outwardLetterNumber")
    number_of_copies: str = Field(default="", alias="numberOfCopies")

    class Config:
        populate_by_name = True
        use_enum_values = True

    def to_dict(self) -> dict[str, str]:
        """Return the record keyed by its camelCase field names."""
        return self.model_dump(by_alias=True)
