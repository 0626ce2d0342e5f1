"""File record models for uploaded letters."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseIRModel, ExtractionStatus
from .record import StructuredRecord


class ExtractData(BaseModel):
    """OCR text and extracted record cached on a file record.

    Stored as JSON with camelCase keys, the same shape letter-creation forms
    read back.
    """

    status: ExtractionStatus = Field(default=ExtractionStatus.SUCCESS)
    text: str = ""
    page_count: int = Field(default=0, ge=0, alias="pageCount")
    model: str = ""
    processed_at: Optional[datetime] = Field(default=None, alias="processedAt")
    structured_data: Optional[StructuredRecord] = Field(default=None, alias="structuredData")
    extracted_at: Optional[datetime] = Field(default=None, alias="extractedAt")

    class Config:
        populate_by_name = True
        use_enum_values = True

    @property
    def has_structured_data(self) -> bool:
        return self.structured_data is not None

    def to_json(self) -> dict:
        """Serialize for the JSON column."""
        return self.model_dump(mode="json", by_alias=True)


class FileRecord(BaseIRModel):
    """
    An uploaded letter file.

    The structured record lives nested inside `extract_data` rather than in
    columns of its own, keyed by the file identity.
    """

    original_name: str = Field(..., description="Filename as uploaded")
    file_name: str = Field(..., description="Storage key")
    file_path: str
    file_url: str
    file_size: int = Field(..., ge=0)
    mime_type: str = "application/pdf"
    uploaded_at: datetime = Field(default_factory=datetime.utcnow)
    extract_data: Optional[ExtractData] = None

    @property
    def has_extracted_data(self) -> bool:
        """Check if a structured record is cached for this file."""
        return self.extract_data is not None and self.extract_data.has_structured_data
