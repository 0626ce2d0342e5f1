"""Data models for the letter intake pipeline.

Pydantic models for data flowing through extraction and storage:
- ExtractionInput: OCR text handed to the extractors
- StructuredRecord: the fields inferred from one letter
- FileRecord / ExtractData: an uploaded file with its cached extraction
"""

from .base import (
    BaseIRModel,
    ExtractionStatus,
    LetterStatus,
    OfficeName,
    OfficeType,
)
from .file import (
    ExtractData,
    FileRecord,
)
from .record import (
    ExtractionInput,
    StructuredRecord,
)

__all__ = [
    # Base types
    "BaseIRModel",
    "ExtractionStatus",
    "LetterStatus",
    "OfficeName",
    "OfficeType",
    # Extraction
    "ExtractionInput",
    "StructuredRecord",
    # Files
    "ExtractData",
    "FileRecord",
]
