"""Base models and common types for the letter intake pipeline."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class OfficeType(str, Enum):
    """Level of the police office a letter is addressed to."""

    IGP = "IGP"
    SP = "SP"
    SDPO = "SDPO"
    POLICE_STATION = "Police Station"


class OfficeName(str, Enum):
    """District offices served by the inward section.

    Closed set: the intake desk only operates for these five districts, so
    no other office name is ever produced by extraction.
    """

    AHILYANAGAR = "अहिल्यानगर"
    PUNE_RURAL = "पुणे ग्रामीण"
    JALGAON = "जळगाव"
    NANDURBAR = "नंदुरबार"
    NASHIK_RURAL = "नाशिक ग्रामीण"


class LetterStatus(str, Enum):
    """Workflow status of a letter. Extraction only ever produces PENDING."""

    PENDING = "pending"


class ExtractionStatus(str, Enum):
    """Outcome of the OCR + extraction step stored on a file record."""

    SUCCESS = "success"
    FAILED = "failed"


class BaseIRModel(BaseModel):
    """Base class for persisted models with common fields."""

    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        from_attributes = True  # For SQLAlchemy compatibility
