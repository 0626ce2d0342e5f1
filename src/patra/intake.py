"""Letter intake - upload, OCR, extract, store.

Glues the OCR collaborator, the extraction engine and the file repository
together and assembles the response payloads handed to callers.
"""

import asyncio
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from patra.config import settings
from patra.errors import MissingOCRText
from patra.extraction import StructuredDataExtractor
from patra.models import ExtractData, ExtractionInput, ExtractionStatus, FileRecord, StructuredRecord
from patra.ocr import TesseractOCR
from patra.storage import FileRepository

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
}


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def build_extraction_response(
    file: FileRecord,
    record: StructuredRecord,
    message: str = "File uploaded and data extracted successfully",
) -> dict[str, Any]:
    """
    Assemble the upload response.

    The extracted fields appear twice: nested under `file.extractedData`
    for older consumers and at top level under `extractedData`.
    """
    extract_data = file.extract_data or ExtractData()
    extracted = record.to_dict()
    return {
        "success": True,
        "message": message,
        "file": {
            "id": str(file.id),
            "name": file.original_name,
            "url": file.file_url,
            "text": extract_data.text,
            "pageCount": extract_data.page_count,
            "processedAt": _isoformat(extract_data.processed_at),
            "extractedData": extracted,
        },
        "extractedData": extracted,
        "extractedAt": _isoformat(extract_data.extracted_at or datetime.utcnow()),
    }


def build_extracted_data_response(file: FileRecord, record: StructuredRecord) -> dict[str, Any]:
    """Assemble the response for a stored file's extracted data."""
    extract_data = file.extract_data or ExtractData()
    now = datetime.utcnow()
    return {
        "success": True,
        "data": record.to_dict(),
        "extractedAt": _isoformat(extract_data.extracted_at or now),
        "processedAt": _isoformat(extract_data.processed_at or now),
        "fileInfo": {
            "id": str(file.id),
            "originalName": file.original_name,
            "pageCount": extract_data.page_count,
            "model": extract_data.model,
        },
    }


class LetterIntakeService:
    """Uploads letters and serves their extracted data.

    Each call works inside the caller's session; committing is left to the
    caller (see `patra.storage.get_session`).
    """

    def __init__(
        self,
        session: AsyncSession,
        ocr: Optional[TesseractOCR] = None,
        extractor: Optional[StructuredDataExtractor] = None,
        upload_dir: Optional[Path] = None,
    ):
        self.repository = FileRepository(session)
        self.ocr = ocr or TesseractOCR()
        self.extractor = extractor or StructuredDataExtractor()
        self.upload_dir = Path(upload_dir or settings.upload_dir)

    def _store_upload(self, source: Path, file_id: UUID) -> Path:
        """Copy the uploaded file under the upload directory."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        target = self.upload_dir / f"{file_id}{source.suffix.lower()}"
        shutil.copyfile(source, target)
        return target

    def _extract_data(self, ocr_output: ExtractionInput, record: StructuredRecord) -> ExtractData:
        # A blank scan is kept, but nothing can be re-extracted from it later
        status = ExtractionStatus.SUCCESS if ocr_output.text.strip() else ExtractionStatus.FAILED
        return ExtractData(
            status=status,
            text=ocr_output.text,
            page_count=ocr_output.page_count,
            model=ocr_output.model,
            processed_at=ocr_output.processed_at,
            structured_data=record,
            extracted_at=datetime.utcnow(),
        )

    async def upload_and_extract(self, path: Path) -> dict[str, Any]:
        """
        OCR a scanned letter, extract its fields and store both.

        Args:
            path: Path to the uploaded PDF or image

        Returns:
            Response dict, see `build_extraction_response`

        Raises:
            OCRError: If the document cannot be read
        """
        path = Path(path)
        # OCR is blocking; keep it off the event loop
        ocr_output = await asyncio.to_thread(self.ocr.process, path)
        record = self.extractor.extract(ocr_output)

        file_id = uuid4()
        stored = self._store_upload(path, file_id)
        try:
            file = FileRecord(
                id=file_id,
                original_name=path.name,
                file_name=stored.name,
                file_path=str(stored),
                file_url=stored.resolve().as_uri(),
                file_size=stored.stat().st_size,
                mime_type=MIME_TYPES.get(path.suffix.lower(), "application/octet-stream"),
                extract_data=self._extract_data(ocr_output, record),
            )
            await self.repository.create(file)
        except Exception:
            stored.unlink(missing_ok=True)
            raise

        logger.info("Stored %s as %s", path.name, file.id)
        return build_extraction_response(file, record)

    async def get_extracted_data(self, file_id: UUID) -> dict[str, Any]:
        """
        Return the structured record of a stored file.

        The cached record is served when present; otherwise it is extracted
        from the stored OCR text and cached.

        Raises:
            FileRecordNotFound: If no file has this ID
            MissingOCRText: If the file has no stored OCR text
        """
        file = await self.repository.get_record(file_id)
        if file.has_extracted_data:
            logger.debug("Using cached structured data for %s", file_id)
            return build_extracted_data_response(file, file.extract_data.structured_data)
        file = await self._extract_stored(file)
        return build_extracted_data_response(file, file.extract_data.structured_data)

    async def reextract(self, file_id: UUID) -> dict[str, Any]:
        """Regenerate the structured record from the stored OCR text."""
        file = await self.repository.get_record(file_id)
        file = await self._extract_stored(file)
        return build_extraction_response(
            file,
            file.extract_data.structured_data,
            message="Structured data re-extracted from stored text",
        )

    async def delete(self, file_id: UUID) -> None:
        """
        Delete a stored file record and its uploaded copy.

        Raises:
            FileRecordNotFound: If no file has this ID
        """
        file = await self.repository.get_record(file_id)
        await self.repository.delete(file_id)
        stored = Path(file.file_path)
        if stored.is_file():
            stored.unlink()
        else:
            logger.warning("Stored copy of %s already missing: %s", file_id, stored)
        logger.info("Deleted %s", file_id)

    async def _extract_stored(self, file: FileRecord) -> FileRecord:
        if file.extract_data is None or not file.extract_data.text:
            raise MissingOCRText(file.id)

        record = self.extractor.extract(file.extract_data.text)
        extract_data = file.extract_data.model_copy(
            update={"structured_data": record, "extracted_at": datetime.utcnow()}
        )
        await self.repository.save_extract_data(file.id, extract_data)
        logger.info("Re-extracted structured data for %s", file.id)
        return file.model_copy(update={"extract_data": extract_data})
