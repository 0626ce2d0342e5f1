"""OCR collaborator - turn a scanned letter into text.

Renders PDF pages with PyMuPDF (fitz) and reads them with Tesseract using the
Marathi + English language packs. Scanned images are read directly.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

import fitz  # PyMuPDF
import pytesseract
from PIL import Image

from patra.config import settings
from patra.errors import OCRError
from patra.models import ExtractionInput

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp"}
PAGE_SEPARATOR = "\n\n"


class TesseractOCR:
    """OCR engine using Tesseract.

    Produces one `ExtractionInput` per document: page texts joined with blank
    lines, the page count and the engine name.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        psm: Optional[int] = None,
        oem: int = 3,
        dpi: Optional[int] = None,
    ):
        """Initialize Tesseract OCR.

        Args:
            language: Tesseract language code(s) (default from settings, 'mar+eng').
            psm: Page segmentation mode (default from settings).
            oem: OCR Engine mode (3 = default, based on what's available).
            dpi: PDF rendering DPI (default from settings).
        """
        self.language = language or settings.ocr_language
        self.psm = psm or settings.tesseract_psm
        self.oem = oem
        self.dpi = dpi or settings.render_dpi

    @property
    def model(self) -> str:
        return f"tesseract:{self.language}"

    def _build_config(self) -> str:
        """Build Tesseract configuration string."""
        return f"--psm {self.psm} --oem {self.oem}"

    def _render_pages(self, pdf_path: Path) -> Iterator[Image.Image]:
        """Render each PDF page to a PIL image at the configured DPI."""
        # Calculate zoom factor for target DPI (PDF base is 72 DPI)
        zoom = self.dpi / 72.0
        matrix = fitz.Matrix(zoom, zoom)

        pdf_doc = fitz.open(pdf_path)
        try:
            for page in pdf_doc:
                pixmap = page.get_pixmap(matrix=matrix, alpha=False)
                yield Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
        finally:
            pdf_doc.close()

    def extract_text(self, image: Image.Image) -> str:
        """Extract plain text from one page image."""
        text = pytesseract.image_to_string(
            image,
            lang=self.language,
            config=self._build_config(),
        )
        return text.strip()

    def process(self, path: Path) -> ExtractionInput:
        """
        OCR a PDF or image file.

        Args:
            path: Path to the scanned letter

        Returns:
            ExtractionInput with the full text and page count

        Raises:
            OCRError: If the file is missing or cannot be rendered or read
        """
        path = Path(path)
        if not path.is_file():
            raise OCRError(f"Document not found: {path}")

        logger.info("Running OCR on %s (lang=%s)", path.name, self.language)
        try:
            if path.suffix.lower() in IMAGE_SUFFIXES:
                with Image.open(path) as image:
                    pages = [self.extract_text(image)]
            else:
                pages = [self.extract_text(image) for image in self._render_pages(path)]
        except (pytesseract.TesseractError, RuntimeError, OSError) as e:
            logger.error("OCR failed for %s: %s", path.name, e)
            raise OCRError(f"Failed to process {path.name}: {e}") from e

        logger.info("OCR finished for %s: %d page(s)", path.name, len(pages))
        return ExtractionInput(
            text=PAGE_SEPARATOR.join(pages).strip(),
            page_count=len(pages),
            model=self.model,
            processed_at=datetime.utcnow(),
        )
