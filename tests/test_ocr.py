"""Tests for the Tesseract OCR collaborator."""

from unittest.mock import MagicMock, patch

import pytest
import pytesseract

from patra.errors import OCRError
from patra.ocr import TesseractOCR


class TestTesseractOCR:
    """Tests for OCR processing with PyMuPDF and pytesseract mocked."""

    @pytest.fixture
    def ocr(self):
        return TesseractOCR(language="mar+eng", psm=6, dpi=200)

    @pytest.fixture
    def pdf_file(self, tmp_path):
        path = tmp_path / "letter.pdf"
        path.write_bytes(b"%PDF-1.4 placeholder")
        return path

    @staticmethod
    def mock_pdf(page_count):
        pixmap = MagicMock(width=2, height=1, samples=b"\x00" * 6)
        page = MagicMock()
        page.get_pixmap.return_value = pixmap
        pdf_doc = MagicMock()
        pdf_doc.__iter__.return_value = iter([page] * page_count)
        return pdf_doc

    def test_initialization(self, ocr):
        assert ocr.language == "mar+eng"
        assert ocr.dpi == 200
        assert ocr._build_config() == "--psm 6 --oem 3"
        assert ocr.model == "tesseract:mar+eng"

    def test_defaults_from_settings(self):
        ocr = TesseractOCR()
        assert ocr.language == "mar+eng"
        assert ocr.dpi == 300

    @patch("patra.ocr.pytesseract.image_to_string")
    @patch("patra.ocr.fitz.open")
    def test_process_pdf(self, mock_open, mock_ocr, ocr, pdf_file):
        """Pages are OCR'd in order and joined with blank lines."""
        mock_open.return_value = self.mock_pdf(2)
        mock_ocr.side_effect = ["पहिले पान\n", "दुसरे पान"]

        result = ocr.process(pdf_file)

        assert result.text == "पहिले पान\n\nदुसरे पान"
        assert result.page_count == 2
        assert result.model == "tesseract:mar+eng"
        assert mock_ocr.call_args.kwargs["lang"] == "mar+eng"
        mock_open.return_value.close.assert_called_once()

    @patch("patra.ocr.pytesseract.image_to_string")
    def test_process_image(self, mock_ocr, ocr, tmp_path):
        from PIL import Image

        image_path = tmp_path / "scan.png"
        Image.new("RGB", (4, 4), "white").save(image_path)
        mock_ocr.return_value = "मो. 9876543210"

        result = ocr.process(image_path)

        assert result.text == "मो. 9876543210"
        assert result.page_count == 1

    def test_missing_file(self, ocr, tmp_path):
        with pytest.raises(OCRError, match="Document not found"):
            ocr.process(tmp_path / "missing.pdf")

    @patch("patra.ocr.pytesseract.image_to_string")
    @patch("patra.ocr.fitz.open")
    def test_tesseract_failure_wrapped(self, mock_open, mock_ocr, ocr, pdf_file):
        mock_open.return_value = self.mock_pdf(1)
        mock_ocr.side_effect = pytesseract.TesseractError(1, "mar.traineddata missing")

        with pytest.raises(OCRError, match="letter.pdf"):
            ocr.process(pdf_file)

    @patch("patra.ocr.fitz.open")
    def test_render_failure_wrapped(self, mock_open, ocr, pdf_file):
        mock_open.side_effect = RuntimeError("cannot open broken document")

        with pytest.raises(OCRError):
            ocr.process(pdf_file)
