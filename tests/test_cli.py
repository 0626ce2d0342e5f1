"""Tests for the command line interface."""

import json
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from rich.console import Console
from typer.testing import CliRunner

from patra.cli import app
from patra.errors import FileRecordNotFound, OCRError
from patra.models import ExtractionInput, FileRecord, StructuredRecord

runner = CliRunner()

# Keep log records off the captured output so --json output parses cleanly
QUIET = ["--log-level", "WARNING"]


@asynccontextmanager
async def fake_session():
    yield MagicMock()


@pytest.fixture
def letter_file(tmp_path, complaint_letter):
    path = tmp_path / "letter.txt"
    path.write_text(complaint_letter, encoding="utf-8")
    return path


class TestExtractCommand:
    """Tests for `patra extract`."""

    def test_json_output(self, letter_file):
        result = runner.invoke(app, QUIET + ["extract", str(letter_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["letterSubject"] == "रस्ता दुरुस्ती बाबत तक्रार"
        assert data["mobileNumber"] == "9876543210"
        assert data["letterStatus"] == "pending"

    def test_table_output(self, letter_file):
        result = runner.invoke(app, QUIET + ["extract", str(letter_file)])

        assert result.exit_code == 0
        assert "Extracted data" in result.stdout
        assert "mobileNumber" in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, QUIET + ["extract", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Text file not found" in result.stdout


class TestProcessCommand:
    """Tests for `patra process` with OCR mocked."""

    @patch("patra.cli.TesseractOCR")
    def test_process(self, mock_ocr_class, tmp_path, complaint_letter):
        mock_ocr_class.return_value.process.return_value = ExtractionInput(
            text=complaint_letter, page_count=2, model="tesseract:mar+eng"
        )
        pdf = tmp_path / "letter.pdf"

        result = runner.invoke(app, QUIET + ["process", str(pdf), "--json"])

        assert result.exit_code == 0
        assert "2 page(s) read with tesseract:mar+eng" in result.stdout
        assert "रस्ता दुरुस्ती बाबत तक्रार" in result.stdout
        mock_ocr_class.return_value.process.assert_called_once_with(pdf)

    @patch("patra.cli.TesseractOCR")
    def test_ocr_error(self, mock_ocr_class, tmp_path):
        mock_ocr_class.return_value.process.side_effect = OCRError("Document not found: x.pdf")

        result = runner.invoke(app, QUIET + ["process", str(tmp_path / "x.pdf")])

        assert result.exit_code == 1
        assert "Document not found" in result.stdout

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.LetterIntakeService")
    def test_process_store(self, mock_service_class, mock_close_db, tmp_path):
        file_id = str(uuid4())
        extracted = StructuredRecord(letter_subject="रस्ता दुरुस्ती").to_dict()
        mock_service_class.return_value.upload_and_extract = AsyncMock(
            return_value={"file": {"id": file_id}, "extractedData": extracted}
        )

        result = runner.invoke(app, QUIET + ["process", str(tmp_path / "a.pdf"), "--store", "--json"])

        assert result.exit_code == 0
        assert f"Stored as {file_id}" in result.stdout
        mock_close_db.assert_awaited_once()


class TestStorageCommands:
    """Tests for the commands backed by stored files."""

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.LetterIntakeService")
    def test_show_json(self, mock_service_class, mock_close_db):
        response = {
            "success": True,
            "data": StructuredRecord(letter_type="तक्रारी अर्ज").to_dict(),
            "fileInfo": {"id": "x", "originalName": "a.pdf", "pageCount": 1, "model": "m"},
        }
        mock_service_class.return_value.get_extracted_data = AsyncMock(return_value=response)

        result = runner.invoke(app, QUIET + ["show", str(uuid4()), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["letterType"] == "तक्रारी अर्ज"

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.LetterIntakeService")
    def test_delete_missing(self, mock_service_class, mock_close_db):
        file_id = uuid4()
        mock_service_class.return_value.delete = AsyncMock(side_effect=FileRecordNotFound(file_id))

        result = runner.invoke(app, QUIET + ["delete", str(file_id)])

        assert result.exit_code == 1
        assert "File not found" in result.stdout
        mock_close_db.assert_awaited_once()

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.LetterIntakeService")
    def test_delete(self, mock_service_class, mock_close_db):
        mock_service_class.return_value.delete = AsyncMock()
        file_id = uuid4()

        result = runner.invoke(app, QUIET + ["delete", str(file_id)])

        assert result.exit_code == 0
        assert f"Deleted {file_id}" in result.stdout
        mock_service_class.return_value.delete.assert_awaited_once_with(file_id)

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.LetterIntakeService")
    def test_reextract(self, mock_service_class, mock_close_db):
        mock_service_class.return_value.reextract = AsyncMock(
            return_value={
                "message": "Structured data re-extracted from stored text",
                "extractedData": StructuredRecord(letter_type="तक्रारी अर्ज").to_dict(),
            }
        )
        file_id = uuid4()

        result = runner.invoke(app, QUIET + ["reextract", str(file_id)])

        assert result.exit_code == 0
        assert "Structured data re-extracted from stored text" in result.stdout
        mock_service_class.return_value.reextract.assert_awaited_once_with(file_id)

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.get_session", fake_session)
    @patch("patra.cli.console", Console(width=200))
    @patch("patra.cli.FileRepository")
    def test_list(self, mock_repo_class, mock_close_db):
        stored = FileRecord(
            original_name="a.pdf",
            file_name="a.pdf",
            file_path="/tmp/a.pdf",
            file_url="file:///tmp/a.pdf",
            file_size=2048,
        )
        mock_repo_class.return_value.list_recent = AsyncMock(return_value=["row"])
        mock_repo_class.to_model.return_value = stored

        result = runner.invoke(app, QUIET + ["list", "--limit", "5"])

        assert result.exit_code == 0
        assert "a.pdf" in result.stdout
        assert "2048" in result.stdout
        mock_repo_class.return_value.list_recent.assert_awaited_once_with(5)
        mock_repo_class.to_model.assert_called_once_with("row")

    @patch("patra.cli.close_db", new_callable=AsyncMock)
    @patch("patra.cli.init_db", new_callable=AsyncMock)
    def test_init_db(self, mock_init_db, mock_close_db):
        result = runner.invoke(app, QUIET + ["init-db"])

        assert result.exit_code == 0
        assert "Database initialized" in result.stdout
        mock_init_db.assert_awaited_once()
        mock_close_db.assert_awaited_once()
