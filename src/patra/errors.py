"""Exceptions raised by the collaborators around the extraction core.

The extractors themselves never raise for string input.
"""


class PatraError(Exception):
    """Base class for intake pipeline errors."""


class OCRError(PatraError):
    """The OCR collaborator could not turn a document into text."""


class FileRecordNotFound(PatraError):
    """No file record exists for the requested id."""

    def __init__(self, file_id):
        super().__init__(f"File not found: {file_id}")
        self.file_id = file_id


class MissingOCRText(PatraError):
    """A file record has no stored OCR text to extract from."""

    def __init__(self, file_id):
        super().__init__(f"No extracted text available for file {file_id}")
        self.file_id = file_id
