"""
tests/extractor/test_pdf_reader.py

Tests for PDFReader.

Uses minimal, programmatically-generated PDFs (see ``make_pdf`` in
conftest) so the suite has no external file dependencies.
"""

import fitz  # PyMuPDF
import pytest

from app.core.exceptions import ExtractionError
from app.extractor.pdf_reader import PDFReader


class TestPDFReader:

    def test_read_returns_text_of_all_pages(self, make_pdf) -> None:
        """Text from every page must appear, in page order."""
        pdf_bytes = make_pdf(["Hello page one.", "Hello page two."])

        text = PDFReader().read(pdf_bytes, filename="test.pdf")

        assert "Hello page one." in text
        assert "Hello page two." in text
        assert text.index("page one") < text.index("page two")

    def test_blank_pages_contribute_nothing(self, make_pdf) -> None:
        """Image-only / blank pages are skipped without breaking the others."""
        pdf_bytes = make_pdf(["First page text.", "", "Third page text."])

        text = PDFReader().read(pdf_bytes, filename="sparse.pdf")

        lines = [line for line in text.splitlines() if line.strip()]
        assert lines == ["First page text.", "Third page text."]

    def test_pdf_without_text_layer_returns_empty_string(self, make_pdf) -> None:
        """A scanned PDF is not a parse error — it simply has no text."""
        pdf_bytes = make_pdf(["", ""])

        assert PDFReader().read(pdf_bytes, filename="scan.pdf") == ""

    def test_invalid_bytes_raises_extraction_error(self) -> None:
        """Garbage bytes must raise ExtractionError, not a raw fitz error."""
        with pytest.raises(ExtractionError, match="could not be opened"):
            PDFReader().read(b"this is not a pdf", filename="bad.pdf")

    def test_empty_bytes_raises_extraction_error(self) -> None:
        with pytest.raises(ExtractionError, match="empty"):
            PDFReader().read(b"", filename="empty.pdf")

    def test_encrypted_pdf_raises_extraction_error(self) -> None:
        """Password-protected PDFs cannot be read without the password."""
        doc = fitz.open()
        doc.new_page().insert_text((72, 72), "Secret text.")
        pdf_bytes = doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="user",
        )
        doc.close()

        with pytest.raises(ExtractionError, match="password"):
            PDFReader().read(pdf_bytes, filename="locked.pdf")
