"""
tests/extractor/test_docx_reader.py

Tests for DocxReader, using documents built in memory with python-docx.
"""

import io

import docx
import pytest

from app.core.exceptions import ExtractionError
from app.extractor.docx_reader import DocxReader


class TestDocxReader:

    def test_paragraph_text_is_returned_in_order(self, make_docx) -> None:
        data = make_docx(["First paragraph.", "Second paragraph."])

        text = DocxReader().read(data, filename="doc.docx")

        assert text.splitlines() == ["First paragraph.", "Second paragraph."]

    def test_table_cells_are_included(self, make_docx) -> None:
        """Raw-text extraction must not drop content that lives in tables."""
        data = make_docx(["Intro."], table=[["Name", "Role"], ["Ada", "Engineer"]])

        text = DocxReader().read(data, filename="table.docx")

        for value in ("Intro.", "Name", "Role", "Ada", "Engineer"):
            assert value in text

    def test_merged_cells_are_read_once(self) -> None:
        document = docx.Document()
        table = document.add_table(rows=3, cols=3)
        table.cell(0, 0).merge(table.cell(0, 2)).text = "Merged heading"
        table.cell(1, 0).merge(table.cell(2, 0)).text = "Tall cell"
        for r in (1, 2):
            for c in (1, 2):
                table.cell(r, c).text = f"r{r}c{c}"
        buf = io.BytesIO()
        document.save(buf)

        lines = DocxReader().read(buf.getvalue(), filename="merged.docx").splitlines()

        assert lines.count("Merged heading") == 1
        assert lines.count("Tall cell") == 1
        assert [line for line in lines if line.startswith("r")] == [
            "r1c1", "r1c2", "r2c1", "r2c2",
        ]

    def test_document_without_text_returns_blank(self, make_docx) -> None:
        """An empty DOCX parses fine; the caller decides it is unusable."""
        data = make_docx([])

        assert DocxReader().read(data, filename="blank.docx").strip() == ""

    def test_invalid_bytes_raises_extraction_error(self) -> None:
        with pytest.raises(ExtractionError, match="could not be opened"):
            DocxReader().read(b"not a zip archive", filename="bad.docx")

    def test_pdf_bytes_are_not_a_docx(self, make_pdf) -> None:
        """A PDF mislabelled as DOCX must fail cleanly."""
        with pytest.raises(ExtractionError):
            DocxReader().read(make_pdf(["Hello"]), filename="wrong.docx")

    def test_empty_bytes_raises_extraction_error(self) -> None:
        with pytest.raises(ExtractionError, match="empty"):
            DocxReader().read(b"", filename="empty.docx")
