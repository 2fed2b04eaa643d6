"""
app/extractor/docx_reader.py

Extracts raw text from DOCX documents using python-docx.

Paragraph text comes first, followed by the text of every table cell,
one line each. Formatting, headers and footers are ignored.
"""

from __future__ import annotations

import io
from typing import List

from docx import Document

from app.core.exceptions import ExtractionError
from app.core.logger import get_logger
from app.extractor.base import TextReader

logger = get_logger(__name__)


class DocxReader(TextReader):
    """Reads a .docx file from an in-memory buffer."""

    def read(self, file_bytes: bytes, filename: str = "unknown.docx") -> str:
        if not file_bytes:
            raise ExtractionError(f"'{filename}' is empty — nothing to read.")

        try:
            document = Document(io.BytesIO(file_bytes))
        except Exception as exc:
            raise ExtractionError(
                f"'{filename}' could not be opened as a DOCX document: {exc}"
            ) from exc

        lines: List[str] = [p.text for p in document.paragraphs]
        for table in document.tables:
            # row.cells repeats a merged cell once per grid column it spans.
            seen = set()
            for row in table.rows:
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    if cell.text.strip():
                        lines.append(cell.text)

        text = "\n".join(lines)
        logger.info(
            "'%s' — extracted %d character(s) from %d paragraph(s), %d table(s).",
            filename,
            len(text),
            len(document.paragraphs),
            len(document.tables),
        )
        return text
