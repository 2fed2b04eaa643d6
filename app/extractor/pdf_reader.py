"""
app/extractor/pdf_reader.py

Extracts plain text from PDF documents using PyMuPDF (fitz).

Responsibility: given raw PDF bytes, open the document in memory and
return the text of all pages joined by newlines. Image-only pages
contribute nothing, so a scanned PDF yields an empty string.
"""

from __future__ import annotations

from typing import List

import fitz  # PyMuPDF

from app.core.exceptions import ExtractionError
from app.core.logger import get_logger
from app.extractor.base import TextReader

logger = get_logger(__name__)


class PDFReader(TextReader):
    """
    Extracts plain text from a PDF given its raw bytes.

    Uses PyMuPDF (fitz) to open the document entirely in memory —
    no temporary files are created.
    """

    def read(self, file_bytes: bytes, filename: str = "unknown.pdf") -> str:
        if not file_bytes:
            raise ExtractionError(f"'{filename}' is empty — nothing to read.")

        try:
            # stream= opens from bytes without touching the filesystem.
            doc = fitz.open(stream=file_bytes, filetype="pdf")
        except Exception as exc:
            raise ExtractionError(
                f"'{filename}' could not be opened as a PDF: {exc}"
            ) from exc

        try:
            if doc.needs_pass:
                raise ExtractionError(f"'{filename}' is password-protected.")

            total_pages = len(doc)
            parts: List[str] = []
            for page in doc:
                text = page.get_text("text")
                if text.strip():                      # skip blank/image-only pages
                    parts.append(text)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(
                f"Text extraction failed for '{filename}': {exc}"
            ) from exc
        finally:
            doc.close()

        logger.info(
            "'%s' — extracted text from %d / %d page(s).",
            filename,
            len(parts),
            total_pages,
        )
        return "\n".join(parts)
