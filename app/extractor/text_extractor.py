"""
app/extractor/text_extractor.py

Routes document bytes to the reader that matches their DocumentType.
"""

from __future__ import annotations

from typing import Dict

from app.core.logger import get_logger
from app.extractor.base import DocumentType, TextReader
from app.extractor.docx_reader import DocxReader
from app.extractor.pdf_reader import PDFReader

logger = get_logger(__name__)


class TextExtractor:
    """
    Dispatches to one reader per DocumentType.

    Readers are constructor-injected so tests can swap them out; by default
    PyMuPDF handles PDFs and python-docx handles DOCX.
    """

    def __init__(
        self,
        pdf_reader: TextReader | None = None,
        docx_reader: TextReader | None = None,
    ) -> None:
        self._readers: Dict[DocumentType, TextReader] = {
            DocumentType.PDF: pdf_reader or PDFReader(),
            DocumentType.DOCX: docx_reader or DocxReader(),
        }

    def extract(self, doc_type: DocumentType, file_bytes: bytes, filename: str) -> str:
        """
        Return the plain text of a document.

        Raises:
            ExtractionError: Propagated from the reader on parse failure.
        """
        reader = self._readers[doc_type]
        logger.debug("Extracting '%s' with %s.", filename, type(reader).__name__)
        return reader.read(file_bytes, filename)
