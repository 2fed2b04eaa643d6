"""app/extractor/__init__.py — public API of the extractor package."""

from app.extractor.base import DocumentType, TextReader
from app.extractor.docx_reader import DocxReader
from app.extractor.pdf_reader import PDFReader
from app.extractor.text_extractor import TextExtractor

__all__ = [
    "DocumentType",
    "TextReader",
    "PDFReader",
    "DocxReader",
    "TextExtractor",
]
