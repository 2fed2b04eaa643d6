"""
app/extractor/base.py

Abstract interface for the text-extraction layer, plus the closed set of
document types the gateway understands.

Design goals:
  - Services depend only on this interface, never on fitz or python-docx.
  - The MIME string is resolved to a DocumentType once, at the start of the
    pipeline; everything downstream switches on the enum.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from app.core.constants import DOCX_CONTENT_TYPE, PDF_CONTENT_TYPE


class DocumentType(str, Enum):
    """The two document formats accepted for summarization."""

    PDF = PDF_CONTENT_TYPE
    DOCX = DOCX_CONTENT_TYPE

    @classmethod
    def from_content_type(cls, content_type: Optional[str]) -> Optional["DocumentType"]:
        """
        Resolve a declared MIME type to a DocumentType.

        Parameters such as ``; charset=...`` are ignored. Returns ``None`` for
        anything that is not PDF or DOCX — there is no fallback format.
        """
        if not content_type:
            return None
        base = content_type.split(";", 1)[0].strip().lower()
        for member in cls:
            if member.value == base:
                return member
        return None


class TextReader(ABC):
    """Contract every format-specific reader must fulfil."""

    @abstractmethod
    def read(self, file_bytes: bytes, filename: str = "unknown") -> str:
        """
        Extract the plain text of a document held in memory.

        Args:
            file_bytes : Raw bytes of the document.
            filename   : Original filename — used only for logging and error messages.

        Returns:
            The document text. May be empty or whitespace-only; deciding
            whether that is acceptable is the caller's job.

        Raises:
            ExtractionError: If the bytes cannot be parsed.
        """
