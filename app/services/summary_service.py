"""
app/services/summary_service.py

Orchestrates the summarization pipeline for one upload:

    bytes + MIME type
      └─ DocumentType.from_content_type()   closed {PDF, DOCX} dispatch
           └─ TextExtractor.extract()        bytes → text
                └─ emptiness gate
                     └─ build_prompt()        template + truncated text
                          └─ Summarizer.summarize() → SummaryResponse

Both dependencies are constructor-injected so tests can swap them out
with mocks; ``create_app`` wires in the production implementations.
"""

from __future__ import annotations

from starlette.concurrency import run_in_threadpool

from app.core.config import Settings
from app.core.exceptions import (
    EmptyDocumentError,
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from app.core.logger import get_logger
from app.extractor.base import DocumentType
from app.extractor.text_extractor import TextExtractor
from app.models.summary_models import SummaryResponse
from app.summarizer.base import Summarizer

logger = get_logger(__name__)


def build_prompt(text: str, template: str, max_chars: int) -> str:
    """
    Interpolate the first ``max_chars`` characters of ``text`` into ``template``.

    The template must contain a single ``{text}`` placeholder.
    """
    return template.replace("{text}", text[:max_chars])


class SummaryService:
    """
    Runs one upload through extraction, validation and summarization.

    Every gate raises a typed exception; the controller maps them to HTTP
    responses. The service keeps no per-request state.
    """

    def __init__(
        self,
        settings: Settings,
        summarizer: Summarizer,
        extractor: TextExtractor | None = None,
    ) -> None:
        self._summarizer: Summarizer = summarizer
        self._extractor: TextExtractor = extractor or TextExtractor()
        self._template: str = settings.prompt_template
        self._max_prompt_chars: int = settings.max_prompt_chars
        self._max_upload_bytes: int = settings.max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    # ── Public API ─────────────────────────────────────────────────────────────

    async def summarize_upload(
        self,
        file_bytes: bytes,
        content_type: str | None,
        filename: str,
    ) -> SummaryResponse:
        """
        Summarize a single uploaded document.

        Args:
            file_bytes   : Raw bytes of the upload, already read into memory.
            content_type : MIME type declared by the client.
            filename     : Original filename — used for logging only.

        Returns:
            SummaryResponse carrying the provider's text.

        Raises:
            FileTooLargeError        : Upload exceeds ``max_upload_bytes``.
            UnsupportedFileTypeError : MIME type is neither PDF nor DOCX.
            ExtractionError          : The parser rejected the document.
            EmptyDocumentError       : No text after trimming whitespace.
            UpstreamError            : The AI provider call failed.
        """
        # ── 1. Size cap ────────────────────────────────────────────────────────
        if len(file_bytes) > self._max_upload_bytes:
            raise FileTooLargeError(
                f"'{filename}' is {len(file_bytes)} bytes; "
                f"the limit is {self._max_upload_bytes}."
            )

        # ── 2. Type dispatch ───────────────────────────────────────────────────
        doc_type = DocumentType.from_content_type(content_type)
        if doc_type is None:
            raise UnsupportedFileTypeError(
                f"'{filename}' has unsupported content type '{content_type}'."
            )

        # ── 3. Extract (CPU-bound parser, kept off the event loop) ─────────────
        text = await self.extract_text(doc_type, file_bytes, filename)

        # ── 4. Emptiness gate ──────────────────────────────────────────────────
        text = text.strip()
        if not text:
            raise EmptyDocumentError(
                f"'{filename}' contains no extractable text "
                "(it may be image-only or empty)."
            )

        # ── 5. Prompt ──────────────────────────────────────────────────────────
        prompt = build_prompt(text, self._template, self._max_prompt_chars)
        if len(text) > self._max_prompt_chars:
            logger.info(
                "'%s' — text truncated from %d to %d character(s).",
                filename,
                len(text),
                self._max_prompt_chars,
            )
        logger.debug("Prompt length sent to provider: %d", len(prompt))

        # ── 6. Summarize ───────────────────────────────────────────────────────
        summary = await self._summarizer.summarize(prompt)

        logger.info(
            "'%s' — summary of %d character(s) produced.", filename, len(summary)
        )
        return SummaryResponse(summary=summary)

    async def extract_text(
        self, doc_type: DocumentType, file_bytes: bytes, filename: str
    ) -> str:
        """Run the matching reader in the threadpool and normalise its failures."""
        try:
            text = await run_in_threadpool(
                self._extractor.extract, doc_type, file_bytes, filename
            )
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Unexpected parser failure for '{filename}': {exc}") from exc

        logger.info(
            "'%s' — %s parsed, text length: %d", filename, doc_type.name, len(text)
        )
        return text
