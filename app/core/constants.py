"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables (the prompt template default is
the one exception — Settings may override it).
"""

# ── Allowed file types ─────────────────────────────────────────────────────────

#: MIME type of PDF uploads.
PDF_CONTENT_TYPE: str = "application/pdf"

#: MIME type of OOXML word-processing documents (.docx).
DOCX_CONTENT_TYPE: str = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

#: File extensions accepted by the upload client, keyed to their MIME type.
EXTENSION_CONTENT_TYPES: dict[str, str] = {
    ".pdf": PDF_CONTENT_TYPE,
    ".docx": DOCX_CONTENT_TYPE,
}

# ── Upload form ────────────────────────────────────────────────────────────────

#: Multipart field that carries the document.
UPLOAD_FIELD_NAME: str = "file"

#: Size hint shown to users; the gateway enforces its own (configurable) cap.
ADVISORY_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

# ── Prompt ─────────────────────────────────────────────────────────────────────

DEFAULT_PROMPT_TEMPLATE: str = (
    "Summarize this document concisely in 3-5 bullet points:\n\n{text}"
)
