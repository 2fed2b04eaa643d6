"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Request input (HTTP 4xx) ───────────────────────────────────────────────────

class ClientInputError(AppBaseException):
    """The request itself was unacceptable. Maps to HTTP 400."""

    status_code: int = 400


class NoFileUploadedError(ClientInputError):
    """Raised when the multipart body does not carry exactly one file."""


class UnsupportedFileTypeError(ClientInputError):
    """Raised when the declared MIME type is neither PDF nor DOCX."""


class EmptyDocumentError(ClientInputError):
    """Raised when a document parses but yields no text."""


class FileTooLargeError(ClientInputError):
    """Raised when an upload exceeds the server-side size cap."""

    status_code: int = 413


class ExtractionError(AppBaseException):
    """Raised when a parser fails on a corrupt, encrypted or malformed document."""


# ── Upstream / startup ─────────────────────────────────────────────────────────

class UpstreamError(AppBaseException):
    """Raised when the AI provider call fails or returns no usable text."""


class ConfigurationError(AppBaseException):
    """Raised when required configuration is missing or invalid."""


# ── Upload client ──────────────────────────────────────────────────────────────

class UploadInProgressError(AppBaseException):
    """Raised when submit() is called while another upload is outstanding."""
