"""
app/client/upload_client.py

Client side of the summarizer: holds the selected file, posts it to the
gateway and turns the outcome into one user-facing message.

    select_file()  → validate MIME type, remember the file
    submit()       → POST <base>/upload  (multipart, field 'file')
    iter_summary() → summary characters one by one, for typewriter display

Only one upload may be in flight at a time. There is no retry and no
cancellation.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

import httpx

from app.core.constants import (
    ADVISORY_MAX_UPLOAD_BYTES,
    EXTENSION_CONTENT_TYPES,
    UPLOAD_FIELD_NAME,
)
from app.core.exceptions import ConfigurationError, UploadInProgressError
from app.core.logger import get_logger

logger = get_logger(__name__)

# ── User-facing messages ───────────────────────────────────────────────────────

MSG_UNSUPPORTED_SELECTION = "Unsupported file type. Please upload a PDF or DOCX file."
MSG_NOTHING_SELECTED = "Please select a file to summarize."
MSG_INPUT_FALLBACK = "Unsupported file type or empty content."
MSG_SERVER_ERROR = "Server error: Could not process the file. Please try again."
MSG_NO_RESPONSE = (
    "No response from server. Please check your network connection or server status."
)


# ── Data-transfer objects ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class FileCandidate:
    """
    A file the user picked, before it is accepted.

    Attributes:
        filename     : Display / upload name.
        content_type : Declared MIME type.
        content      : Raw bytes.
    """

    filename: str
    content_type: str
    content: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> "FileCandidate":
        """Read a file from disk, guessing its MIME type from the extension."""
        p = Path(path)
        content_type = EXTENSION_CONTENT_TYPES.get(
            p.suffix.lower(), "application/octet-stream"
        )
        return cls(filename=p.name, content_type=content_type, content=p.read_bytes())

    @property
    def size(self) -> int:
        return len(self.content)


class UploadOutcome(str, Enum):
    SUCCESS = "success"
    INPUT_ERROR = "input_error"        # HTTP 4xx
    SERVER_ERROR = "server_error"      # HTTP 5xx
    TRANSPORT_ERROR = "transport_error"  # no response at all
    NOT_SELECTED = "not_selected"      # nothing was sent


@dataclass(frozen=True)
class UploadResult:
    outcome: UploadOutcome
    summary: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is UploadOutcome.SUCCESS


# ── Client ─────────────────────────────────────────────────────────────────────

class UploadClient:
    """
    Stateful upload client mirroring a single-file upload form.

    State exposed to the caller: ``selected``, ``summary``, ``error`` and
    ``is_loading``.
    """

    def __init__(
        self,
        base_url: Optional[str],
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            base_url    : Gateway base URL, e.g. ``http://localhost:5000``.
                          ``None`` or blank is allowed here but makes submit() fail.
            http_client : Pre-built httpx client (tests pass one with a MockTransport).
        """
        self._base_url = (base_url or "").strip().rstrip("/")
        self._http = http_client
        self._lock = threading.Lock()

        self.selected: Optional[FileCandidate] = None
        self.summary: str = ""
        self.error: str = ""

    @property
    def is_loading(self) -> bool:
        return self._lock.locked()

    @property
    def can_submit(self) -> bool:
        return self.selected is not None and not self.is_loading

    # ── Selection ──────────────────────────────────────────────────────────────

    def select_file(self, candidate: FileCandidate) -> bool:
        """
        Accept ``candidate`` if it is a PDF or DOCX.

        On rejection the error message is set and any previous selection is
        cleared. Returns True when the file was accepted.
        """
        if candidate.content_type not in EXTENSION_CONTENT_TYPES.values():
            logger.info("Rejected '%s' (%s).", candidate.filename, candidate.content_type)
            self.selected = None
            self.error = MSG_UNSUPPORTED_SELECTION
            return False

        if candidate.size > ADVISORY_MAX_UPLOAD_BYTES:
            logger.warning(
                "'%s' is %d bytes — larger than the recommended %d.",
                candidate.filename,
                candidate.size,
                ADVISORY_MAX_UPLOAD_BYTES,
            )

        self.selected = candidate
        self.error = ""
        self.summary = ""
        return True

    def clear_selection(self) -> None:
        """Reset selection, summary and error. Safe to call repeatedly."""
        self.selected = None
        self.summary = ""
        self.error = ""

    # ── Upload ─────────────────────────────────────────────────────────────────

    def submit(self) -> UploadResult:
        """
        POST the selected file to ``<base_url>/upload``.

        Returns:
            UploadResult describing one of four mutually exclusive outcomes.

        Raises:
            ConfigurationError    : No base URL is configured.
            UploadInProgressError : Another submit() is still running.
        """
        if not self._base_url:
            raise ConfigurationError("API endpoint is not configured.")

        if self.selected is None:
            self.error = MSG_NOTHING_SELECTED
            return UploadResult(UploadOutcome.NOT_SELECTED, error=MSG_NOTHING_SELECTED)

        if not self._lock.acquire(blocking=False):
            raise UploadInProgressError("An upload is already in progress.")

        self.summary = ""
        self.error = ""
        try:
            result = self._post(self.selected)
        finally:
            self._lock.release()

        self.summary = result.summary
        self.error = result.error
        return result

    def iter_summary(self) -> Iterator[str]:
        """Yield the current summary one character at a time."""
        yield from self.summary

    # ── Internals ──────────────────────────────────────────────────────────────

    def _post(self, candidate: FileCandidate) -> UploadResult:
        url = f"{self._base_url}/upload"
        files = {
            UPLOAD_FIELD_NAME: (candidate.filename, candidate.content, candidate.content_type)
        }
        logger.info("Uploading '%s' to %s", candidate.filename, url)

        try:
            if self._http is not None:
                response = self._http.post(url, files=files)
            else:
                with httpx.Client(timeout=None) as http:
                    response = http.post(url, files=files)
        except httpx.TransportError as exc:
            logger.warning("No response from %s: %s", url, exc)
            return UploadResult(UploadOutcome.TRANSPORT_ERROR, error=MSG_NO_RESPONSE)

        return self._interpret(response)

    @staticmethod
    def _interpret(response: httpx.Response) -> UploadResult:
        status = response.status_code

        if response.is_success:
            try:
                summary = response.json()["summary"]
            except (ValueError, KeyError, TypeError) as exc:
                logger.error("Malformed success body from gateway: %s", exc)
                return UploadResult(UploadOutcome.SERVER_ERROR, error=MSG_SERVER_ERROR)
            return UploadResult(UploadOutcome.SUCCESS, summary=str(summary))

        if 400 <= status < 500:
            return UploadResult(
                UploadOutcome.INPUT_ERROR, error=_error_text(response) or MSG_INPUT_FALLBACK
            )

        logger.warning("Gateway answered %d.", status)
        return UploadResult(UploadOutcome.SERVER_ERROR, error=MSG_SERVER_ERROR)


def _error_text(response: httpx.Response) -> str:
    """The gateway's 'error' field, or the plain-text body, or ''."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict):
        return str(body.get("error") or "")
    return ""
