"""
app/api/upload_controller.py

Handles incoming requests to POST /upload.

This layer is responsible only for HTTP concerns:
  - Rejecting oversized bodies from the Content-Length header before the
    multipart form is parsed, and counting the bytes of bodies that arrive
    without one.
  - Parsing the multipart form and checking that exactly one file was sent
    under the 'file' field.
  - Reading the upload into memory (bounded by the size cap) and delegating
    the pipeline to SummaryService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  { "summary": "..." }
  400  No file, unsupported type, unparseable document, or no text in it.
  413  The upload exceeds the server-side size cap.
  500  The AI provider failed or something unexpected happened.  The raw
       error is attached as 'details' only in development mode.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile
from starlette.types import Message, Receive

from app.core.constants import UPLOAD_FIELD_NAME
from app.core.exceptions import (
    AppBaseException,
    ClientInputError,
    EmptyDocumentError,
    ExtractionError,
    FileTooLargeError,
    NoFileUploadedError,
    UnsupportedFileTypeError,
)
from app.core.logger import get_logger
from app.models.summary_models import ErrorResponse, SummaryResponse
from app.services.summary_service import SummaryService

logger = get_logger(__name__)

router = APIRouter(tags=["Summarize"])

# Multipart boundaries and part headers on top of the file itself.
_FORM_OVERHEAD_BYTES = 64 * 1024

# ── User-facing messages ───────────────────────────────────────────────────────

MSG_NO_FILE = "No file uploaded"
MSG_UNSUPPORTED = "Unsupported file type"
MSG_PARSE_ERROR = "Error parsing document"
MSG_EMPTY = "Could not extract text from document"
MSG_TOO_LARGE = "File too large"
MSG_INTERNAL = "Internal server error"

_CLIENT_MESSAGES = {
    NoFileUploadedError: MSG_NO_FILE,
    UnsupportedFileTypeError: MSG_UNSUPPORTED,
    EmptyDocumentError: MSG_EMPTY,
    FileTooLargeError: MSG_TOO_LARGE,
}


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400, details: Optional[str] = None) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


def server_error(request: Request, exc: BaseException) -> JSONResponse:
    """500 response; the exception text is attached only in development mode."""
    dev_mode = request.app.state.settings.dev_mode
    return _err(MSG_INTERNAL, status=500, details=str(exc) if dev_mode else None)


def _client_error(exc: ClientInputError) -> JSONResponse:
    message = next(
        (msg for cls, msg in _CLIENT_MESSAGES.items() if isinstance(exc, cls)),
        str(exc),
    )
    return _err(message, status=exc.status_code)


def _declared_length(request: Request) -> Optional[int]:
    raw = request.headers.get("content-length")
    try:
        return int(raw) if raw is not None else None
    except ValueError:
        return None


def _limit_body(receive: Receive, limit: int) -> Receive:
    """
    Wrap an ASGI receive callable so the body stops being read once more
    than ``limit`` bytes have arrived. Covers chunked bodies, which carry
    no Content-Length to check up front.
    """
    received = 0

    async def bounded_receive() -> Message:
        nonlocal received
        message = await receive()
        if message["type"] == "http.request":
            received += len(message.get("body", b""))
            if received > limit:
                raise FileTooLargeError(f"Request body exceeded {limit} bytes.")
        return message

    return bounded_receive


def get_summary_service(request: Request) -> SummaryService:
    """FastAPI dependency — the service built once by create_app()."""
    return request.app.state.summary_service


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post(
    "/upload",
    response_model=SummaryResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Summarize an uploaded PDF or DOCX document",
)
async def upload(
    request: Request,
    service: SummaryService = Depends(get_summary_service),
) -> JSONResponse:
    """
    Accepts a multipart body with a single document under the 'file' field:

        curl -F "file=@report.pdf" http://localhost:5000/upload

    Only PDF and DOCX files are accepted.
    """
    # ── 1. Cheap size check before touching the body ───────────────────────────
    body_limit = service.max_upload_bytes + _FORM_OVERHEAD_BYTES
    declared = _declared_length(request)
    if declared is not None and declared > body_limit:
        logger.warning("Upload rejected — Content-Length %d exceeds cap.", declared)
        return _err(MSG_TOO_LARGE, status=413)

    # ── 2. Parse multipart form ────────────────────────────────────────────────
    bounded = Request(request.scope, _limit_body(request.receive, body_limit))
    try:
        form = await bounded.form()
    except FileTooLargeError as exc:
        logger.warning("Upload rejected — %s", exc)
        return _err(MSG_TOO_LARGE, status=413)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Invalid multipart payload: %s", exc)
        return _err(MSG_NO_FILE)

    try:
        uploads: List[StarletteUploadFile] = [
            value
            for value in form.getlist(UPLOAD_FIELD_NAME)
            if isinstance(value, StarletteUploadFile)
        ]

        # ── 3. Exactly one file ────────────────────────────────────────────────
        if len(uploads) != 1:
            logger.warning("Upload rejected — %d file(s) in '%s'.", len(uploads), UPLOAD_FIELD_NAME)
            return _err(MSG_NO_FILE)

        upload_file = uploads[0]
        filename = upload_file.filename or "unknown"

        # Read at most one byte past the cap so oversize is still detectable.
        raw = await upload_file.read(service.max_upload_bytes + 1)

        logger.info(
            "Upload received — '%s' (%s, %d bytes)",
            filename,
            upload_file.content_type,
            len(raw),
        )

        # ── 4. Delegate to service ─────────────────────────────────────────────
        try:
            result = await service.summarize_upload(raw, upload_file.content_type, filename)

        except ClientInputError as exc:
            logger.warning("Upload rejected — %s", exc)
            return _client_error(exc)

        except ExtractionError as exc:
            logger.warning("Document could not be parsed — %s", exc)
            return _err(MSG_PARSE_ERROR)

        except AppBaseException as exc:
            logger.exception("Summarization pipeline error: %s", exc)
            return server_error(request, exc)

        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error during summarization: %s", exc)
            return server_error(request, exc)

    finally:
        await form.close()

    return JSONResponse(status_code=200, content=result.model_dump())
