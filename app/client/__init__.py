"""app/client/__init__.py — public API of the client package."""

from app.client.upload_client import (
    FileCandidate,
    UploadClient,
    UploadOutcome,
    UploadResult,
)

__all__ = [
    "FileCandidate",
    "UploadClient",
    "UploadOutcome",
    "UploadResult",
]
