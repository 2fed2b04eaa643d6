"""
app/models/summary_models.py

Pydantic DTOs for the summarization flow.
The request has no DTO — the controller reads the multipart form itself;
only response shapes are defined here.
"""

from typing import Literal, Optional

from pydantic import BaseModel


class SummaryResponse(BaseModel):
    """
    Successful response for POST /upload.

        { "summary": "- Point one\\n- Point two" }
    """

    summary: str


class ErrorResponse(BaseModel):
    """
    Error body for every 4xx/5xx response.

    ``details`` is only filled in for 500s when development mode is on.
    """

    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
