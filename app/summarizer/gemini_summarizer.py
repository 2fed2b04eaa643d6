"""
app/summarizer/gemini_summarizer.py

Google Gemini implementation of the Summarizer interface (google-genai SDK).

The SDK client is created lazily on first use so application startup does
not depend on the SDK; the API key itself is validated earlier, when
Settings are loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from app.core.exceptions import UpstreamError
from app.core.logger import get_logger
from app.summarizer.base import Summarizer

if TYPE_CHECKING:
    from google.genai import Client as _GenAIClient

logger = get_logger(__name__)


class GeminiSummarizer(Summarizer):
    """
    Summarizer backed by a Gemini model.

    One ``generate_content`` call per summary: no retries, no streaming and
    no timeout beyond the SDK's own default.
    """

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash") -> None:
        """
        Args:
            api_key : Gemini API key.
            model   : Model name passed to generate_content.
        """
        self._api_key = api_key
        self._model = model
        self._client: Optional[_GenAIClient] = None  # created on first use

    # ── Lazy loader ────────────────────────────────────────────────────────────

    def _get_client(self) -> _GenAIClient:
        """Return the SDK client, creating it on first call."""
        if self._client is None:
            try:
                from google import genai

                self._client = genai.Client(api_key=self._api_key)
                logger.info("Initialised Gemini client — model=%s", self._model)
            except Exception as exc:
                raise UpstreamError(f"Failed to initialise Gemini client: {exc}") from exc
        return self._client

    # ── Summarizer interface ───────────────────────────────────────────────────

    async def summarize(self, prompt: str) -> str:
        client = self._get_client()

        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
            )
        except Exception as exc:
            raise UpstreamError(f"Gemini generation failed: {exc}") from exc

        try:
            text = response.text
        except Exception as exc:  # blocked or malformed candidates
            raise UpstreamError(f"Gemini response could not be read: {exc}") from exc

        if not text:
            raise UpstreamError("Gemini returned an empty response.")

        logger.debug("Gemini returned %d character(s).", len(text))
        return text
