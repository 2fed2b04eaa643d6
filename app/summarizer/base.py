"""
app/summarizer/base.py

Abstract interface for the summarization layer.

Services depend only on this interface, never on the provider SDK, so the
pipeline can be tested with a stub and the provider swapped without
touching the gateway.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Summarizer(ABC):
    """Contract every generative-language backend must fulfil."""

    @abstractmethod
    async def summarize(self, prompt: str) -> str:
        """
        Send a fully-built prompt to the provider and return its text.

        Args:
            prompt: Instruction template already combined with document text.

        Returns:
            The provider's summary, unmodified.

        Raises:
            UpstreamError: If the call fails or the response carries no text.
        """
