"""app/summarizer/__init__.py — public API of the summarizer package."""

from app.summarizer.base import Summarizer
from app.summarizer.gemini_summarizer import GeminiSummarizer

__all__ = [
    "Summarizer",
    "GeminiSummarizer",
]
