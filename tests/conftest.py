"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

from __future__ import annotations

import io
from typing import Callable, Iterator, List, Optional

import docx
import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.extractor.text_extractor import TextExtractor
from app.main import create_app
from app.summarizer.base import Summarizer


# ── Stub provider ──────────────────────────────────────────────────────────────

class StubSummarizer(Summarizer):
    """Records every prompt; returns ``reply`` or raises ``error``."""

    def __init__(self, reply: str = "- A summary") -> None:
        self.reply = reply
        self.error: Optional[Exception] = None
        self.prompts: List[str] = []

    async def summarize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


# ── Core fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def summarizer() -> StubSummarizer:
    return StubSummarizer()


@pytest.fixture
def make_client(summarizer: StubSummarizer) -> Iterator[Callable[..., TestClient]]:
    """
    Factory for TestClients over a fresh app.

    Keyword arguments override Settings fields, e.g. ``make_client(dev_mode=True)``.
    ``extractor`` replaces the default PDF/DOCX extractor.
    """
    clients: List[TestClient] = []

    def _make(extractor: Optional[TextExtractor] = None, **overrides) -> TestClient:
        settings = Settings(gemini_api_key="test-key", _env_file=None, **overrides)
        app = create_app(settings, summarizer=summarizer, extractor=extractor)
        c = TestClient(app, raise_server_exceptions=False)
        clients.append(c)
        return c

    yield _make

    for c in clients:
        c.close()


@pytest.fixture
def client(make_client) -> TestClient:
    """A TestClient over an app with default settings and a stub summarizer."""
    return make_client()


# ── Sample document builders ───────────────────────────────────────────────────

@pytest.fixture
def make_pdf() -> Callable[[List[str]], bytes]:
    """
    Build a minimal in-memory PDF with one text line per page.
    Blank strings produce pages with no text layer.
    """

    def _make(pages: List[str]) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text.strip():
                page.insert_text((72, 72), text, fontsize=12)
        data = doc.tobytes()
        doc.close()
        return data

    return _make


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
    """Build an in-memory DOCX from paragraphs and optional table rows."""

    def _make(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            t = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    t.cell(r, c).text = value
        buf = io.BytesIO()
        document.save(buf)
        return buf.getvalue()

    return _make
