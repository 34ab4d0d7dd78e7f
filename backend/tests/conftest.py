"""
UltraMind Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── sample_pdf_bytes: single-page PDF with a text layer ("Hello World")
    ├── two_page_pdf_bytes: two pages of text
    ├── image_only_pdf_bytes: single-page PDF with no text (like a scan)
    ├── mock_llm: AsyncMock standing in for gemini_service.generate
    └── test_client: HTTPX AsyncClient wired to the FastAPI app

No test talks to the real Gemini API.
"""

import os
from typing import List, Optional
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run BEFORE any ultramind import: settings are read at import time
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests


# ══════════════════════════════════════════════════════════════════════════
# PDF Builders
# ══════════════════════════════════════════════════════════════════════════

def build_pdf(page_streams: List[Optional[bytes]]) -> bytes:
    """
    Build a minimal, valid PDF with one page per content stream.

    Each stream is raw PDF drawing operators; None gives a page with no
    content at all. Text uses the built-in Helvetica font, so no font
    program has to be embedded. Byte offsets in the xref table are computed
    from the actual output.
    """
    page_count = len(page_streams)
    font_id = 3
    first_page_id = 4
    kids = " ".join(f"{first_page_id + 2 * i} 0 R" for i in range(page_count))

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, stream in enumerate(page_streams):
        content_id = first_page_id + 2 * i + 1
        objects.append(
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 {font_id} 0 R >> >> "
                f"/Contents {content_id} 0 R >>"
            ).encode()
        )
        data = stream or b""
        objects.append(
            b"<< /Length " + str(len(data)).encode() + b" >>\nstream\n" + data + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


def text_stream(text: str) -> bytes:
    return f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return build_pdf([text_stream("Hello World")])


@pytest.fixture
def two_page_pdf_bytes() -> bytes:
    return build_pdf([text_stream("First page"), text_stream("Second page")])


@pytest.fixture
def image_only_pdf_bytes() -> bytes:
    """A page that draws nothing textual, as a scanned document would."""
    return build_pdf([None])


# ══════════════════════════════════════════════════════════════════════════
# Service / Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_llm():
    """
    Replaces the Gemini call for the duration of a test.

    Usage:
        async def test_x(test_client, mock_llm):
            mock_llm.return_value = "custom analysis"
            mock_llm.side_effect = LLMServiceError("boom")
    """
    from ultramind.services.gemini_service import gemini_service

    with patch.object(
        gemini_service,
        "generate",
        new=AsyncMock(return_value="**Key Insights**\n- Mocked analysis"),
    ) as generate:
        yield generate


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed directly into the ASGI app (no server, no lifespan).

    Usage:
        async def test_banner(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from ultramind.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
