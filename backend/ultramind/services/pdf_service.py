"""
UltraMind Backend: PDF Text Extraction
========================================

What:  Converts in-memory PDF bytes into plain text plus a page count.
How:   pdfplumber parses the document from a BytesIO buffer; page texts are
       joined with blank lines. Parsing is CPU-bound and synchronous, so it
       runs in a worker thread to keep the event loop free.

Outcomes:
    text found            → ExtractedDocument(text, pages)
    only whitespace/empty → ValidationError (400): scanned or image-only PDF
    parser raised         → PdfExtractionError (500) with the parser's message
"""

import asyncio
import io
import logging
from dataclasses import dataclass
from typing import Optional

import pdfplumber

from ultramind.exceptions import PdfExtractionError, ValidationError

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "Could not extract text from PDF. The file may be scanned or image-based."


@dataclass(frozen=True)
class ExtractedDocument:
    text: str
    pages: Optional[int] = None


class PdfService:

    def _extract_sync(self, content: bytes) -> ExtractedDocument:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            page_texts = []
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    page_texts.append(page_text)
            return ExtractedDocument(text="\n\n".join(page_texts), pages=len(pdf.pages))

    async def extract_text(self, content: bytes) -> ExtractedDocument:
        """
        Extract the text layer of a PDF.

        Args:
            content: Raw PDF bytes from the upload.

        Returns:
            ExtractedDocument with non-blank text.

        Raises:
            ValidationError: The PDF has no extractable text.
            PdfExtractionError: pdfplumber could not parse the file.
        """
        try:
            document = await asyncio.to_thread(self._extract_sync, content)
        except Exception as e:
            logger.error("PDF extraction failed: %s", str(e), exc_info=True)
            raise PdfExtractionError(
                message=str(e) or f"Failed to read PDF ({type(e).__name__})",
                context={"error_type": type(e).__name__, "size": len(content)},
            ) from e

        if not document.text.strip():
            raise ValidationError(
                message=NO_TEXT_MESSAGE,
                field="file",
                context={"pages": document.pages},
            )

        logger.info(
            "Extracted %d chars from %s-page PDF",
            len(document.text),
            document.pages,
        )
        return document


pdf_service = PdfService()
