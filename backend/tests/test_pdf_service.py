"""
UltraMind Backend: PDF Service Unit Tests
===========================================

What we test:
    ✅ Text and page count are extracted from real (generated) PDFs
    ✅ PDFs without a text layer raise ValidationError (→ 400)
    ✅ Bytes the parser rejects raise PdfExtractionError (→ 500)
"""

import pytest

from ultramind.exceptions import PdfExtractionError, ValidationError
from ultramind.services.pdf_service import NO_TEXT_MESSAGE, ExtractedDocument, PdfService


class TestPdfExtraction:

    def setup_method(self):
        self.service = PdfService()

    @pytest.mark.asyncio
    async def test_single_page_text(self, sample_pdf_bytes):
        document = await self.service.extract_text(sample_pdf_bytes)

        assert isinstance(document, ExtractedDocument)
        assert "Hello World" in document.text
        assert document.pages == 1

    @pytest.mark.asyncio
    async def test_pages_are_joined_in_order(self, two_page_pdf_bytes):
        document = await self.service.extract_text(two_page_pdf_bytes)

        assert document.pages == 2
        assert document.text.index("First page") < document.text.index("Second page")
        assert "\n\n" in document.text

    @pytest.mark.asyncio
    async def test_image_only_pdf_is_validation_error(self, image_only_pdf_bytes):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.extract_text(image_only_pdf_bytes)

        assert exc_info.value.message == NO_TEXT_MESSAGE
        assert exc_info.value.context["pages"] == 1

    @pytest.mark.asyncio
    async def test_corrupt_file_is_extraction_error(self):
        with pytest.raises(PdfExtractionError) as exc_info:
            await self.service.extract_text(b"this is definitely not a PDF")

        assert exc_info.value.message
        assert exc_info.value.status_code == 500
