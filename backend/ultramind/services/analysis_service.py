"""
UltraMind Backend: Analysis Service (Business Logic Orchestrator)
===================================================================

What:  Runs the summarize pipelines independently of HTTP concerns.
How:   Composes the prompt builder, PdfService and the LLM service, and
       wraps the model output in an AnalysisResponse.
Who:   Called by the /summarize and /summarize-pdf route handlers.

Orchestration Flow:
    POST /summarize:
        validate text → build prompt → Gemini → AnalysisResponse

    POST /summarize-pdf:
        extract text (PdfService) → build prompt → Gemini → AnalysisResponse(source="pdf")

    Each step either succeeds or raises; the first exception ends the
    pipeline and propagates to the global handlers. Nothing is stored.
"""

import logging
from typing import Optional

from ultramind.exceptions import ValidationError
from ultramind.schemas.analysis import AnalysisResponse
from ultramind.services.gemini_service import gemini_service
from ultramind.services.llm_base import LLMService
from ultramind.services.pdf_service import PdfService, pdf_service
from ultramind.services.prompt_builder import prepare_prompt

logger = logging.getLogger(__name__)

TEXT_REQUIRED_MESSAGE = "Text is required"


class AnalysisService:
    """
    Stateless orchestrator for both summarize endpoints.

    The LLM and PDF services are injectable for tests; by default the
    module singletons are used.
    """

    def __init__(
        self,
        llm: Optional[LLMService] = None,
        pdf: Optional[PdfService] = None,
    ):
        self.llm = llm or gemini_service
        self.pdf = pdf or pdf_service

    async def _analyze(self, text: str, role: Optional[str]) -> AnalysisResponse:
        resolved_role, prompt = prepare_prompt(role, text)
        if role is not None and role != resolved_role.value:
            logger.info("Unknown role %r, falling back to %s", role, resolved_role.value)
        logger.info("Processing request for role: %s", resolved_role.value)

        analysis = await self.llm.generate(prompt)

        logger.info("Analysis complete for role %s (%d chars)", resolved_role.value, len(analysis))
        return AnalysisResponse(role=resolved_role, analysis=analysis)

    async def summarize_text(self, text: Optional[str], role: Optional[str]) -> AnalysisResponse:
        """
        Analyze raw text.

        Raises:
            ValidationError: text is missing, empty or whitespace-only (→ 400)
            LLMServiceError: Gemini failed (→ 500)
        """
        if not text or not text.strip():
            raise ValidationError(message=TEXT_REQUIRED_MESSAGE, field="text")

        return await self._analyze(text, role)

    async def summarize_pdf(self, content: bytes, role: Optional[str]) -> AnalysisResponse:
        """
        Analyze the text layer of an uploaded PDF.

        Raises:
            ValidationError: the PDF has no extractable text (→ 400)
            PdfExtractionError: the PDF could not be parsed (→ 500)
            LLMServiceError: Gemini failed (→ 500)
        """
        document = await self.pdf.extract_text(content)

        result = await self._analyze(document.text, role)
        result.source = "pdf"
        result.pages = document.pages
        return result


# ── Singleton Instance ────────────────────────────────────────────────────
analysis_service = AnalysisService()
