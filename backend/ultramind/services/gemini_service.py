"""
UltraMind Backend: Google Gemini Service Implementation
=========================================================

What:  Concrete LLM service using the Google Gemini API for document analysis.
How:   Sends the assembled prompt to Gemini in one awaited call and returns
       the complete response text.
Who:   Instantiated once at import; called by AnalysisService for each request.

Failure policy:
    One upstream attempt per request. No retry, no backoff, no caching, no
    timeout beyond the SDK's defaults. Every failure becomes an
    LLMServiceError whose message is the SDK's own error message, so the
    caller sees e.g. "API key not valid. Please pass a valid API key."
"""

import asyncio
import logging
import time
import uuid

import google.generativeai as genai

from ultramind.config import settings
from ultramind.exceptions import LLMServiceError
from ultramind.services.llm_base import LLMService

logger = logging.getLogger(__name__)


class GeminiService(LLMService):
    """
    Google Gemini implementation of LLMService.

    The SDK keeps the API key in module-level state, so configure() runs once
    here and the GenerativeModel handle is shared by every request. Neither
    is modified afterwards.
    """

    def __init__(self):
        if settings.gemini_configured:
            genai.configure(api_key=settings.gemini_api_key)

        self.model = genai.GenerativeModel(settings.gemini_model)

        logger.info("GeminiService initialized with model=%s", settings.gemini_model)

    async def generate(self, prompt: str) -> str:
        """
        Send the prompt to Gemini and return the response text.

        Flow:
            1. generate_content_async (single, non-streamed round trip)
            2. Read response.text (raises if the candidate was blocked)
            3. Reject empty output as an upstream failure

        Raises:
            LLMServiceError: carrying the upstream message verbatim
        """
        # Short ID to correlate the start/finish log lines of one call
        call_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        logger.info("[%s] Calling Gemini API (%d prompt chars)", call_id, len(prompt))

        try:
            response = await self.model.generate_content_async(prompt)
            text = response.text
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "[%s] Gemini API call failed after %.0fms: %s",
                call_id,
                duration_ms,
                str(e),
                exc_info=True,
            )
            raise LLMServiceError(
                message=str(e) or type(e).__name__,
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.time() - start_time) * 1000

        if not text or not text.strip():
            logger.error("[%s] Gemini returned an empty response", call_id)
            raise LLMServiceError(
                message="Gemini returned an empty response",
                context={"call_id": call_id},
            )

        logger.info(
            "[%s] Gemini call completed in %.0fms, received %d chars",
            call_id,
            duration_ms,
            len(text),
        )
        return text

    async def health_check(self) -> bool:
        """
        Check if Gemini API is reachable.

        How:     Lists available models (lightweight API call, no token cost).
        Returns: True if reachable and authenticated, False otherwise.
        """
        try:
            # list_models is a blocking paginated generator
            models = await asyncio.to_thread(lambda: list(genai.list_models()))
            model_names = [m.name for m in models]
            target = f"models/{settings.gemini_model}"
            if target not in model_names:
                logger.warning("Configured model %s not found in available models", target)
            return True
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False


# ── Singleton Instance ────────────────────────────────────────────────────
gemini_service = GeminiService()
