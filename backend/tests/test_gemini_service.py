"""
UltraMind Backend: Gemini Service Unit Tests (Mocked)
=======================================================

What:  Tests for GeminiService with the Google Generative AI SDK mocked out.
How:   Patches the genai module and model to simulate success/failure.

What we test:
    ✅ Successful call returns the response text unchanged
    ✅ Exactly one upstream call per request (no retry)
    ✅ SDK errors become LLMServiceError with the SDK's message
    ✅ Empty and blocked responses are failures
    ✅ Health check never raises
    ❌ Real API calls
"""

import pytest
from unittest.mock import patch, MagicMock, AsyncMock, PropertyMock

from ultramind.services.gemini_service import GeminiService
from ultramind.exceptions import LLMServiceError


def make_service(mock_genai, generate):
    mock_model = MagicMock()
    mock_model.generate_content_async = generate
    mock_genai.GenerativeModel.return_value = mock_model
    return GeminiService()


class TestGeminiServiceMocked:

    @pytest.mark.asyncio
    async def test_generate_success(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            mock_response = MagicMock()
            mock_response.text = "1) Key Insights\n- Mocked"
            generate = AsyncMock(return_value=mock_response)
            service = make_service(mock_genai, generate)

            result = await service.generate("You are an expert developer. ...")

            assert result == "1) Key Insights\n- Mocked"
            generate.assert_awaited_once_with("You are an expert developer. ...")

    @pytest.mark.asyncio
    async def test_configures_api_key_once(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            GeminiService()
            mock_genai.configure.assert_called_once_with(api_key="test-key-not-real")

    @pytest.mark.asyncio
    async def test_upstream_error_message_is_preserved(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            generate = AsyncMock(side_effect=RuntimeError("API key not valid. Please pass a valid API key."))
            service = make_service(mock_genai, generate)

            with pytest.raises(LLMServiceError) as exc_info:
                await service.generate("prompt")

            assert exc_info.value.message == "API key not valid. Please pass a valid API key."
            assert exc_info.value.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            generate = AsyncMock(side_effect=ConnectionError("network unreachable"))
            service = make_service(mock_genai, generate)

            with pytest.raises(LLMServiceError):
                await service.generate("prompt")

            assert generate.await_count == 1

    @pytest.mark.asyncio
    async def test_blocked_response_is_failure(self):
        """response.text raises ValueError when the candidate was blocked."""
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            mock_response = MagicMock()
            type(mock_response).text = PropertyMock(
                side_effect=ValueError("Invalid operation: the response was blocked")
            )
            service = make_service(mock_genai, AsyncMock(return_value=mock_response))

            with pytest.raises(LLMServiceError, match="blocked"):
                await service.generate("prompt")

    @pytest.mark.asyncio
    async def test_empty_response_is_failure(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            mock_response = MagicMock()
            mock_response.text = "   "
            service = make_service(mock_genai, AsyncMock(return_value=mock_response))

            with pytest.raises(LLMServiceError, match="empty response"):
                await service.generate("prompt")

    @pytest.mark.asyncio
    async def test_health_check_returns_bool(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            mock_genai.list_models.return_value = [MagicMock()]

            service = GeminiService()
            result = await service.health_check()
            assert result is True

    @pytest.mark.asyncio
    async def test_health_check_failure_returns_false(self):
        with patch('ultramind.services.gemini_service.genai') as mock_genai:
            mock_genai.list_models.side_effect = RuntimeError("unauthorized")

            service = GeminiService()
            assert await service.health_check() is False
