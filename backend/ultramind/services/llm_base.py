"""
UltraMind Backend: Abstract LLM Service Interface
===================================================

What:  Abstract base class defining the contract for the text-generation backend.
How:   Concrete implementations inherit from LLMService and implement generate().
Who:   Called by AnalysisService once per summarize request.

Tests substitute a mock for the concrete GeminiService through this
interface, so routes and the analysis service never import the SDK directly.
"""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Abstract interface for single-shot prompt completion.

    Contract:
        - generate() sends one prompt and returns the full text response
        - No streaming: the caller receives nothing until the response is complete
        - All provider-specific errors are wrapped in LLMServiceError
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Send a prompt to the model and return its complete text response.

        Args:
            prompt: The fully assembled prompt (instructions + document).

        Returns:
            str: The model's response text. Never empty.

        Raises:
            LLMServiceError: When the upstream call fails for any reason. The
                upstream error message is preserved as the exception message.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the LLM service is reachable and operational.

        What:    Lightweight connectivity test (does NOT consume tokens).
        Returns: True if service is reachable, False otherwise.
        """
        ...
