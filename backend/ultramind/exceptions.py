"""
UltraMind Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the failure modes of a request.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the JSON error envelope {error, details?} with the right status.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    UltraMindError (base)      → 500 Internal Server Error
    ├── ValidationError        → 400 Bad Request (client can fix the input)
    ├── PdfExtractionError     → 500 (the PDF parser rejected the file)
    └── LLMServiceError        → 500 (Gemini call failed)

Messages of PdfExtractionError and LLMServiceError are the underlying
library's own message, returned to the caller verbatim. The context dict is
for server-side logging only.
"""

from typing import Any, Dict, Optional


class UltraMindError(Exception):
    """
    Base exception for all UltraMind application errors.

    Attributes:
        message:  Error description returned in the "error" field
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(UltraMindError):
    """
    Raised when client input fails validation.

    When:    Missing or blank text, missing file, oversized upload, or a PDF
             with no extractable text.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Text is required"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class PdfExtractionError(UltraMindError):
    """
    Raised when the PDF parser throws (corrupt, encrypted or non-PDF file).

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Failed to read PDF",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class LLMServiceError(UltraMindError):
    """
    Raised when the Gemini API call fails.

    When:    Network failure, invalid key, quota exhausted, blocked response.
    HTTP:    500 Internal Server Error

    There is no retry: each request makes exactly one upstream attempt and
    the upstream message is surfaced as-is.
    """

    def __init__(
        self,
        message: str = "AI analysis service failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
