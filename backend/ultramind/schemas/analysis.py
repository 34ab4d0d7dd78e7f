"""
UltraMind Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract between the web page and backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers and the analysis service.

None of these objects outlive the request that created them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Roles
# ══════════════════════════════════════════════════════════════════════════


class Role(str, Enum):
    """
    Audience the analysis is written for.

    resolve() is total: any value that is not exactly one of the members
    (including None and "") maps to DEFAULT_ROLE.
    """

    DEVELOPER = "developer"
    RECRUITER = "recruiter"
    ANALYST = "analyst"
    STUDENT = "student"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "Role":
        try:
            return cls(value)
        except ValueError:
            return DEFAULT_ROLE


DEFAULT_ROLE = Role.DEVELOPER


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-01-15T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class AnalysisRequest(BaseModel):
    """
    What:  JSON body of POST /summarize.

    Both fields are optional at the schema level so that a missing "text"
    produces the API's own 400 "Text is required" instead of a schema error.
    """
    text: Optional[str] = Field(default=None, description="Document text to analyze")
    role: Optional[str] = Field(
        default=None,
        description="developer, recruiter, analyst or student (default: developer)",
    )

    @field_validator("role", mode="before")
    @classmethod
    def ignore_non_string_role(cls, v: Any) -> Optional[str]:
        """A role that is not a string falls back like any unknown role."""
        return v if isinstance(v, str) else None


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class AnalysisResponse(BaseModel):
    """
    What:  The analysis envelope returned on success.
    Who:   Returned by POST /summarize and POST /summarize-pdf.

    source and pages are only set on the PDF path; routes serialize with
    response_model_exclude_none so they are absent for raw text.
    """
    success: bool = Field(default=True)
    role: Role = Field(description="Role the prompt was built for, after fallback")
    analysis: str = Field(description="Model output, returned verbatim")
    source: Optional[Literal["pdf"]] = Field(default=None, description="'pdf' for uploads")
    pages: Optional[int] = Field(default=None, description="Page count of the uploaded PDF")
    timestamp: str = Field(default_factory=utc_timestamp, description="UTC ISO 8601")


class ErrorResponse(BaseModel):
    """
    What:  Error envelope for every failed request.

    Example:
        {
            "error": "Incorrect API key provided",
            "details": "Check server terminal for full error details"
        }
    """
    error: str = Field(description="Human-readable error message")
    details: Optional[Union[str, list, dict]] = Field(
        default=None,
        description="Extra context (500s and malformed bodies only)",
    )


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy or degraded")
    version: str = Field(description="Application version")
    gemini: str = Field(description="Gemini API status: available, unavailable, unconfigured")
    uptime_seconds: float = Field(description="Seconds since service started")
