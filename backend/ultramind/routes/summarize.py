"""
UltraMind Backend: Summarize Route Handlers
=============================================

What:  POST /summarize (raw text) and POST /summarize-pdf (uploaded PDF).
How:   Extract the inputs from the request, delegate to AnalysisService,
       return the analysis envelope.
Who:   Called by the UltraMind web page.

Error responses (produced by the global exception handlers in main.py):
    HTTP 400: missing/blank text, missing file, unreadable PDF, malformed JSON
    HTTP 500: Gemini failure or PDF parser failure
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from ultramind.schemas.analysis import AnalysisRequest, AnalysisResponse, ErrorResponse
from ultramind.services.analysis_service import analysis_service
from ultramind.services.upload_service import upload_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Summarize"])

ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    500: {"description": "AI service or PDF parser failed", "model": ErrorResponse},
}


@router.post(
    "/summarize",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Analyze raw text",
    description=(
        "Send document text and an optional role (developer, recruiter, analyst, "
        "student). Unknown roles fall back to developer."
    ),
)
async def summarize(payload: Optional[AnalysisRequest] = None) -> AnalysisResponse:
    """
    Analyze raw text for the requested role.

    An absent body is treated the same as a body without "text".
    """
    payload = payload or AnalysisRequest()
    return await analysis_service.summarize_text(payload.text, payload.role)


@router.post(
    "/summarize-pdf",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Analyze an uploaded PDF",
    description=(
        "Upload a PDF in the multipart field 'file' with an optional 'role' field. "
        "Only the embedded text layer is analyzed; scanned PDFs are rejected."
    ),
)
async def summarize_pdf(
    file: Optional[UploadFile] = File(
        default=None,
        description="PDF document to analyze",
    ),
    role: Optional[str] = Form(default=None),
) -> AnalysisResponse:
    """
    Analyze an uploaded PDF for the requested role.

    The file is read fully into memory; nothing is written to disk.
    """
    content = await upload_service.read_upload(file)
    return await analysis_service.summarize_pdf(content, role)
