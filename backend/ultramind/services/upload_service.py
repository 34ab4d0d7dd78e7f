"""
UltraMind Backend: Upload Service
===================================

What:  Buffers an uploaded PDF fully in memory and validates its presence and size.
How:   Reads the multipart UploadFile into bytes, rejecting missing, empty
       or oversized uploads with ValidationError (HTTP 400).
Who:   Called by the /summarize-pdf route before text extraction.

Nothing is written to disk. The bytes live only as long as the request;
the UploadFile (and its spooled temporary file) is always closed.

Type checking is left to the PDF parser: a file that is not a PDF fails
extraction (HTTP 500), the same as a corrupt PDF.
"""

import logging
from typing import Optional

from fastapi import UploadFile

from ultramind.config import settings
from ultramind.exceptions import ValidationError

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = "PDF file is required. Upload it in the 'file' field."


class UploadService:
    """Turns the optional `file` form field into validated in-memory bytes."""

    def __init__(self, max_file_size: Optional[int] = None):
        """
        Args:
            max_file_size: Override the size cap in bytes (used in tests).
                           If None, uses settings.max_file_size.
        """
        self.max_file_size = max_file_size or settings.max_file_size

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Validate upload size against the configured maximum.

        content_length is the part size reported by the multipart parser and
        is checked first so an oversized upload is rejected before reading.

        Raises:
            ValidationError with human-readable size limit message
        """
        max_mb = self.max_file_size / (1024 * 1024)

        if content_length and content_length > self.max_file_size:
            raise ValidationError(
                message=f"PDF file exceeds maximum size of {max_mb:.0f}MB.",
                field="file",
                context={"max_size_mb": max_mb, "reported_size": content_length},
            )

        if actual_size > self.max_file_size:
            raise ValidationError(
                message=(
                    f"PDF file ({actual_size / (1024 * 1024):.1f}MB) exceeds "
                    f"maximum size of {max_mb:.0f}MB."
                ),
                field="file",
                context={"max_size_mb": max_mb, "actual_size": actual_size},
            )

    async def read_upload(self, file: Optional[UploadFile]) -> bytes:
        """
        Read the uploaded file into memory.

        Returns:
            The raw file bytes (never empty).

        Raises:
            ValidationError: No file field, an empty file, or an oversized file.
        """
        if file is None:
            raise ValidationError(message=MISSING_FILE_MESSAGE, field="file")

        try:
            self.validate_size(file.size, 0)
            content = await file.read()
        finally:
            await file.close()

        if not content:
            raise ValidationError(
                message=MISSING_FILE_MESSAGE,
                field="file",
                context={"filename": file.filename, "reason": "empty upload"},
            )

        self.validate_size(None, len(content))

        logger.info(
            "Received PDF upload: filename=%s, size=%d bytes",
            file.filename or "unknown",
            len(content),
        )
        return content


# ── Singleton Instance ────────────────────────────────────────────────────
upload_service = UploadService()
