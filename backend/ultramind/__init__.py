"""
UltraMind Backend: Application Package
========================================

What: Role-aware document analysis API relaying text and PDFs to Google Gemini.

Layers:
    Routes (HTTP)       → request parsing, response models
    Services (logic)    → upload, PDF extraction, prompt building, Gemini
    Schemas (contract)  → Pydantic request/response models

No persistence layer: every request is self-contained.
"""

__version__ = "1.0.0"
