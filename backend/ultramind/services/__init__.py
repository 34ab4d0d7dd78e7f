# Services package init
"""
UltraMind Backend: Services Layer
===================================

Service Inventory:
    - LLMService (abstract): Interface for prompt completion providers
    - GeminiService: Concrete implementation using Google Gemini
    - UploadService: In-memory upload buffering and validation
    - PdfService: PDF text extraction (pdfplumber)
    - prompt_builder: Role resolution and prompt assembly
    - AnalysisService: Orchestrates extract → prompt → generate → envelope
"""
