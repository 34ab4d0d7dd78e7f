# Middleware package init
"""
UltraMind Backend: Middleware Package
=======================================

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → [GZip] → Route Handler

    1. CORS first: answers OPTIONS preflights and decorates every response,
       including errors produced further in
    2. Request ID: correlation ID for logs and the X-Request-ID header
    3. Logging: one access-log line per request with status and duration
"""
