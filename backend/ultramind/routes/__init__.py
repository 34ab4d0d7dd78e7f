# Routes package init
"""
UltraMind Backend: API Routes Package
=======================================

Route Inventory:
    - health.py:     GET  /                 (plain-text banner)
                     GET  /health           (service health check)
    - summarize.py:  POST /summarize        (analyze raw text)
                     POST /summarize-pdf    (analyze an uploaded PDF)

Routes stay thin: extract inputs, call a service, return its result.
Errors are raised, not returned; main.py maps them to HTTP responses.
"""
