# Middleware package init
"""
NYB Restaurant Backend — Middleware Package
=============================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line can carry the ID
    - Logging measures the full downstream duration and final status
    - CORS answers preflight OPTIONS requests before routing
"""
