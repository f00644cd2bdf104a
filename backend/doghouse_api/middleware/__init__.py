"""
Dog House API - Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route
    Response ← [Request ID] ← [Logging] ← [GZip] ← [CORS] ← Route

    - Request ID runs first so the access log line carries the id.
    - Logging measures the whole downstream duration and final status.
"""
