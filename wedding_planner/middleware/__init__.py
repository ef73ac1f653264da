# Middleware package init
"""
Wedding Planner Backend — Middleware Package
==============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error body can
    carry the correlation ID.
"""
