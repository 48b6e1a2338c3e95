# Middleware package init
"""
Notes App Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → [Rate Limit] → [GZip] → Route Handler

    1. CORS outermost: every response, 429s included, carries the CORS headers
    2. Request ID: correlation ID for logs, error bodies and X-Request-ID
    3. Logging: access line with status and duration, rejected requests included
    4. Rate Limit: reject abusive clients before routing
    5. GZip: Starlette built-in configured in main.create_app
"""
