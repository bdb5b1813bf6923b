# Middleware package init
"""
Notes API Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can carry the correlation ID
    2. Logging: records status and duration once the handler has returned
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
"""
