"""
CodeMate Backend — Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every log line of the request, including the
      access log entry, carries the same correlation id.
    - The access log sees the final status code and the total duration.
"""
