# Middleware package init
"""
Employee Registry Backend: Middleware Package
================================================

Cross-cutting request handling shared by every route.

Execution order for an incoming request:
    [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → route

Rate limiting runs first so rejected requests cost nothing. The request ID
is assigned before the access log line is written so both carry the same ID.
"""
