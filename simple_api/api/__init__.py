"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the SimpleApiError envelope

Design Decisions:
    - Thin routes delegate to RequestHandler (services/request_handler.py)
"""
