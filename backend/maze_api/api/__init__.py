"""API Layer — FastAPI routes, error handlers and client bundle serving.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All /api endpoints return structured JSON responses
"""
