"""Pydantic Schemas — request/response models for the API boundary.

Invariants:
    - Schemas validate shape only; persistence lives in infrastructure/
"""
