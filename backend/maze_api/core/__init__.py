"""Core — pure domain logic: types, identifiers, bounds checks, errors, protocols.

Invariants:
    - No IO and no imports from api/ or infrastructure/
"""
