"""Database Package — SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
