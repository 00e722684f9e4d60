"""Infrastructure Layer — database access, message store and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError (core/errors.py)
"""
