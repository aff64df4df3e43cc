"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports route or store code
    - Database failures mapped to core/errors.py types

Design Decisions:
    - One module per concern: database.py (pool/sessions), observability.py (logging)
"""
