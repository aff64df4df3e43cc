"""Services Layer — per-entity record stores (the data access layer).

Invariants:
    - Every store operation is one parameterized SQL statement
    - Stores receive their AsyncSession explicitly; no module-level pool handle

Design Decisions:
    - One store file per entity, shared mechanics in record_store.py
"""
