"""Core Layer — error taxonomy shared by stores and API handlers.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/

Design Decisions:
    - Errors live apart from the layers that raise and render them
"""
