"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Formatters are pure and deterministic over already-loaded entities

Design Decisions:
    - Functional core separated from the async shell that loads entities
"""
