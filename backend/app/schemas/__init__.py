"""Pydantic Schemas — response contracts for the lookup and browse endpoints.

Invariants:
    - Field names are snake_case in Python and camelCase on the wire
    - Schemas describe API contracts only; models/ describes persistence
"""
