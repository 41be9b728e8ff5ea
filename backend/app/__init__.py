"""BookBrainz Entity API — read-only lookup and browse service for catalogued entities.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
