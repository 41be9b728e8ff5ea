"""Infrastructure Layer — database engine and logging setup.

Invariants:
    - Initialized once from the application lifespan, never at import time
    - Driver exceptions are mapped to core/errors.py types at this boundary
"""
