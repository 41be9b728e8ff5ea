"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes a build_*_router() returning a fresh APIRouter
    - Routes never contain business logic (delegate to stages and formatters)
"""
