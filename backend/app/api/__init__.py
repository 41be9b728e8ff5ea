"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routers are built by functions and registered explicitly in main.create_app
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes: each endpoint lists its request stages and a formatter
"""
