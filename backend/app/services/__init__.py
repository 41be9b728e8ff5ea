"""Services Layer — async request stages that read the database.

Invariants:
    - Stages take and return a RequestContext; failures raise BookBrainzError
    - Stage factories are called once per router build, stages once per request
"""
