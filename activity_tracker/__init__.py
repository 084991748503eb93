"""Activity tracker package.

Holds the shared domain model, the client-side collection and sync layer and
the FastAPI backend that persists activities.
"""
