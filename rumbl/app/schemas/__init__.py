"""
Pydantic schema definitions.

Records are separated from the services that look them up so that the
in‑memory seed data could later be replaced without touching handlers.
"""
