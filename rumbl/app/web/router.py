"""
Top‑level router for the HTML pages.

Aggregates the page routers under their path prefixes.  The resulting
router is included at the application root.
"""

from fastapi import APIRouter

from .endpoints import page, users

router = APIRouter()

router.include_router(page.router, tags=["pages"])
router.include_router(users.router, prefix="/users", tags=["pages"])
