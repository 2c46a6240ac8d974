"""
Top‑level router for the API.

This router aggregates the greeting route and the companies routes.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import companies, root

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(companies.router, prefix="/companies", tags=["companies"])
