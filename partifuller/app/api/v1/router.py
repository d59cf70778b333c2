"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  When
new endpoints are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import health, rsvps

router = APIRouter()

router.include_router(rsvps.router, prefix="/rsvps", tags=["rsvps"])
router.include_router(health.router, tags=["health"])
