"""
Top-level API router.

Aggregates the resource routers under their prefixes.  The stars
resource is mounted at the service root as ``/stars``.
"""

from fastapi import APIRouter

from .endpoints import stars

router = APIRouter()

router.include_router(stars.router, prefix="/stars", tags=["stars"])
