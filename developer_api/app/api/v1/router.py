"""
Top-level router for version 1 of the API.

This router aggregates the resource routers mounted under the
configurable API prefix.  When new resources are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import developers

router = APIRouter()

router.include_router(developers.router, prefix="/developers", tags=["developers"])
