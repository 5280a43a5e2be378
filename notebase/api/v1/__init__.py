"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from notebase.api.v1.endpoints import labels, notes

router = APIRouter()

router.include_router(labels.router, prefix="/labels", tags=["labels"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
