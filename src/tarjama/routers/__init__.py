# routers/__init__.py
"""
HTTP routes for the translation store.

- translations: single-record CRUD, version polling and English search
- bulk: JSON / spreadsheet uploads and JSON-body bulk updates
"""

from fastapi import APIRouter

from .translations import router as translations_router
from .bulk import router as bulk_router

# Aggregate all routers
router = APIRouter()
router.include_router(translations_router)
router.include_router(bulk_router)

__all__ = ["router"]
