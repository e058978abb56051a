# routers/translations.py
"""
Single-record translation routes.
"""

from fastapi import APIRouter, Depends

from tarjama.models import TranslationUpdate
from tarjama.store import TranslationStore

from ._base import get_store

router = APIRouter()


@router.get("/translations")
async def get_translations(store: TranslationStore = Depends(get_store)):
    return {"data": [record.to_dict() for record in store.get_all()]}


@router.get("/translation/{key}")
async def get_translation(key: str, store: TranslationStore = Depends(get_store)):
    return store.get_by_key(key).to_dict()


@router.put("/translation/{key}")
async def put_translation(
    key: str,
    body: TranslationUpdate,
    store: TranslationStore = Depends(get_store),
):
    """Create or replace a translation; tags are replaced, not merged."""
    version = store.upsert(key, body.english, body.arabic, body.tags)
    return {
        "success": True,
        "message": "Translation updated successfully",
        "version": version,
    }


@router.get("/translations-since/{version}")
async def get_translations_since(
    version: int,
    tag: str | None = None,
    store: TranslationStore = Depends(get_store),
):
    """Records changed after version, for incremental client sync."""
    return [record.to_dict() for record in store.find_by_version(version, tag)]


@router.delete("/translation/{key}")
async def delete_translation(key: str, store: TranslationStore = Depends(get_store)):
    store.delete_by_key(key)
    return {"success": True, "message": "Translation deleted successfully"}


@router.get("/search-english/{english}")
async def search_english(english: str, store: TranslationStore = Depends(get_store)):
    return store.find_by_english(english).to_dict()
