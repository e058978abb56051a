# routers/_base.py
"""
Shared helpers for translation routes.

Provides store/engine injection from app state and the common
response shape for merge operations.
"""

from typing import Any
from fastapi import Request

from tarjama.errors import MissingPairError
from tarjama.merge import MergeEngine, MergeResult
from tarjama.store import TranslationStore


def get_store(request: Request) -> TranslationStore:
    """Store created by the app lifespan."""
    return request.app.state.store


def get_engine(request: Request) -> MergeEngine:
    return MergeEngine(get_store(request))


def get_upload_dir(request: Request) -> str:
    return request.app.state.upload_dir


def commit_merge(store: TranslationStore, result: MergeResult) -> dict[str, Any]:
    """
    Persist a merge result and build the response body.

    Args:
        store: Store the merge ran against
        result: Output from MergeEngine

    Returns:
        Response dict, with the duplicates list only when there are any

    Raises:
        MissingPairError: the batch failed validation (nothing is saved)
    """
    if not result.valid:
        raise MissingPairError(result.missing_key)

    store.save()

    if result.duplicates:
        return {
            "success": True,
            "message": "Translations updated with duplicates found.",
            "duplicates": [record.summary() for record in result.duplicates],
        }
    return {"success": True, "message": "Translations updated successfully."}
