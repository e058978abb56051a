"""
Tarjama: English/Arabic translation key-value store over HTTP.
"""

from .models import TranslationRecord
from .store import TranslationStore
from .merge import MergeEngine, MergeEntry, MergeResult

__all__ = ["TranslationRecord", "TranslationStore", "MergeEngine", "MergeEntry", "MergeResult"]
