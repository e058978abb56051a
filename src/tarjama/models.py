"""
Data model for translation records and request bodies.

TranslationRecord is the stored unit. The pydantic models describe the
JSON bodies accepted by the HTTP routes.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field


def unique_tags(tags) -> list[str]:
    """Drop duplicate tags, keeping first-seen order."""
    return list(dict.fromkeys(tags or []))


@dataclass
class TranslationRecord:
    key: str
    english: str
    arabic: str = ""
    tags: list[str] = field(default_factory=list)
    version: int = 0

    def __post_init__(self):
        self.tags = unique_tags(self.tags)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "english": self.english,
            "arabic": self.arabic,
            "tags": list(self.tags),
            "version": self.version,
        }

    def summary(self) -> dict[str, Any]:
        """Record fields reported back for merge duplicates (no version)."""
        return {
            "key": self.key,
            "english": self.english,
            "arabic": self.arabic,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationRecord":
        return cls(
            key=data["key"],
            english=data["english"],
            arabic=data.get("arabic") or "",
            tags=data.get("tags") or [],
            version=int(data.get("version") or 0),
        )


class TranslationUpdate(BaseModel):
    english: str = Field(min_length=1)
    arabic: str | None = None
    tags: list[str] | None = None


class BulkUpdateRequest(BaseModel):
    englishJson: dict[str, Any]
    arabicJson: dict[str, Any]
    tags: list[str] | None = None
