"""
In-memory translation store mirrored to a JSON file.

The whole store is loaded at startup and written back as a full snapshot
after every mutating call:

    {"data": [{"key": ..., "english": ..., "arabic": ..., "tags": [...], "version": ...}]}

Versions are whole seconds since epoch. Two writes inside the same second
share a version; a client polling find_by_version() with its last-seen
version still sees every record changed after that second.
"""

import json
import time
from pathlib import Path

from tarjama.errors import KeyNotFoundError, TranslationNotFoundError
from tarjama.models import TranslationRecord, unique_tags


class TranslationStore:
    """
    Authoritative list of translation records, unique by key.
    """

    def __init__(self, path: str | Path):
        """
        Args:
            path: JSON file backing the store (created on first save)
        """
        self.path = Path(path)
        self.records: list[TranslationRecord] = []
        self._last_version = 0
        self.load()

    def load(self) -> None:
        """Replace in-memory state with the file contents (empty if no file)."""
        if not self.path.exists():
            self.records = []
            print(f"📂 No translations file at {self.path}, starting empty")
            return

        payload = json.loads(self.path.read_text(encoding="utf-8"))
        self.records = [TranslationRecord.from_dict(item) for item in payload.get("data", [])]
        self._last_version = max((r.version for r in self.records), default=0)
        print(f"📂 Loaded {len(self.records)} translations from {self.path}")

    def save(self) -> None:
        """Write the full snapshot."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"data": [r.to_dict() for r in self.records]}
        self.path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def next_version(self) -> int:
        """Current epoch second, never lower than a version already issued."""
        version = max(int(time.time()), self._last_version)
        self._last_version = version
        return version

    def get_all(self) -> list[TranslationRecord]:
        return list(self.records)

    def match_key(self, key: str) -> TranslationRecord | None:
        return next((r for r in self.records if r.key == key), None)

    def get_by_key(self, key: str) -> TranslationRecord:
        record = self.match_key(key)
        if record is None:
            raise KeyNotFoundError(key)
        return record

    def upsert(
        self,
        key: str,
        english: str,
        arabic: str = "",
        tags: list[str] | None = None,
    ) -> int:
        """
        Create or overwrite the record for key.

        english, arabic and tags are replaced wholesale (tags are not merged).

        Returns:
            The version stamped on the record
        """
        version = self.next_version()
        record = self.match_key(key)

        if record is not None:
            record.english = english
            record.arabic = arabic or ""
            record.tags = unique_tags(tags)
            record.version = version
        else:
            self.records.append(
                TranslationRecord(
                    key=key,
                    english=english,
                    arabic=arabic or "",
                    tags=tags or [],
                    version=version,
                )
            )

        self.save()
        return version

    def delete_by_key(self, key: str) -> None:
        """Remove the record for key. Missing keys are ignored."""
        self.records = [r for r in self.records if r.key != key]
        self.save()

    def find_by_version(self, min_version: int, tag: str | None = None) -> list[TranslationRecord]:
        """Records with version strictly greater than min_version, optionally carrying tag."""
        changed = [r for r in self.records if r.version > min_version]
        if tag:
            changed = [r for r in changed if tag in r.tags]
        return changed

    def match_english(self, text: str) -> TranslationRecord | None:
        """First record (store order) whose english equals text, ignoring case."""
        wanted = text.lower()
        return next((r for r in self.records if r.english.lower() == wanted), None)

    def find_by_english(self, text: str) -> TranslationRecord:
        record = self.match_english(text)
        if record is None:
            raise TranslationNotFoundError(text)
        return record

    def append_records(self, records: list[TranslationRecord]) -> None:
        """
        Add a batch of new records, stamping each with a fresh version.

        Keys must not already be stored; MergeEngine.merge() routes entries
        for stored keys to in-place updates. Does not persist; call save()
        afterwards.
        """
        for record in records:
            record.version = self.next_version()
            self.records.append(record)
