"""
Bulk merge of English/Arabic pairs into the translation store.

Incoming data arrives in one of two shapes:
- two side-by-side mappings {key: english} and {key: arabic}
- tabular rows carrying key, english and arabic columns

Both are first turned into validated MergeEntry triples. Only a fully
valid batch reaches reconciliation, so a missing pair leaves the store
untouched.

Reconciliation matches each entry against the store by English text,
ignoring case:
- match found  -> duplicate: arabic overwritten, tags unioned, version bumped
- no match, key already stored -> that keyed record is updated in place
  (english and arabic replaced, tags unioned, version bumped) and reported
  with the duplicates
- no match     -> new record, appended together with the rest of the batch

Each record is reported once, with its state after the whole batch.

The store is not persisted here; callers save() after a valid merge.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from tarjama.errors import MissingPairError, ProcessingError
from tarjama.models import TranslationRecord, unique_tags
from tarjama.store import TranslationStore


@dataclass(frozen=True)
class MergeEntry:
    key: str
    english: str
    arabic: str


@dataclass
class MergeResult:
    valid: bool
    new_records: list[TranslationRecord] = field(default_factory=list)
    duplicates: list[TranslationRecord] = field(default_factory=list)
    missing_key: str | None = None


def _text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ProcessingError(f"Value for key {key!r} is not a string")
    return value


def pair_mappings(english: Mapping[str, Any], arabic: Mapping[str, Any]) -> list[MergeEntry]:
    """
    Pair two key->text mappings into merge entries.

    English keys are checked first (in their order), then Arabic-only keys.

    Raises:
        MissingPairError: a key lacks its counterpart, or its English text is empty
        ProcessingError: a mapping is not a dict or holds non-string values
    """
    if not isinstance(english, Mapping) or not isinstance(arabic, Mapping):
        raise ProcessingError("Translations must be JSON objects of key to text")

    entries = []
    for key, english_value in english.items():
        if key not in arabic:
            raise MissingPairError(key)
        english_text = _text(english_value, key)
        if not english_text:
            raise MissingPairError(key)
        entries.append(MergeEntry(key, english_text, _text(arabic[key], key)))

    for key in arabic:
        if key not in english:
            raise MissingPairError(key)

    return entries


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def pair_rows(rows: Iterable[Mapping[str, Any]]) -> list[MergeEntry]:
    """
    Turn spreadsheet rows into merge entries.

    Every row needs non-empty key, english and arabic. A row without a key
    is reported by its 1-based position, e.g. "row 3".
    """
    entries = []
    for number, row in enumerate(rows, start=1):
        key = _cell(row.get("key"))
        english = _cell(row.get("english"))
        arabic = _cell(row.get("arabic"))

        if not (key and english and arabic):
            raise MissingPairError(key or f"row {number}")

        entries.append(MergeEntry(key, english, arabic))

    return entries


class MergeEngine:
    """
    Reconciles validated entries against a TranslationStore snapshot.
    """

    def __init__(self, store: TranslationStore):
        self.store = store

    def merge_mappings(
        self,
        english: Mapping[str, Any],
        arabic: Mapping[str, Any],
        tags: list[str],
    ) -> MergeResult:
        try:
            entries = pair_mappings(english, arabic)
        except MissingPairError as e:
            return MergeResult(valid=False, missing_key=e.key)
        return self.merge(entries, tags)

    def merge_rows(self, rows: Iterable[Mapping[str, Any]], tags: list[str]) -> MergeResult:
        try:
            entries = pair_rows(rows)
        except MissingPairError as e:
            return MergeResult(valid=False, missing_key=e.key)
        return self.merge(entries, tags)

    def _update(self, record: TranslationRecord, tags: list[str]) -> None:
        record.tags = unique_tags(record.tags + tags)
        record.version = self.store.next_version()

    def merge(self, entries: list[MergeEntry], tags: list[str]) -> MergeResult:
        """
        Apply a validated batch.

        Args:
            entries: Validated MergeEntry triples
            tags: Tags attached to new records and unioned into updated ones

        Returns:
            MergeResult with the appended records and the updated existing ones
        """
        tags = unique_tags(tags)
        new_records: list[TranslationRecord] = []
        pending_by_text: dict[str, TranslationRecord] = {}
        pending_by_key: dict[str, TranslationRecord] = {}
        updated: dict[str, TranslationRecord] = {}

        for entry in entries:
            text = entry.english.lower()

            existing = self.store.match_english(entry.english)
            if existing is not None:
                existing.arabic = entry.arabic
                self._update(existing, tags)
                updated[existing.key] = existing
                continue

            # same English text earlier in this batch
            earlier = pending_by_text.get(text)
            if earlier is not None:
                earlier.arabic = entry.arabic
                continue

            keyed = self.store.match_key(entry.key)
            if keyed is not None:
                keyed.english = entry.english
                keyed.arabic = entry.arabic
                self._update(keyed, tags)
                updated[keyed.key] = keyed
                continue

            # same key earlier in this batch, different English text
            earlier = pending_by_key.get(entry.key)
            if earlier is not None:
                del pending_by_text[earlier.english.lower()]
                earlier.english = entry.english
                earlier.arabic = entry.arabic
                pending_by_text[text] = earlier
                continue

            record = TranslationRecord(
                key=entry.key,
                english=entry.english,
                arabic=entry.arabic,
                tags=list(tags),
            )
            pending_by_text[text] = record
            pending_by_key[entry.key] = record
            new_records.append(record)

        self.store.append_records(new_records)
        duplicates = list(updated.values())

        print(
            f"🔀 Merged {len(entries)} entries: "
            f"{len(new_records)} new, {len(duplicates)} updated"
        )
        return MergeResult(valid=True, new_records=new_records, duplicates=duplicates)
