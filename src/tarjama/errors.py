"""Exception hierarchy for the translation store."""


class TranslationStoreError(Exception):
    """Base exception for all translation store errors."""

    status_code = 500


class NotFoundError(TranslationStoreError):
    """Lookup by key or text found nothing."""

    status_code = 404


class KeyNotFoundError(NotFoundError):
    def __init__(self, key: str):
        self.key = key
        super().__init__("Key not found")


class TranslationNotFoundError(NotFoundError):
    def __init__(self, text: str):
        self.text = text
        super().__init__("Translation not found")


class MissingPairError(TranslationStoreError):
    """A key is missing its English or Arabic counterpart."""

    status_code = 400

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Both English and Arabic translations must be present for the key: {key}"
        )


class ProcessingError(TranslationStoreError):
    """Uploaded or posted content could not be read."""
