"""Shared test fixtures for tarjama."""

import pytest
from fastapi.testclient import TestClient

from tarjama.main import create_app
from tarjama.merge import MergeEngine
from tarjama.store import TranslationStore


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "translations.json"


@pytest.fixture
def store(store_path):
    """Empty store backed by a temp file."""
    return TranslationStore(store_path)


@pytest.fixture
def store_with_data(store):
    """Store with two records, tagged 'app' and 'web'."""
    store.upsert("greeting", "Hello", "مرحبا", ["app"])
    store.upsert("farewell", "Goodbye", "مع السلامة", ["web"])
    return store


@pytest.fixture
def engine(store_with_data):
    return MergeEngine(store_with_data)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(store_path, upload_dir):
    """API client over a fresh app with an empty store file."""
    app = create_app(translations_file=str(store_path), upload_dir=str(upload_dir))
    with TestClient(app) as c:
        yield c
