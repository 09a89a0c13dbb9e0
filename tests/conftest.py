"""Shared fixtures for the document analyzer tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from docanalyzer.core.lexicon import LexiconTables, load_tables
from docanalyzer.main import app, get_storage
from docanalyzer.storage import MemStorage


@pytest.fixture(scope="session")
def tables() -> LexiconTables:
    return load_tables()


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage(seed_samples=True)


@pytest.fixture
def client(storage: MemStorage):
    """Test client backed by a fresh, seeded storage instance."""
    app.dependency_overrides[get_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
