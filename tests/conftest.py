# tests/conftest.py
from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path

import pytest

from contact_feed.infrastructure.external_apis.contact_feed.types import ContactDocument
from contact_feed.infrastructure.logging.logger import set_run_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clear_run_context() -> Generator[None, None, None]:
    """Make sure no run id leaks between tests."""
    set_run_context(run_id=None)
    yield
    set_run_context(run_id=None)


@pytest.fixture
def contacts_path() -> Path:
    """Path to the three-entry sample contact document."""
    return FIXTURES_DIR / "contacts.json"


@pytest.fixture
def sample_document(contacts_path: Path) -> ContactDocument:
    """Parsed sample contact document."""
    return json.loads(contacts_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_bytes(contacts_path: Path) -> bytes:
    """Raw bytes of the sample contact document."""
    return contacts_path.read_bytes()
