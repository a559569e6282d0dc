"""Shared fixtures for story tests."""

from typing import Any

import pytest

from momandme.models import StoryDraft
from momandme.persistence import FileStoryStore
from momandme.services import StoryService


def make_draft(**overrides: Any) -> StoryDraft:
    """Valid draft as it arrives on the wire (camelCase keys)."""
    data: dict[str, Any] = {
        "title": "The Kind Fox",
        "content": "Once upon a time a little fox helped a bird.",
        "ageGroup": {"min": 4, "max": 6},
        "durationMinutes": 5,
        "tags": ["bedtime"],
        "moral": "Be kind",
    }
    data.update(overrides)
    return StoryDraft.model_validate(data)


@pytest.fixture
def file_store(tmp_path) -> FileStoryStore:
    return FileStoryStore(tmp_path)


@pytest.fixture
def service(file_store) -> StoryService:
    return StoryService(file_store)
