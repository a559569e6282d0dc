"""Data models."""

from momandme.models.story import (
    AgeGroup,
    SourceType,
    Story,
    StoryDraft,
    StorySource,
    StoryStatus,
)

__all__ = [
    "AgeGroup",
    "SourceType",
    "Story",
    "StoryDraft",
    "StorySource",
    "StoryStatus",
]
