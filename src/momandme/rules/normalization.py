"""Draft -> Story normalization: validation plus defaulting. Pure, no storage."""

from datetime import datetime, timezone

from momandme.models import (
    AgeGroup,
    SourceType,
    Story,
    StoryDraft,
    StorySource,
    StoryStatus,
)
from momandme.rules.validation import validate_draft

DEFAULT_LANGUAGE = "en"
DEFAULT_STATUS = StoryStatus.PUBLISHED

# Forced until stories can be authored by signed-in users
SYSTEM_AUTHOR = "system"


def normalize_draft(draft: StoryDraft, now: datetime | None = None) -> Story:
    """
    Validate the draft and build an unsaved Story (id is None).
    Defaults fill only absent/null fields; createdBy, source and timestamps are always forced.
    """
    validate_draft(draft)
    now = now or datetime.now(timezone.utc)
    return Story(
        title=draft.title,
        content=draft.content,
        age_group=AgeGroup(min=draft.age_group["min"], max=draft.age_group["max"]),
        duration_minutes=draft.duration_minutes,
        tags=list(draft.tags) if draft.tags is not None else [],
        moral=draft.moral,
        language=draft.language if draft.language is not None else DEFAULT_LANGUAGE,
        status=StoryStatus(draft.status) if draft.status is not None else DEFAULT_STATUS,
        created_by=SYSTEM_AUTHOR,
        source=StorySource(type=SourceType.STATIC, reference_id=None),
        created_at=now,
        updated_at=now,
    )
