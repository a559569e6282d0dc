"""Story draft validation. Fixed order, fail fast on the first broken rule."""

import logging
from typing import Any, Callable

from momandme.errors import ValidationError
from momandme.models import StoryDraft, StoryStatus

logger = logging.getLogger(__name__)

ALLOWED_STATUSES = frozenset(s.value for s in StoryStatus)

# Returns a problem description, or None when the draft passes
Check = Callable[[StoryDraft], str | None]


def is_integer(value: Any) -> bool:
    """JSON integer. Booleans and floats do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def _require_text(value: Any, name: str) -> str | None:
    if value is None:
        return f"{name} is required"
    if not isinstance(value, str):
        return f"{name} must be a string"
    if not value.strip():
        return f"{name} must not be blank"
    return None


def _optional_text(value: Any, name: str) -> str | None:
    if value is not None and not isinstance(value, str):
        return f"{name} must be a string"
    return None


def _require_title(draft: StoryDraft) -> str | None:
    return _require_text(draft.title, "title")


def _require_content(draft: StoryDraft) -> str | None:
    return _require_text(draft.content, "content")


def _require_age_group(draft: StoryDraft) -> str | None:
    age = draft.age_group
    if age is None:
        return "ageGroup is required"
    if not isinstance(age, dict):
        return "ageGroup must be an object with min and max"
    if age.get("min") is None or age.get("max") is None:
        return "ageGroup requires both min and max"
    if not is_integer(age["min"]) or not is_integer(age["max"]):
        return "ageGroup min and max must be integers"
    return None


def _check_age_order(draft: StoryDraft) -> str | None:
    age = draft.age_group
    if age["min"] > age["max"]:
        return f"ageGroup.min ({age['min']}) must not exceed ageGroup.max ({age['max']})"
    return None


def _check_age_non_negative(draft: StoryDraft) -> str | None:
    age = draft.age_group
    if age["min"] < 0 or age["max"] < 0:
        return "ageGroup bounds must be non-negative"
    return None


def _check_duration(draft: StoryDraft) -> str | None:
    minutes = draft.duration_minutes
    if minutes is None:
        return None
    if not is_integer(minutes):
        return "durationMinutes must be an integer"
    if minutes <= 0:
        return "durationMinutes must be positive"
    return None


def _check_status(draft: StoryDraft) -> str | None:
    status = draft.status
    if status is not None and (not isinstance(status, str) or status not in ALLOWED_STATUSES):
        allowed = ", ".join(sorted(ALLOWED_STATUSES))
        return f"status must be one of: {allowed}"
    return None


def _check_tags(draft: StoryDraft) -> str | None:
    tags = draft.tags
    if tags is not None and (
        not isinstance(tags, list) or not all(isinstance(t, str) for t in tags)
    ):
        return "tags must be a list of strings"
    return None


def _check_moral(draft: StoryDraft) -> str | None:
    return _optional_text(draft.moral, "moral")


def _check_language(draft: StoryDraft) -> str | None:
    return _optional_text(draft.language, "language")


# Presence checks first, then structural checks. Order matters.
CHECKS: list[tuple[str, Check]] = [
    ("title", _require_title),
    ("content", _require_content),
    ("ageGroup", _require_age_group),
    ("ageGroup", _check_age_order),
    ("ageGroup", _check_age_non_negative),
    ("durationMinutes", _check_duration),
    ("status", _check_status),
    ("tags", _check_tags),
    ("moral", _check_moral),
    ("language", _check_language),
]


def validate_draft(draft: StoryDraft) -> None:
    """Raise ValidationError for the first failing check."""
    for field, check in CHECKS:
        problem = check(draft)
        if problem:
            logger.info("Rejected story draft on %s: %s", field, problem)
            raise ValidationError(field, problem)
