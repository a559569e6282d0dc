"""Story data models - draft input and persisted record."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StoryStatus(str, Enum):
    """Publication status of a story."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class SourceType(str, Enum):
    """Where a story came from."""

    STATIC = "static"
    AI = "ai"
    USER = "user"


class _CamelModel(BaseModel):
    """JSON uses camelCase field names; Python attributes stay snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AgeGroup(_CamelModel):
    """Validated age range embedded in a story."""

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)


class StorySource(_CamelModel):
    """Origin of a story, embedded in the story document."""

    type: SourceType = Field(default=SourceType.STATIC)
    reference_id: str | None = Field(default=None, description="Id in the originating system")


class StoryDraft(_CamelModel):
    """
    Caller-supplied story fields before normalization.
    Values are kept exactly as received (no coercion, no type checks) so that
    every check, type checks included, runs in the fixed order of
    momandme.rules.validation. Unknown fields (createdBy, source, id, ...) are ignored.
    """

    title: Any = Field(default=None, description="Story title, non-blank string")
    content: Any = Field(default=None, description="Story text, non-blank string")
    age_group: Any = Field(default=None, description='Object {"min": int, "max": int}')
    duration_minutes: Any = Field(default=None, description="Positive integer")
    tags: Any = Field(default=None, description="List of strings")
    moral: Any = Field(default=None, description="Optional string")
    language: Any = Field(default=None, description="Optional language code")
    status: Any = Field(default=None, description="draft, published or archived")


class Story(_CamelModel):
    """Persisted story record. Immutable once stored."""

    id: str | None = Field(default=None, description="Assigned by the store on first save")
    title: str
    content: str
    age_group: AgeGroup
    duration_minutes: int | None = None
    tags: list[str] = Field(default_factory=list)
    moral: str | None = None
    language: str = Field(default="en", description="Language code")
    status: StoryStatus = Field(default=StoryStatus.PUBLISHED)
    created_by: str = Field(default="system")
    source: StorySource = Field(default_factory=StorySource)
    created_at: datetime
    updated_at: datetime

    def to_document(self) -> dict[str, Any]:
        """JSON-ready document with camelCase keys, as stored and served."""
        return self.model_dump(mode="json", by_alias=True)
