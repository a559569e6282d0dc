"""Story service - business logic layer."""

import logging
from typing import Iterable

from momandme.models import Story, StoryDraft
from momandme.persistence import StoryStore
from momandme.rules import normalize_draft

logger = logging.getLogger(__name__)


class StoryService:
    """Creates and lists stories. Holds no state; everything lives in the store."""

    def __init__(self, story_store: StoryStore) -> None:
        self._store = story_store

    def create_story(self, draft: StoryDraft) -> Story:
        """
        Normalize the draft and store it. The store write is the last step,
        so a ValidationError leaves the store untouched.
        """
        story = normalize_draft(draft)
        saved = self._store.save(story)
        logger.info("Created story %s (%s)", saved.id, saved.title)
        return saved

    def list_stories(self) -> list[Story]:
        """All stories, newest first."""
        return sorted(self._store.find_all(), key=lambda s: s.created_at, reverse=True)

    def seed_stories(self, drafts: Iterable[StoryDraft]) -> list[Story]:
        """
        Import static stories. Skipped when the store already has stories.
        Every draft is normalized before the first write, so one bad draft stores nothing.
        """
        if self._store.find_all():
            logger.info("Story store not empty, skipping seed")
            return []
        stories = [normalize_draft(draft) for draft in drafts]
        created = [self._store.save(story) for story in stories]
        logger.info("Seeded %d stories", len(created))
        return created
