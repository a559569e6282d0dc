"""Business logic services."""

from momandme.services.story_service import StoryService

__all__ = ["StoryService"]
