"""Persistence layer."""

from momandme.persistence.base import StoryStore
from momandme.persistence.factory import create_story_store
from momandme.persistence.mongo_store import MongoStoryStore
from momandme.persistence.redis_store import RedisStoryStore
from momandme.persistence.story_store import FileStoryStore

__all__ = [
    "FileStoryStore",
    "MongoStoryStore",
    "RedisStoryStore",
    "StoryStore",
    "create_story_store",
]
