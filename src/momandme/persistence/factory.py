"""Store factory - creates a file, Redis or MongoDB story store based on config."""

from pathlib import Path

from momandme.config import Settings, get_settings
from momandme.persistence.base import StoryStore
from momandme.persistence.mongo_store import MongoStoryStore
from momandme.persistence.redis_store import RedisStoryStore
from momandme.persistence.story_store import FileStoryStore


def create_story_store(settings: Settings | None = None) -> StoryStore:
    """
    Create the story store.
    MONGODB_URI wins over REDIS_URL; with neither set, stories are JSON files under DATA_DIR.
    """
    settings = settings or get_settings()
    if settings.mongodb_uri:
        return MongoStoryStore(
            settings.mongodb_uri,
            settings.mongodb_db,
            settings.mongodb_collection,
        )
    if settings.redis_url:
        return RedisStoryStore(settings.redis_url)
    return FileStoryStore(Path(settings.data_dir))
