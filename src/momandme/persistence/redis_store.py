"""Redis-backed story store for cloud deployment. Use when REDIS_URL is set."""

import json
import logging
import uuid

import redis
from pydantic import ValidationError as PydanticValidationError

from momandme.errors import StoreUnavailableError
from momandme.models import Story
from momandme.persistence.base import StoryStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "momandme"


class RedisStoryStore(StoryStore):
    """Redis-backed story store. One JSON value per story plus a set of ids."""

    def __init__(self, redis_url: str) -> None:
        self._redis_url = redis_url
        self._client = None

    def _get_client(self):
        """Lazy-init Redis client."""
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                decode_responses=True,
            )
        return self._client

    def _key(self, story_id: str) -> str:
        return f"{KEY_PREFIX}:story:{story_id}"

    def _index_key(self) -> str:
        return f"{KEY_PREFIX}:stories"

    def save(self, story: Story) -> Story:
        """Write story document and index it in one MULTI/EXEC transaction."""
        saved = story if story.id else story.model_copy(update={"id": uuid.uuid4().hex})
        try:
            pipe = self._get_client().pipeline(transaction=True)
            pipe.set(self._key(saved.id), json.dumps(saved.to_document()))
            pipe.sadd(self._index_key(), saved.id)
            pipe.execute()
        except redis.RedisError as e:
            logger.error("Redis story save failed: %s", e)
            raise StoreUnavailableError(f"Could not save story: {e}") from e
        return saved

    def find_all(self) -> list[Story]:
        """Load every indexed story."""
        try:
            r = self._get_client()
            ids = sorted(r.smembers(self._index_key()))
            if not ids:
                return []
            values = r.mget([self._key(story_id) for story_id in ids])
        except redis.RedisError as e:
            logger.error("Redis story read failed: %s", e)
            raise StoreUnavailableError(f"Could not load stories: {e}") from e

        stories: list[Story] = []
        for story_id, raw in zip(ids, values):
            if raw is None:
                logger.warning("Story %s is indexed but has no document", story_id)
                continue
            try:
                stories.append(Story.model_validate(json.loads(raw)))
            except (json.JSONDecodeError, PydanticValidationError) as e:
                logger.error("Could not decode story %s: %s", story_id, e)
                raise StoreUnavailableError(f"Could not load story {story_id}") from e
        return stories
