"""MongoDB-backed story store. Use when MONGODB_URI is set."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from momandme.errors import StoreUnavailableError
from momandme.models import Story
from momandme.persistence.base import StoryStore

logger = logging.getLogger(__name__)


class MongoStoryStore(StoryStore):
    """One MongoDB document per story. The document _id is the story id."""

    def __init__(
        self,
        uri: str,
        db_name: str = "momandme",
        collection_name: str = "stories",
        *,
        collection: Any = None,
    ) -> None:
        self._uri = uri
        self._db_name = db_name
        self._collection_name = collection_name
        self._collection = collection

    def _get_collection(self):
        """Lazy-init MongoDB collection."""
        if self._collection is None:
            client = MongoClient(self._uri)
            self._collection = client[self._db_name][self._collection_name]
        return self._collection

    def _to_document(self, story: Story) -> dict[str, Any]:
        doc = story.to_document()
        doc.pop("id", None)
        # Timestamps stay ISO-8601 strings; BSON dates keep only milliseconds
        return doc

    def save(self, story: Story) -> Story:
        """Insert story; the id is the stringified ObjectId."""
        try:
            result = self._get_collection().insert_one(self._to_document(story))
        except PyMongoError as e:
            logger.error("MongoDB story save failed: %s", e)
            raise StoreUnavailableError(f"Could not save story: {e}") from e
        return story.model_copy(update={"id": str(result.inserted_id)})

    def find_all(self) -> list[Story]:
        """Load every story document."""
        try:
            docs = list(self._get_collection().find())
        except PyMongoError as e:
            logger.error("MongoDB story read failed: %s", e)
            raise StoreUnavailableError(f"Could not load stories: {e}") from e

        stories: list[Story] = []
        for doc in docs:
            doc["id"] = str(doc.pop("_id"))
            try:
                stories.append(Story.model_validate(doc))
            except PydanticValidationError as e:
                logger.error("Could not decode story %s: %s", doc["id"], e)
                raise StoreUnavailableError(f"Could not load story {doc['id']}") from e
        return stories
