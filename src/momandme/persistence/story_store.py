"""Story persistence - JSON file storage, one document per story."""

import json
import logging
import uuid
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from momandme.errors import StoreUnavailableError
from momandme.models import Story
from momandme.persistence.base import StoryStore

logger = logging.getLogger(__name__)


class FileStoryStore(StoryStore):
    """File-based story store. Each story lives in <data_dir>/stories/<id>.json."""

    def __init__(self, data_dir: Path) -> None:
        self._dir = Path(data_dir) / "stories"
        self._dir.mkdir(parents=True, exist_ok=True)

    def _story_path(self, story_id: str) -> Path:
        return self._dir / f"{story_id}.json"

    def save(self, story: Story) -> Story:
        """Write story atomically (temp file + rename)."""
        saved = story if story.id else story.model_copy(update={"id": uuid.uuid4().hex})
        path = self._story_path(saved.id)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            with tmp_path.open("w") as f:
                json.dump(saved.to_document(), f, indent=2)
            tmp_path.replace(path)
        except OSError as e:
            logger.error("Could not save story %s: %s", path, e)
            raise StoreUnavailableError(f"Could not save story: {e}") from e
        return saved

    def find_all(self) -> list[Story]:
        """Load every story document. A corrupt document fails the whole read."""
        stories: list[Story] = []
        for path in sorted(self._dir.glob("*.json")):
            try:
                with path.open() as f:
                    data = json.load(f)
                stories.append(Story.model_validate(data))
            except (json.JSONDecodeError, OSError, PydanticValidationError) as e:
                logger.error("Could not load story %s: %s", path, e)
                raise StoreUnavailableError(f"Could not load story {path.stem}") from e
        return stories
