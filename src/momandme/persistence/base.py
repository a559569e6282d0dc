"""Story store abstract interface - document persistence."""

from abc import ABC, abstractmethod

from momandme.models import Story


class StoryStore(ABC):
    """Document store for stories. One story is one document."""

    @abstractmethod
    def save(self, story: Story) -> Story:
        """
        Write the story as a single document and return it with its store-assigned id.
        Raises StoreUnavailableError when the write fails.
        """
        ...

    @abstractmethod
    def find_all(self) -> list[Story]:
        """All stored stories, in store order. Empty list when there are none."""
        ...
