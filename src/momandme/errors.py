"""Story errors - translated to HTTP responses by the API layer."""


class StoryError(Exception):
    """Base class for story service errors."""


class ValidationError(StoryError):
    """A draft field is missing, empty, out of range or not an allowed value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class StoreUnavailableError(StoryError):
    """The story store could not be reached or failed a read/write."""
