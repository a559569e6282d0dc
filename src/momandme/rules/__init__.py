"""Story rules - validation and defaulting applied before anything is stored."""

from momandme.rules.normalization import normalize_draft
from momandme.rules.validation import validate_draft

__all__ = ["normalize_draft", "validate_draft"]
