"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class PostKind(str, Enum):
    """Kind of post.

    Internal posts are discussions hosted here, external posts link out.
    """

    INTERNAL = "internal"
    EXTERNAL = "external"


class DigestFrequency(str, Enum):
    """How often a digest is sent."""

    DAILY = "daily"
    WEEKLY = "weekly"


class TagTitle(RootValueObject[str]):
    """Normalized tag title.

    Titles are trimmed and lower-cased on construction, so ``TagTitle(" Ruby")``
    and ``TagTitle("ruby")`` are equal. A title is a single token: it cannot
    contain commas or whitespace, which separate tags in a tags string.
    """

    @field_validator("root")
    @classmethod
    def normalize_title(cls, v: str) -> str:
        """Trim, lower-case and validate a tag title."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Tag title must not be blank")
        if len(v) > 255:
            raise ValueError("Tag title must be at most 255 characters")
        if re.search(r"[\s,]", v):
            raise ValueError("Tag title must not contain commas or whitespace")
        return v


class Handle(RootValueObject[str]):
    """User handle shown next to posts and comments."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
