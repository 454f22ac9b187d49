"""Tag entity for categorizing posts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import TagId, TagTitle


class Tag(DomainModel):
    """Tag entity.

    The normalized title is the natural key: two tags with the same title
    are the same tag. Tags are created on first use and never mutated.
    """

    id: Optional[TagId] = None
    title: TagTitle
    created_at: datetime = Field(default_factory=datetime.now)
