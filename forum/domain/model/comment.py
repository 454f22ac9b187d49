"""Comment entity.

Comments hang off a post (their parent). Besides being shown under the post
they are one of the sources the search looks at.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post."""

    id: Optional[CommentId] = None
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
