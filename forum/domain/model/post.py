"""Post aggregate root.

Posts come in two kinds. Internal posts are discussions hosted on the forum,
external posts share a link to somewhere else. The kind is a plain field;
behaviour that differs between kinds is looked up in the tables below.
"""

from datetime import datetime
from typing import Callable, Optional

from pydantic import Field, field_validator, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.model.tag import Tag
from forum.domain.value import PostId, PostKind, UserId


def short_link(base: str, post_id: PostId) -> str:
    """Build the short link for a post, e.g. ``http://rbga.me/123``."""
    return f"{base}{post_id}"


def _check_internal(post: "Post") -> None:
    if post.url:
        raise ValueError("Internal posts cannot have a URL")


def _check_external(post: "Post") -> None:
    if not post.url:
        raise ValueError("URL is required for external posts")


def _internal_link(post: "Post", short_link_base: str) -> str:
    if post.id is None:
        raise ValueError("Post has no id yet")
    return short_link(short_link_base, post.id)


def _external_link(post: "Post", short_link_base: str) -> str:
    return post.url or ""


_CONTENT_RULES: dict[PostKind, Callable[["Post"], None]] = {
    PostKind.INTERNAL: _check_internal,
    PostKind.EXTERNAL: _check_external,
}

_LINK_RESOLVERS: dict[PostKind, Callable[["Post", str], str]] = {
    PostKind.INTERNAL: _internal_link,
    PostKind.EXTERNAL: _external_link,
}


class Post(DomainModel):
    """Post aggregate root.

    The title must be present (not blank). ``body_html`` is derived from
    ``body_markdown`` when the post is written. ``tags`` holds the post's
    current tag set, de-duplicated at write time.
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=1, max_length=300)
    kind: PostKind = PostKind.INTERNAL
    author_id: UserId
    url: Optional[str] = None
    body_markdown: str = ""
    body_html: str = ""
    tags: list[Tag] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title")
    @classmethod
    def validate_title_present(cls, v: str) -> str:
        """Reject whitespace-only titles."""
        if not v.strip():
            raise ValueError("Title must be present")
        return v

    @model_validator(mode="after")
    def validate_kind_content(self) -> "Post":
        """Apply the content rule for this post's kind."""
        _CONTENT_RULES[self.kind](self)
        return self

    @property
    def tag_titles(self) -> list[str]:
        """Titles of the post's tags."""
        return [tag.title.root for tag in self.tags]

    def link(self, short_link_base: str) -> str:
        """Where the post points readers to.

        Internal posts resolve to their short link, external posts to the
        shared URL.
        """
        return link_for(self, short_link_base)


def link_for(post: Post, short_link_base: str) -> str:
    """Resolve the link of ``post`` according to its kind."""
    return _LINK_RESOLVERS[post.kind](post, short_link_base)
