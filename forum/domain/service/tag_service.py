"""Tag domain service."""

import re

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.model.tag import Tag
from forum.domain.repository.tag import TagRepository
from forum.domain.value import TagTitle

from .base import Service

# Any run of commas and/or whitespace separates two tags
_TAG_SEPARATOR = re.compile(r"[\s,]+")


def parse_tag_titles(raw: str | None) -> list[TagTitle]:
    """Split a tags string into normalized, de-duplicated titles.

    Tokens are trimmed and lower-cased, empty tokens are dropped and repeated
    titles keep their first position.

    Examples:
        >>> [t.root for t in parse_tag_titles(" Ruby,  rails,CSS  ")]
        ['ruby', 'rails', 'css']
        >>> [t.root for t in parse_tag_titles("ruby, rails, ruby")]
        ['ruby', 'rails']

    Args:
        raw: Free-text tags string

    Returns:
        Ordered list of distinct tag titles

    Raises:
        ValueError: If a token is not a valid tag title (e.g. too long)
    """
    titles: list[TagTitle] = []
    seen: set[str] = set()
    for token in _TAG_SEPARATOR.split(raw or ""):
        token = token.strip().lower()
        if not token or token in seen:
            continue
        seen.add(token)
        titles.append(TagTitle(token))
    return titles


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def normalize(self, raw: str | None) -> list[Tag]:
        """Turn a tags string into persisted tags.

        Existing tags are reused, missing ones are created. The result keeps
        the first-occurrence order of the titles in ``raw``.

        Args:
            raw: Free-text tags string, e.g. ``"ruby, rails css"``

        Returns:
            Distinct tags, empty for a blank string
        """
        with logfire.span("tag_service.normalize", raw=raw):
            titles = parse_tag_titles(raw)
            if not titles:
                logfire.info("Blank tags string")
                return []

            existing = {
                tag.title.root: tag
                for tag in await self.tag_repository.find_by_titles(titles)
            }

            tags = []
            for title in titles:
                tag = existing.get(title.root)
                if tag is None:
                    tag = await self.find_or_create(title)
                tags.append(tag)

            logfire.info(
                "Tags normalized",
                titles=[t.root for t in titles],
                created=len(titles) - len(existing),
            )
            return tags

    async def find_or_create(self, title: TagTitle) -> Tag:
        """Fetch the tag with ``title``, creating it on first use.

        A concurrent writer may insert the same title between our lookup and
        our insert. The unique constraint on the title rejects the second
        insert, and we return the row the other writer created.

        Args:
            title: Normalized tag title

        Returns:
            The persisted tag
        """
        tag = await self.tag_repository.find_by_title(title)
        if tag is not None:
            return tag

        try:
            tag = await self.tag_repository.create(Tag(title=title))
            logfire.info("Tag created", tag_title=title.root, tag_id=tag.id)
            return tag
        except IntegrityError:
            logfire.warn("Tag created concurrently, reusing it", tag_title=title.root)

        tag = await self.tag_repository.find_by_title(title)
        if tag is None:
            # The conflicting row is gone again (e.g. its transaction rolled back)
            tag = await self.tag_repository.create(Tag(title=title))
        return tag
