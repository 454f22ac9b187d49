"""Unit tests for TagService."""

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model.tag import Tag
from forum.domain.repository import TagRepository
from forum.domain.service import TagService, parse_tag_titles
from forum.domain.value import TagTitle
from forum.persistence.repository.inmemory import InMemoryTagRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestParseTagTitles:
    """Tests for tags string parsing."""

    def test_mixed_separators_and_case(self):
        titles = parse_tag_titles(" Ruby,  rails,CSS  ")
        assert [t.root for t in titles] == ["ruby", "rails", "css"]

    def test_duplicates_collapse_keeping_first_position(self):
        titles = parse_tag_titles("ruby, rails, ruby")
        assert [t.root for t in titles] == ["ruby", "rails"]

    def test_duplicates_differing_in_case_collapse(self):
        assert [t.root for t in parse_tag_titles("Ruby ruby RUBY")] == ["ruby"]

    @pytest.mark.parametrize("raw", [None, "", "   ", " , ,, "])
    def test_blank_input_yields_nothing(self, raw):
        assert parse_tag_titles(raw) == []


class TestNormalize:
    """Tests for TagService.normalize."""

    @pytest.mark.asyncio
    async def test_creates_missing_tags(self, unit_env):
        tag_service = await unit_env.get(TagService)

        tags = await tag_service.normalize(" Ruby,  rails,CSS  ")

        assert [t.title.root for t in tags] == ["ruby", "rails", "css"]
        assert all(t.id is not None for t in tags)

    @pytest.mark.asyncio
    async def test_reuses_existing_tags(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)

        first = await tag_service.normalize("ruby, great")
        second = await tag_service.normalize("rails, great")

        all_tags = await tag_repo.find_all()
        assert sorted(t.title.root for t in all_tags) == ["great", "rails", "ruby"]
        assert first[1].id == second[1].id

    @pytest.mark.asyncio
    async def test_repeated_titles_yield_one_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)

        tags = await tag_service.normalize("ruby, rails, ruby")

        assert [t.title.root for t in tags] == ["ruby", "rails"]

    @pytest.mark.asyncio
    async def test_blank_input_yields_empty_list(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_service.normalize("  ,  ") == []
        assert await tag_repo.find_all() == []


class _RacingTagRepository(InMemoryTagRepository):
    """Simulates another writer inserting the same title first."""

    def __init__(self) -> None:
        super().__init__()
        self.create_calls = 0

    async def create(self, tag: Tag) -> Tag:
        self.create_calls += 1
        if self.create_calls == 1:
            # The other writer wins the race
            await super().create(tag)
            raise IntegrityError("Duplicate tag title", None, Exception())
        return await super().create(tag)


class TestFindOrCreate:
    """Tests for the find-or-create race handling."""

    @pytest.mark.asyncio
    async def test_unique_violation_reselects_existing_tag(self):
        repo = _RacingTagRepository()
        tag_service = TagService(tag_repository=repo)

        tag = await tag_service.find_or_create(TagTitle("ruby"))

        assert tag.title.root == "ruby"
        assert repo.create_calls == 1
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_returns_existing_tag_without_insert(self):
        repo = _RacingTagRepository()
        existing = await InMemoryTagRepository.create(repo, Tag(title=TagTitle("css")))
        tag_service = TagService(tag_repository=repo)

        tag = await tag_service.find_or_create(TagTitle("CSS"))

        assert tag == existing
        assert repo.create_calls == 0
