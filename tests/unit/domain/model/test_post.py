"""Unit tests for the Post model and its kind dispatch."""

import pytest

from forum.domain.model import Post, Tag
from forum.domain.model.post import link_for, short_link
from forum.domain.value import PostId, PostKind, TagTitle, UserId


def _post(**fields) -> Post:
    defaults = {"title": "A post", "author_id": UserId(1)}
    return Post(**{**defaults, **fields})


class TestPostValidation:
    """Tests for Post construction rules."""

    def test_internal_is_the_default_kind(self):
        assert _post().kind == PostKind.INTERNAL

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_rejected(self, title):
        with pytest.raises(ValueError):
            _post(title=title)

    def test_external_post_requires_url(self):
        with pytest.raises(ValueError, match="URL is required"):
            _post(kind=PostKind.EXTERNAL)

    def test_internal_post_cannot_have_url(self):
        with pytest.raises(ValueError, match="cannot have a URL"):
            _post(url="https://example.com")

    def test_external_post_with_url_is_valid(self):
        post = _post(kind=PostKind.EXTERNAL, url="https://example.com/a")
        assert post.url == "https://example.com/a"


class TestPostLinks:
    """Tests for link resolution by kind."""

    def test_short_link(self):
        assert short_link("http://rbga.me/", PostId(123)) == "http://rbga.me/123"

    def test_internal_post_links_to_short_link(self):
        post = _post(id=PostId(7))
        assert link_for(post, "http://rbga.me/") == "http://rbga.me/7"
        assert post.link("http://rbga.me/") == "http://rbga.me/7"

    def test_external_post_links_to_its_url(self):
        post = _post(id=PostId(7), kind=PostKind.EXTERNAL, url="https://example.com")
        assert link_for(post, "http://rbga.me/") == "https://example.com"

    def test_unsaved_internal_post_has_no_link(self):
        with pytest.raises(ValueError, match="no id"):
            link_for(_post(), "http://rbga.me/")


def test_tag_titles():
    post = _post(tags=[Tag(title=TagTitle("ruby")), Tag(title=TagTitle("css"))])
    assert post.tag_titles == ["ruby", "css"]
