"""Unit tests for markdown rendering."""

from forum.util.markdown import render_markdown


def test_empty_source_renders_empty():
    assert render_markdown("") == ""
    assert render_markdown(None) == ""


def test_emphasis_and_headings():
    html = render_markdown("# Title\n\nSome *text*")

    assert "<h1>Title</h1>" in html
    assert "<em>text</em>" in html


def test_raw_html_is_not_passed_through():
    html = render_markdown("<script>alert(1)</script>")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_strikethrough_is_enabled():
    assert "<s>gone</s>" in render_markdown("~~gone~~")
