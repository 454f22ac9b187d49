"""Markdown rendering for post bodies.

Raw HTML in the source is not passed through, so rendered bodies are safe to
embed in pages and digest emails.
"""

import html

import logfire
from markdown_it import MarkdownIt

_md = MarkdownIt(
    "commonmark",
    {
        "html": False,
        "typographer": True,
    },
)
_md.enable(["table", "strikethrough"])


def render_markdown(text: str | None) -> str:
    """Render markdown source to HTML.

    Args:
        text: Markdown source (may be empty)

    Returns:
        HTML string, empty for empty input
    """
    if not text:
        return ""

    try:
        return _md.render(text)
    except Exception as e:
        logfire.warn("Markdown rendering failed", error=str(e))
        return f"<p>{html.escape(text)}</p>"
