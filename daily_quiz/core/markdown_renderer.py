"""Markdown rendering helpers for the question and reader views.

Architecture note:
    Trivia text arrives as plain text, so every ASCII punctuation mark is
    backslash-escaped before rendering. Markdown then only contributes the
    surrounding structure (headings, bold option letters, paragraphs), and a
    question such as "What is 2*3*4?" is not turned into emphasis. The HTML
    produced stays within the subset ``QTextBrowser`` understands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import string

from markdown_it import MarkdownIt

_ESCAPE_TABLE = str.maketrans({char: f"\\{char}" for char in string.punctuation})


def escape_markdown(text: str) -> str:
    return text.translate(_ESCAPE_TABLE)


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html})

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, font_size: int = 18) -> str:
        return (
            "<html><head><meta charset=\"utf-8\" /></head>"
            f"<body style=\"font-size: {font_size}pt;\">{body_html}</body></html>"
        )

    def render_question(self, question_text: str, font_size: int = 18) -> str:
        """Render a trivia question as a heading."""
        fragment = self.render_fragment(f"### {escape_markdown(question_text.strip())}")
        return self.wrap_document(fragment, font_size=font_size)

    def render_article(self, title: str, article_text: str, font_size: int = 18) -> str:
        """Render extracted article text under its source title."""
        body = escape_markdown(article_text) if article_text else "*Nothing readable was found on this page.*"
        fragment = self.render_fragment(f"## {escape_markdown(title)}\n\n{body}")
        return self.wrap_document(fragment, font_size=font_size)


# Shared instance; the Qt UI renders from the main thread only.
renderer = MarkdownRenderer()
