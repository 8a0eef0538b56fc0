"""Markdown rendering for question text shown in Qt rich-text labels.

Architecture note:
    Questions are authored in markdown and rendered to the HTML subset that
    QLabel understands. Raw HTML in the source is disabled so a question file
    cannot inject markup into the window.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments for rich-text widgets."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_for_label(self, markdown_text: str, font_size: int, color: str) -> str:
        """Render markdown and wrap it in a styled block for a QLabel."""

        fragment = self.render_fragment(markdown_text)
        return (
            f'<div style="font-size: {font_size}pt; color: {escape(color)};">'
            f"{fragment}</div>"
        )


renderer = MarkdownRenderer()
# Shared instance to avoid rebuilding MarkdownIt; only used from the Qt thread.
