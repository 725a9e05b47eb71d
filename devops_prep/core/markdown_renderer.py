"""Markdown rendering for question prompts, answers and scenario texts.

Questions and incident scenarios routinely contain shell snippets and YAML
manifests, so fenced code blocks and tables are the features that matter.
Raw HTML in the source is escaped rather than passed through because the
content comes from a shared question bank.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or standalone documents for QTextBrowser."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, text_color: str = "#1f2937") -> str:
        # QTextBrowser understands a subset of CSS; keep this to simple properties.
        return f"""<html>
  <head>
    <style>
      body {{ font-family: 'Segoe UI', sans-serif; font-size: 15px; color: {text_color}; }}
      pre {{ background-color: #0f172a; color: #e2e8f0; padding: 8px; }}
      code {{ font-family: 'Consolas', 'DejaVu Sans Mono', monospace; }}
      table {{ border-collapse: collapse; }}
      td, th {{ border: 1px solid #cbd5e1; padding: 4px; }}
    </style>
  </head>
  <body>{body_html}</body>
</html>"""

    def render_document(self, markdown_text: str | None, text_color: str = "#1f2937") -> str:
        return self.wrap_document(self.render_fragment(markdown_text), text_color=text_color)


# Shared instance; MarkdownIt renders are read-only so worker threads may reuse it.
renderer = MarkdownRenderer()
