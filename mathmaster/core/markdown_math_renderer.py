"""Markdown + LaTeX rendering for question text shown in the quiz view.

Theory questions come back from Gemini as free text that may contain
``**bold**`` or ``$x$`` fragments, so every question goes through the same
markdown pipeline and MathJax typesets the result inside QWebEngineView.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

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

        sanitized = markdown_text.strip() or ""
        if not sanitized:
            return "<p><em>Sin contenido.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "MathMaster 7",
        font_size: int = 14,
    ) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"es\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{title}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: #1f2937; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; text-align: center; font-weight: 700; }}
      .fraction-visuals {{ display: flex; justify-content: center; gap: 1.5rem; margin-bottom: 1rem; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    <div class=\"question-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(
        self,
        markdown_text: str,
        title: str = "MathMaster 7",
        font_size: int = 14,
        prefix_html: str = "",
    ) -> str:
        """Render markdown and embed MathJax; ``prefix_html`` is trusted markup placed first."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_with_mathjax(prefix_html + fragment, title=title, font_size=font_size)


# Shared instance; the Qt UI renders from a single thread.
renderer = MarkdownMathRenderer()
