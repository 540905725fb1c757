"""Question rendering utilities for the quiz view."""

from __future__ import annotations

from mathmaster.core.fraction_visual import render_fraction_svg
from mathmaster.core.markdown_math_renderer import renderer
from mathmaster.core.models import Question
from mathmaster.styling.color_palette import pie_color

_PIE_SIZE = 140


def render_question_html(question: Question, font_size: int = 20) -> str:
    """Render a question's text (and fraction pies, if any) as HTML for QWebEngineView.

    Options are not part of the document; the quiz panel shows them as buttons.
    """
    visuals = ""
    if question.fraction_data:
        pies = "".join(
            render_fraction_svg(fraction.numerator, fraction.denominator, _PIE_SIZE, pie_color(idx))
            for idx, fraction in enumerate(question.fraction_data)
        )
        visuals = f'<div class="fraction-visuals">{pies}</div>'
    return renderer.render_full_document(
        question.text, font_size=font_size, prefix_html=visuals
    )


def render_loading_html(message: str, font_size: int = 20) -> str:
    return renderer.wrap_with_mathjax(f"<p><em>{message}</em></p>", font_size=font_size)
