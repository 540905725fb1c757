"""SVG pie rendering for graphical fraction questions."""

from __future__ import annotations

import math

_VIEWBOX = 100
_RADIUS = 50
_CENTER = 50
_BACKGROUND_FILL = "#e2e8f0"
_OUTLINE_STROKE = "#94a3b8"
DEFAULT_PIE_COLOR = "#3b82f6"


def fraction_slice_path(numerator: int, denominator: int) -> str:
    """Return the SVG path for the filled share of the pie.

    Improper fractions are capped to one full circle. The slice starts at
    twelve o'clock and runs clockwise.
    """
    if denominator <= 0:
        raise ValueError("Denominator must be positive.")

    share = min(1.0, max(0.0, numerator / denominator))
    if share >= 1.0:
        return (
            f"M {_CENTER}, {_CENTER} m -{_RADIUS}, 0 "
            f"a {_RADIUS},{_RADIUS} 0 1,0 {_RADIUS * 2},0 "
            f"a {_RADIUS},{_RADIUS} 0 1,0 -{_RADIUS * 2},0"
        )

    end_angle = math.radians(share * 360 - 90)
    end_x = _CENTER + _RADIUS * math.cos(end_angle)
    end_y = _CENTER + _RADIUS * math.sin(end_angle)
    large_arc = 1 if share > 0.5 else 0
    return (
        f"M {_CENTER},{_CENTER} L {_CENTER},{_CENTER - _RADIUS} "
        f"A {_RADIUS},{_RADIUS} 0 {large_arc},1 {end_x:.3f},{end_y:.3f} Z"
    )


def render_fraction_svg(
    numerator: int,
    denominator: int,
    size: int = 64,
    color: str = DEFAULT_PIE_COLOR,
) -> str:
    """Render a standalone ``<svg>`` element showing ``numerator/denominator`` as a pie."""
    path = fraction_slice_path(numerator, denominator)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {_VIEWBOX} {_VIEWBOX}" role="img" '
        f'aria-label="{numerator}/{denominator}">'
        f'<circle cx="{_CENTER}" cy="{_CENTER}" r="{_RADIUS}" fill="{_BACKGROUND_FILL}" />'
        f'<path d="{path}" fill="{color}" stroke="white" stroke-width="2" />'
        f'<circle cx="{_CENTER}" cy="{_CENTER}" r="{_RADIUS}" fill="none" '
        f'stroke="{_OUTLINE_STROKE}" stroke-width="2" />'
        "</svg>"
    )
