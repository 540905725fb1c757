from __future__ import annotations

import pytest

from mathmaster.core.fraction_visual import fraction_slice_path, render_fraction_svg


def test_quarter_slice_ends_at_three_oclock():
    path = fraction_slice_path(1, 4)

    assert path.startswith("M 50,50 L 50,0")
    assert path.endswith("100.000,50.000 Z")
    assert " 0 0,1 " in path


def test_more_than_half_uses_large_arc():
    assert " 0 1,1 " in fraction_slice_path(3, 4)


@pytest.mark.parametrize(("numerator", "denominator"), [(4, 4), (7, 3)])
def test_whole_or_improper_fraction_draws_full_circle(numerator, denominator):
    path = fraction_slice_path(numerator, denominator)

    assert "A" not in path
    assert path.count("a 50,50") == 2


@pytest.mark.parametrize("denominator", [0, -2])
def test_non_positive_denominator_is_rejected(denominator):
    with pytest.raises(ValueError):
        fraction_slice_path(1, denominator)


def test_svg_is_labelled_and_sized():
    svg = render_fraction_svg(2, 5, size=120, color="#ff0000")

    assert svg.startswith("<svg")
    assert 'width="120"' in svg
    assert 'aria-label="2/5"' in svg
    assert 'fill="#ff0000"' in svg
