import pytest

from game.layout import Layout


def test_wide_viewport_fits_by_height():
    layout = Layout()
    cell = layout.fit(600, 400, 5, 5)

    assert cell == pytest.approx(400 / 6)
    assert layout.h_margin == pytest.approx((600 - 5 * cell) / 2)
    assert layout.v_margin == pytest.approx((400 - 5 * cell) / 2)


def test_narrow_viewport_fits_by_width():
    layout = Layout()
    cell = layout.fit(300, 600, 5, 5)

    assert cell == 50
    assert layout.h_margin == 25
    assert layout.v_margin == 175


def test_aspect_comparison_is_not_truncated():
    # 650/600 and 6/5 both truncate to 1; comparing exactly picks the width
    layout = Layout()
    cell = layout.fit(650, 600, 6, 5)

    assert cell == pytest.approx(650 / 7)


@pytest.mark.parametrize(
    "width, height, cols, rows",
    [(800, 600, 5, 5), (320, 900, 9, 9), (1024, 768, 17, 6), (500, 500, 1, 1), (401, 399, 40, 41)],
)
def test_grid_always_fits_and_is_centered(width, height, cols, rows):
    layout = Layout()
    cell = layout.fit(width, height, cols, rows)

    assert cols * cell <= width
    assert rows * cell <= height
    assert layout.h_margin >= 0
    assert layout.v_margin >= 0
    assert layout.h_margin * 2 + cols * cell == pytest.approx(width)
    assert layout.v_margin * 2 + rows * cell == pytest.approx(height)


def test_cell_geometry_includes_offset():
    layout = Layout()
    layout.fit(300, 300, 5, 5, offset_y=48)

    assert layout.cell_origin(0, 0) == (25, 73)
    assert layout.cell_origin(2, 1) == (125, 123)
    assert layout.cell_center(0, 0) == (50, 98)
    assert layout.cell_rect(0, 0) == pytest.approx((30, 78, 40, 40))
