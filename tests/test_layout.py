import pytest

from nonogram.model.layout import compute_cell_size, compute_geometry, geometry_for


def example_geometry(height=100, width=100):
    # rows 2 with (1, 2) clues, columns 2 with (1, 1) clues
    return compute_geometry(height, width, (1, 2), (1, 1))


def test_cell_size_formula():
    size = compute_cell_size(100, 100, rows=2, columns=2, max_row_clues=2, max_column_clues=1, padding=5)
    assert size == pytest.approx(min(90 / 2.5, 90 / 3))


def test_example_in_square_box():
    geometry = example_geometry()
    assert geometry.cell_size == pytest.approx(30)
    assert geometry.row_clues_band == pytest.approx(30)
    assert geometry.column_clues_band == pytest.approx(15)
    assert geometry.font_size == pytest.approx(15)
    assert (geometry.grid_left, geometry.grid_top) == pytest.approx((35, 20))
    assert (geometry.grid_right, geometry.grid_bottom) == pytest.approx((95, 80))


def test_example_hit_testing():
    geometry = example_geometry()
    assert geometry.cell_at(50, 50) == (1, 0)
    assert geometry.cell_at(75, 75) == (1, 1)
    assert geometry.cell_at(35, 20) == (0, 0)


@pytest.mark.parametrize(
    "x, y",
    [(10, 50), (50, 10), (95, 50), (50, 80), (99, 99), (-1, -1), (0, 0)],
    ids=["row-band", "column-band", "right-edge", "bottom-edge", "corner", "negative", "origin"],
)
def test_points_outside_grid_hit_nothing(x, y):
    assert example_geometry().cell_at(x, y) is None


@pytest.mark.parametrize(
    "rows, columns, height, width",
    [((), (1,), 100, 100), ((1,), (), 100, 100), ((1, 1), (1, 1), 4, 4), ((1,), (1,), 10, 0)],
    ids=["no-rows", "no-columns", "box-inside-padding", "zero-width"],
)
def test_degenerate_geometry(rows, columns, height, width):
    geometry = compute_geometry(height, width, rows, columns)
    assert geometry.cell_size == 0
    assert geometry.is_degenerate
    assert geometry.cell_at(1, 1) is None
    assert geometry.separator_lines() == []


@pytest.mark.parametrize(
    "height, width, row_lengths, column_lengths",
    [
        (100, 100, (1, 2), (1, 1)),
        (600, 800, (2,) * 10, (3,) * 10),
        (800, 300, (1,) * 5, (4,) * 15),
        (123.4, 567.8, (0, 3, 1), (2, 2)),
        (100, 1000, (10,), (0,)),
        (1000, 100, (0,), (10,)),
    ],
)
def test_layout_fits_box_on_both_axes(height, width, row_lengths, column_lengths):
    g = compute_geometry(height, width, row_lengths, column_lengths)
    used_height = 2 * g.padding + g.column_clues_band + g.rows * g.cell_size
    used_width = 2 * g.padding + g.row_clues_band + g.columns * g.cell_size
    assert used_height <= height + 1e-9
    assert used_width <= width + 1e-9
    # one axis is binding
    assert used_height == pytest.approx(height) or used_width == pytest.approx(width)


@pytest.mark.parametrize("fraction", [0, 0.25, 0.5, 0.999])
def test_cell_at_inverts_cell_top_left(fraction):
    g = compute_geometry(437, 611, (2, 1, 3, 1, 1, 2, 1), (1, 2, 1, 1, 4, 1, 1, 2, 1))
    eps = fraction * g.cell_size
    for row in range(g.rows):
        for column in range(g.columns):
            x, y = g.cell_top_left(row, column)
            assert g.cell_at(x + eps, y + eps) == (row, column)


def test_clues_are_right_aligned_against_the_grid():
    g = example_geometry()
    # row 0 has one clue out of max two: it takes the slot next to the grid
    x, y = g.row_clue_position(0, 0)
    assert (x, y) == pytest.approx((5 + 1.5 * 15, 20 + 15))
    first, second = g.row_clue_position(1, 0), g.row_clue_position(1, 1)
    assert first == pytest.approx((5 + 0.5 * 15, 65))
    assert second == pytest.approx((x, 65))
    assert g.column_clue_position(1, 0) == pytest.approx((35 + 45, 5 + 7.5))


def test_highlight_rects_cover_clue_bands():
    g = example_geometry()
    assert g.row_highlight_rect(1) == pytest.approx((5, 50, 30, 30))
    assert g.column_highlight_rect(0) == pytest.approx((35, 5, 30, 15))


def test_separator_lines_for_ten_by_ten():
    g = compute_geometry(500, 500, (1,) * 10, (1,) * 10)
    segments = g.separator_lines()
    vertical = [s for s in segments if s[0][0] == s[1][0]]
    horizontal = [s for s in segments if s[0][1] == s[1][1]]
    assert len(vertical) == 3 and len(horizontal) == 3
    (x0, y0), (x1, y1) = vertical[-1]
    assert x0 == pytest.approx(g.grid_right)
    assert (y0, y1) == pytest.approx((g.padding, g.grid_bottom))
    (x0, y0), (x1, y1) = horizontal[1]
    assert y0 == pytest.approx(g.grid_top + 5 * g.cell_size)
    assert (x0, x1) == pytest.approx((g.padding, g.grid_right))


def test_separator_lines_on_small_grid_only_frame_the_start():
    assert len(example_geometry().separator_lines()) == 2


def test_geometry_for_uses_clue_counts_only(example_puzzle):
    before = geometry_for(example_puzzle.view(), 100, 100)
    example_puzzle.set_color(0, 0, "red")
    after = geometry_for(example_puzzle.view(), 100, 100)
    assert before == after
    assert before == example_geometry()
