import pytest

from nonogram.config import HOVER_BAND_COLOR, HOVER_OUTLINE_COLOR, SEPARATOR_WIDTH
from nonogram.model.layout import compute_geometry, geometry_for
from nonogram.model.puzzle import empty_puzzle
from nonogram.model.render import draw_cell, render_frame


def test_unfilled_cell_gets_white_fill_and_cross(surface):
    draw_cell(surface, None, 10, 20, 40)
    assert surface.kinds() == ["fill_rect", "stroke_rect", "line", "line"]
    assert surface.calls[0] == ("fill_rect", 10, 20, 40, 40, "white")
    lines = surface.of_kind("line")
    assert lines[0][1:5] == (20, 30, 40, 50)
    assert lines[1][1:5] == (20, 50, 40, 30)


def test_filled_cell_has_no_cross(surface):
    draw_cell(surface, "red", 0, 0, 10)
    assert surface.kinds() == ["fill_rect", "stroke_rect"]
    assert surface.calls[0][-1] == "red"


def test_frame_order_without_hover(surface, example_puzzle):
    geometry = geometry_for(example_puzzle.view(), 100, 100)
    render_frame(surface, example_puzzle.view(), geometry)

    kinds = surface.kinds()
    assert kinds[0] == "clear"
    assert surface.calls[0] == ("clear", 100, 100)
    # column clues come before any row clue or cell
    assert kinds[1:3] == ["text", "text"]
    assert [c[3] for c in surface.of_kind("text")] == ["1", "1", "2", "1", "1"]
    assert len(surface.of_kind("fill_rect")) == 4
    # two separators, heavy, last
    assert [c[-1] for c in surface.calls[-2:]] == [SEPARATOR_WIDTH, SEPARATOR_WIDTH]


def test_row_clues_precede_their_cells(surface, example_puzzle):
    geometry = geometry_for(example_puzzle.view(), 100, 100)
    render_frame(surface, example_puzzle.view(), geometry)
    kinds = surface.kinds()
    # clear, 2 column texts, row 0 text, then row 0 cells
    assert kinds[3] == "text"
    assert kinds[4] == "fill_rect"


def test_clue_texts_carry_colors(surface, example_puzzle):
    render_frame(surface, example_puzzle.view(), geometry_for(example_puzzle.view(), 100, 100))
    assert [c[4] for c in surface.of_kind("text")] == ["black", "red", "red", "black", "blue"]
    assert all(c[5] == pytest.approx(15) for c in surface.of_kind("text"))


def test_filled_cells_are_drawn_with_their_color(surface, example_puzzle):
    example_puzzle.set_color(1, 1, "blue")
    render_frame(surface, example_puzzle.view(), geometry_for(example_puzzle.view(), 100, 100))
    fills = surface.of_kind("fill_rect")
    assert fills[-1] == ("fill_rect", 65, 50, 30, 30, "blue")
    # three unfilled cells, two cross lines each, plus two separators
    assert len(surface.of_kind("line")) == 3 * 2 + 2


def test_hover_bands_first_and_outline_last(surface, example_puzzle):
    geometry = geometry_for(example_puzzle.view(), 100, 100)
    render_frame(surface, example_puzzle.view(), geometry, hover_cell=(1, 0))

    assert surface.calls[1] == ("fill_rect", 5, 50, 30, 30, HOVER_BAND_COLOR)
    assert surface.calls[2] == ("fill_rect", 35, 5, 30, 15, HOVER_BAND_COLOR)
    last = surface.calls[-1]
    assert last[0] == "stroke_rect"
    assert last[1:6] == (35, 50, 30, 30, HOVER_OUTLINE_COLOR)


@pytest.mark.parametrize(
    "rows, columns, height, width",
    [((), (), 100, 100), ((1,), (1,), 6, 6), ((1,), (), 50, 50)],
)
def test_degenerate_geometry_only_clears(surface, rows, columns, height, width):
    geometry = compute_geometry(height, width, rows, columns)
    render_frame(surface, empty_puzzle().view(), geometry)
    assert surface.kinds() == ["clear"]


@pytest.mark.parametrize("height, width", [(0, 100), (100, 0), (-5, -5)])
def test_empty_box_draws_nothing(surface, example_puzzle, height, width):
    geometry = geometry_for(example_puzzle.view(), height, width)
    render_frame(surface, example_puzzle.view(), geometry)
    assert surface.calls == []


def test_rendering_never_changes_the_puzzle(surface, example_puzzle):
    example_puzzle.set_color(0, 0, "red")
    before = example_puzzle.snapshot()
    render_frame(surface, example_puzzle.view(), geometry_for(example_puzzle.view(), 300, 200), hover_cell=(0, 0))
    assert example_puzzle.snapshot() == before
