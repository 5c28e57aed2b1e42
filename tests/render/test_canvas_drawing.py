from __future__ import annotations

from typing import Set, Tuple

import pytest

from rastercanvas.core.coord import Coord
from rastercanvas.errors import OutOfBoundsError
from rastercanvas.render.canvas import Canvas
from rastercanvas.render.images import ImagePBM, ImagePPM
from rastercanvas.render.pixel import Pixel


def lit(img: Canvas, value: object) -> Set[Tuple[int, int]]:
    return {
        (x, y)
        for x in range(img.width)
        for y in range(img.height)
        if img.get(x, y) == value
    }


def test_circle_fills_half_open_box() -> None:
    img = ImagePBM(10, 10)
    img.draw_circle(Coord(5, 5), 4, True)
    assert lit(img, True) == {(x, y) for x in range(3, 7) for y in range(3, 7)}


def test_circle_odd_radius_rounds_down() -> None:
    a = ImagePBM(10, 10)
    b = ImagePBM(10, 10)
    a.draw_circle(Coord(5, 5), 5, True)
    b.draw_circle(Coord(5, 5), 4, True)
    assert a == b


def test_circle_near_edge_in_bounds() -> None:
    img = ImagePPM(10, 10, Pixel.BLACK)
    img.draw_circle(Coord(2, 2), 4, Pixel.WHITE)
    expected = {(x, y) for x in range(0, 4) for y in range(0, 4)}
    assert lit(img, Pixel.WHITE) == expected
    assert len(lit(img, Pixel.BLACK)) == 100 - len(expected)


def test_circle_clamps_low_side_to_zero() -> None:
    img = ImagePBM(10, 10)
    img.draw_circle(Coord(1, 1), 4, True)
    assert lit(img, True) == {(x, y) for x in range(0, 3) for y in range(0, 3)}


def test_circle_small_radius_draws_nothing() -> None:
    img = ImagePBM(4, 4)
    img.draw_circle(Coord(2, 2), 1, True)
    assert lit(img, True) == set()


def test_circle_past_edge_raises() -> None:
    img = ImagePBM(10, 10)
    with pytest.raises(OutOfBoundsError) as exc:
        img.draw_circle(Coord(9, 9), 4, True)
    assert exc.value.width == 10
    assert exc.value.height == 10
    assert exc.value.x >= 10 or exc.value.y >= 10


def test_line_degenerate_sets_one_pixel() -> None:
    img = ImagePPM(5, 5, Pixel.BLACK)
    img.draw_line(Coord(2, 2), Coord(2, 2), Pixel.RED)
    assert lit(img, Pixel.RED) == {(2, 2)}


def test_line_horizontal() -> None:
    img = ImagePBM(5, 3)
    img.draw_line(Coord(0, 0), Coord(4, 0), True)
    assert lit(img, True) == {(x, 0) for x in range(5)}


def test_line_reversed_direction() -> None:
    img = ImagePBM(5, 3)
    img.draw_line(Coord(4, 2), Coord(0, 2), True)
    assert lit(img, True) == {(x, 2) for x in range(5)}


def test_line_diagonal_sets_endpoint() -> None:
    img = ImagePBM(4, 4)
    img.draw_line(Coord(0, 0), Coord(3, 3), True)
    assert lit(img, True) == {(0, 0), (1, 1), (2, 2), (3, 3)}


def test_line_out_of_bounds_leaves_canvas_untouched() -> None:
    img = ImagePBM(5, 5)
    with pytest.raises(OutOfBoundsError) as exc:
        img.draw_line(Coord(0, 0), Coord(7, 0), True)
    assert (exc.value.x, exc.value.y) == (5, 0)
    assert lit(img, True) == set()


def test_line_shallow_slope_truncates() -> None:
    img = ImagePBM(5, 2)
    img.draw_line(Coord(0, 0), Coord(4, 1), True)
    # int() truncation keeps y at 0 until the explicit endpoint
    assert lit(img, True) == {(0, 0), (1, 0), (2, 0), (3, 0), (4, 1)}


def test_line_steep_slope_truncates() -> None:
    img = ImagePBM(2, 5)
    img.draw_line(Coord(1, 4), Coord(0, 0), True)
    assert lit(img, True) == {(1, 4), (0, 3), (0, 2), (0, 1), (0, 0)}


def test_thick_line_stamps_boxes() -> None:
    img = ImagePBM(10, 10)
    img.draw_line_with_thickness(Coord(2, 2), Coord(6, 2), True, 2)
    assert lit(img, True) == {(x, y) for x in range(1, 7) for y in (1, 2)}


def test_thick_line_degenerate() -> None:
    img = ImagePBM(6, 6)
    img.draw_line_with_thickness(Coord(3, 3), Coord(3, 3), True, 2)
    assert lit(img, True) == {(2, 2), (2, 3), (3, 2), (3, 3)}


def test_thick_line_zero_thickness_only_sets_endpoint() -> None:
    img = ImagePBM(6, 6)
    img.draw_line_with_thickness(Coord(0, 0), Coord(5, 0), True, 0)
    assert lit(img, True) == {(5, 0)}


def test_thick_line_footprint_past_edge_raises() -> None:
    img = ImagePPM(8, 8)
    with pytest.raises(OutOfBoundsError):
        img.draw_line_with_thickness(Coord(0, 7), Coord(7, 7), Pixel.WHITE, 4)
    assert lit(img, Pixel.WHITE) == set()


def test_thick_line_shallow_slope_truncates() -> None:
    img = ImagePBM(8, 4)
    img.draw_line_with_thickness(Coord(1, 1), Coord(5, 2), True, 2)
    boxes = {(x, y) for x in range(0, 5) for y in (0, 1)}
    assert lit(img, True) == boxes | {(5, 2)}


def test_circle_out_of_bounds_leaves_canvas_untouched() -> None:
    img = ImagePPM(10, 10, Pixel.BLACK)
    with pytest.raises(OutOfBoundsError):
        img.draw_circle(Coord(8, 2), 6, Pixel.WHITE)
    assert lit(img, Pixel.WHITE) == set()
