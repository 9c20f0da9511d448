"""Rendering and saving of output images."""
import os

import numpy as np

from analyzers.line_report import analyze_lines
from utils.image_io import load_image
from visualization.draw_lines import blank_canvas, draw_axes, draw_lines, draw_points
from visualization.save_outputs import save_all_outputs


def test_blank_canvas(canvas_params):
    canvas = blank_canvas(canvas_params)
    assert canvas.shape == (400, 400, 3)
    assert canvas.dtype == np.uint8
    assert (canvas == 255).all()


def test_draw_axes(canvas_params):
    canvas = draw_axes(blank_canvas(canvas_params), canvas_params)
    assert tuple(canvas[200, 5]) == canvas_params["COLOR_AXES"]
    assert tuple(canvas[5, 200]) == canvas_params["COLOR_AXES"]


def test_draw_lines_and_points(canvas_params, demo_lines):
    canvas = blank_canvas(canvas_params)
    draw_lines(canvas, demo_lines, canvas_params)
    assert not (canvas == 255).all()

    canvas = blank_canvas(canvas_params)
    draw_points(canvas, [(3, 0)], canvas_params)
    assert tuple(canvas[200, 260]) == canvas_params["COLOR_POINT"]


def test_draw_points_skips_off_canvas(canvas_params):
    canvas = draw_points(blank_canvas(canvas_params), [(1000, 1000)], canvas_params)
    assert (canvas == 255).all()


def test_save_all_outputs(tmp_path, canvas_params, demo_lines):
    report = analyze_lines(demo_lines)
    paths = save_all_outputs(str(tmp_path), "run", report, canvas_params)

    assert [os.path.basename(p) for p in paths] == ["run_lines.png"]
    assert os.path.exists(paths[0])

    lines_img = load_image(paths[0])
    assert lines_img.shape == (400, 400, 3)
    # intersection of lines 1 and 4 at (11/3, 2/3) -> pixel (273, 187)
    assert tuple(lines_img[187, 273]) == canvas_params["COLOR_POINT"]
    assert os.listdir(tmp_path) == ["run_lines.png"]
