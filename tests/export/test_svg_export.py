from __future__ import annotations

import base64
import io
from pathlib import Path

import numpy as np
from PIL import Image

from seedsketch.core.primitives.line import line
from seedsketch.core.primitives.rect import rect
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Bitmap, Shape
from seedsketch.core.style import Style
from seedsketch.export.svg import export_svg, scene_to_svg


# `seedsketch.export.svg`（Scene → SVG テキスト）をテストする。


def test_svg_header_and_background_rect():
    svg = scene_to_svg(Scene.build((300, 200), "#272744"))
    lines = svg.splitlines()

    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert 'viewBox="0 0 300 200"' in lines[1]
    assert lines[2] == '  <rect x="0" y="0" width="300" height="200" fill="#272744" />'
    assert lines[-1] == "</svg>"
    assert svg.endswith("\n")


def test_open_line_is_unfilled_path_with_cap():
    shape = line(x1=0, y1=0, x2=10.5, y2=-0.0001, style=Style(fill=(255, 0, 0), stroke_weight=2, stroke_cap="butt"))
    svg = scene_to_svg(Scene.build((20, 20), 0, shape))

    expected = (
        '  <path d="M 0.000 0.000 L 10.500 0.000" fill="none" stroke="#000000" '
        'stroke-width="2.000" stroke-linecap="butt" stroke-linejoin="round" />'
    )
    assert expected in svg.splitlines()


def test_stroke_join_is_written_per_style():
    shape = line(x1=0, y1=0, x2=4, y2=0, style=Style.outline(0, 1.0, cap="square", join="miter"))
    svg = scene_to_svg(Scene.build((10, 10), 255, shape))

    assert 'stroke-linecap="square" stroke-linejoin="miter"' in svg


def test_closed_filled_shape_without_stroke():
    shape = rect(x=1, y=2, w=3, h=4, style=Style.filled("#00ff00"))
    svg = scene_to_svg(Scene.build((20, 20), 255, shape))

    path_line = [ln for ln in svg.splitlines() if ln.startswith("  <path")][0]
    assert path_line.endswith('Z" fill="#00FF00" stroke="none" />')


def test_invisible_and_degenerate_shapes_are_skipped():
    hidden = line(x1=0, y1=0, x2=1, y2=1, style=Style(stroke=None))
    single = Shape(coords=[[1, 1]])
    svg = scene_to_svg(Scene.build((10, 10), 0, hidden, single))

    assert "<path" not in svg


def test_bitmap_is_embedded_as_png_data_uri():
    pixels = np.zeros((2, 3, 3), dtype=np.uint8)
    pixels[0, 0] = (255, 0, 0)
    svg = scene_to_svg(Scene.build((10, 10), 0, Bitmap(pixels, x=4, y=5)))

    image_line = [ln for ln in svg.splitlines() if ln.startswith("  <image")][0]
    assert 'x="4.000" y="5.000" width="3" height="2"' in image_line
    prefix = 'href="data:image/png;base64,'
    encoded = image_line.split(prefix, 1)[1].split('"', 1)[0]
    with Image.open(io.BytesIO(base64.b64decode(encoded))) as im:
        decoded = np.asarray(im.convert("RGB"))
    np.testing.assert_array_equal(decoded, pixels)


def test_export_svg_writes_file_and_creates_parent(tmp_path: Path):
    scene = Scene.build((10, 10), 0, line(x1=0, y1=0, x2=5, y2=5))
    out = export_svg(scene, tmp_path / "nested" / "a.svg")

    assert out.is_file()
    assert out.read_text(encoding="utf-8") == scene_to_svg(scene)
