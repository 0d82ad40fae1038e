"""Shape / Bitmap / Scene のモデルに関するテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from seedsketch.core.primitives.line import line
from seedsketch.core.scene import Scene, normalize_items
from seedsketch.core.shape import Bitmap, Shape


def test_shape_coords_are_frozen_float32() -> None:
    """coords は float32 の読み取り専用配列に固定される。"""
    shape = Shape(coords=[[0, 0], [1, 1]])

    assert shape.coords.dtype == np.float32
    assert shape.coords.flags.writeable is False
    with pytest.raises(ValueError):
        shape.coords[0, 0] = 5.0


def test_shape_rejects_bad_coords() -> None:
    """(N, 2) 以外の形状や非有限値は ValueError。"""
    with pytest.raises(ValueError):
        Shape(coords=[[0, 0, 0]])
    with pytest.raises(ValueError):
        Shape(coords=[[0, np.nan]])

    assert Shape(coords=[]).n_vertices == 0


def test_shape_translated_returns_moved_copy() -> None:
    """translated は元を変えずに平行移動したコピーを返す。"""
    shape = Shape(coords=[[0, 0], [1, 2]], closed=True)
    moved = shape.translated(10, 20)

    np.testing.assert_allclose(moved.coords, [[10, 20], [11, 22]])
    np.testing.assert_allclose(shape.coords, [[0, 0], [1, 2]])
    assert moved.closed is True


def test_bitmap_normalises_gray_and_rgba() -> None:
    """グレースケールは 3ch に、RGBA は RGB に揃える。"""
    gray = Bitmap(np.zeros((2, 3), dtype=np.uint8))
    rgba = Bitmap(np.zeros((4, 5, 4), dtype=np.uint8), x=1, y=2)

    assert gray.pixels.shape == (2, 3, 3)
    assert gray.size == (3, 2)
    assert rgba.pixels.shape == (4, 5, 3)
    assert (rgba.x, rgba.y) == (1.0, 2.0)
    assert rgba.pixels.flags.writeable is False


def test_normalize_items_flattens_in_order_and_skips_none() -> None:
    """ネスト列を描画順のままフラット化し、None は読み飛ばす。"""
    a = line(x1=0, y1=0, x2=1, y2=0)
    b = line(x1=0, y1=1, x2=1, y2=1)
    c = line(x1=0, y1=2, x2=1, y2=2)

    assert normalize_items([a, None, [b, [c]]]) == [a, b, c]
    with pytest.raises(TypeError):
        normalize_items([a, "text"])  # type: ignore[list-item]


def test_scene_build_parses_background_and_collects_items() -> None:
    """Scene.build は背景色を正規化し、要素を一次元化する。"""
    a = line(x1=0, y1=0, x2=1, y2=0)
    bmp = Bitmap(np.zeros((1, 1, 3), dtype=np.uint8))

    scene = Scene.build((100, 50), "#272744", [a, bmp], None)

    assert scene.size == (100, 50)
    assert scene.background == (0x27, 0x27, 0x44)
    assert scene.items == (a, bmp)
    assert scene.shapes == [a]


def test_scene_rejects_non_positive_size() -> None:
    """寸法が正でなければ ValueError。"""
    with pytest.raises(ValueError):
        Scene.build((0, 10), 0)
