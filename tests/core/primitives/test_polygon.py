"""polygon プリミティブの正多角形形状に関するテスト群。"""

from __future__ import annotations

import math

import numpy as np

from seedsketch.core.primitives.polygon import polygon


def test_polygon_is_closed_with_requested_sides() -> None:
    """sides 個の頂点を持つ閉ポリゴンになる。"""
    shape = polygon(cx=0.0, cy=0.0, size=10.0, sides=6)

    assert shape.closed is True
    assert shape.n_vertices == 6


def test_polygon_size_is_circumscribed_diameter() -> None:
    """全頂点が中心から size/2 の距離にある。"""
    shape = polygon(cx=100.0, cy=50.0, size=40.0, sides=5)

    d = np.hypot(shape.coords[:, 0] - 100.0, shape.coords[:, 1] - 50.0)
    np.testing.assert_allclose(d, 20.0, rtol=0.0, atol=1e-4)


def test_polygon_offset_angle_rotates_first_vertex() -> None:
    """offset_angle[rad] により頂点開始角が回転する。"""
    s0 = polygon(cx=0.0, cy=0.0, size=2.0, sides=4, offset_angle=0.0)
    np.testing.assert_allclose(s0.coords[0], [1.0, 0.0], rtol=0.0, atol=1e-6)

    s90 = polygon(cx=0.0, cy=0.0, size=2.0, sides=4, offset_angle=math.pi / 2)
    np.testing.assert_allclose(s90.coords[0], [0.0, 1.0], rtol=0.0, atol=1e-6)


def test_polygon_clamps_sides_lt_3() -> None:
    """sides < 3 は 3 にクランプされる。"""
    shape = polygon(cx=0.0, cy=0.0, size=1.0, sides=1)

    assert shape.n_vertices == 3
