"""rect プリミティブの矩形形状に関するテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from seedsketch.core.primitives.rect import rect


def test_rect_corner_mode_starts_at_top_left() -> None:
    """mode="corner" では (x, y) が左上隅になる。"""
    shape = rect(x=10.0, y=20.0, w=30.0, h=40.0)

    assert shape.closed is True
    np.testing.assert_allclose(
        shape.coords,
        [[10.0, 20.0], [40.0, 20.0], [40.0, 60.0], [10.0, 60.0]],
        rtol=0.0,
        atol=1e-6,
    )


def test_rect_center_mode_and_square_default() -> None:
    """mode="center" では (x, y) が中心。h 省略時は正方形。"""
    shape = rect(x=0.0, y=0.0, w=4.0, mode="center")

    np.testing.assert_allclose(shape.coords.min(axis=0), [-2.0, -2.0], rtol=0.0, atol=1e-6)
    np.testing.assert_allclose(shape.coords.max(axis=0), [2.0, 2.0], rtol=0.0, atol=1e-6)


def test_rect_rejects_unknown_mode() -> None:
    """未対応の mode は ValueError。"""
    with pytest.raises(ValueError):
        rect(x=0.0, y=0.0, w=1.0, mode="radius")
