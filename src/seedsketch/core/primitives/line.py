"""
どこで: `src/seedsketch/core/primitives/line.py`。線分プリミティブの実体生成。
何を: 2 端点から線分 Shape を構築する。
なぜ: 最小の一次元形状として、分割線などスケッチ側の組み立ての基礎にするため。
"""

from __future__ import annotations

import numpy as np

from seedsketch.core.primitive_registry import primitive
from seedsketch.core.shape import Shape
from seedsketch.core.style import Style


@primitive
def line(
    *,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    style: Style = Style(),
) -> Shape:
    """2 端点から線分を生成する。

    Parameters
    ----------
    x1, y1 : float
        始点 [px]。
    x2, y2 : float
        終点 [px]。
    style : Style, optional
        線のスタイル。線分は塗らないため fill は無視される。

    Returns
    -------
    Shape
        2 頂点の開いたポリライン。
    """
    coords = np.array(
        [
            [float(x1), float(y1)],
            [float(x2), float(y2)],
        ],
        dtype=np.float32,
    )
    return Shape(coords=coords, closed=False, style=style)
