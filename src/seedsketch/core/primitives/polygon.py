"""
どこで: `src/seedsketch/core/primitives/polygon.py`。正多角形プリミティブの実体生成。
何を: 中心・サイズ・辺数・開始角から正多角形 Shape を構築する。
なぜ: リング状に並べる多角形など、スケッチで繰り返し使う基本図形を提供するため。
"""

from __future__ import annotations

import math

import numpy as np

from seedsketch.core.primitive_registry import primitive
from seedsketch.core.shape import Shape
from seedsketch.core.style import Style


@primitive
def polygon(
    *,
    cx: float,
    cy: float,
    size: float,
    sides: int | float = 5,
    offset_angle: float = 0.0,
    style: Style = Style(),
) -> Shape:
    """正多角形の閉ポリゴンを生成する。

    Parameters
    ----------
    cx, cy : float
        中心座標 [px]。
    size : float
        外接円の直径 [px]。
    sides : int | float, optional
        辺の数。3 未満は 3 にクランプする。
    offset_angle : float, optional
        頂点開始角 [rad]。0 で +X 方向に頂点を置く。
    style : Style, optional
        塗り・線のスタイル。

    Returns
    -------
    Shape
        closed=True の正多角形。
    """
    n = int(round(float(sides)))
    if n < 3:
        n = 3

    angles = np.linspace(0.0, 2.0 * math.pi, num=n, endpoint=False) + float(offset_angle)
    radius = 0.5 * float(size)
    x = float(cx) + radius * np.cos(angles)
    y = float(cy) + radius * np.sin(angles)
    coords = np.stack([x, y], axis=1).astype(np.float32, copy=False)
    return Shape(coords=coords, closed=True, style=style)
