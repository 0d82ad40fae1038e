"""
どこで: `src/seedsketch/core/primitives/rect.py`。矩形プリミティブの実体生成。
何を: 左上隅または中心を基準に、軸平行な矩形 Shape を構築する。
なぜ: タイル背景やセル内の十字・棒など、塗り矩形を多用するスケッチのため。
"""

from __future__ import annotations

import numpy as np

from seedsketch.core.primitive_registry import primitive
from seedsketch.core.shape import Shape
from seedsketch.core.style import Style

RECT_MODES = ("corner", "center")


@primitive
def rect(
    *,
    x: float,
    y: float,
    w: float,
    h: float | None = None,
    mode: str = "corner",
    style: Style = Style(),
) -> Shape:
    """矩形の閉ポリゴンを生成する。

    Parameters
    ----------
    x, y : float
        基準点 [px]。mode="corner" なら左上隅、mode="center" なら中心。
    w : float
        幅 [px]。
    h : float or None, optional
        高さ [px]。None なら w と同じ（正方形）。
    mode : str, optional
        ``"corner"`` か ``"center"``。
    style : Style, optional
        塗り・線のスタイル。
    """
    if mode not in RECT_MODES:
        raise ValueError(f"未対応の rect mode: {mode!r}")

    w_f = float(w)
    h_f = w_f if h is None else float(h)
    if mode == "center":
        x0 = float(x) - 0.5 * w_f
        y0 = float(y) - 0.5 * h_f
    else:
        x0 = float(x)
        y0 = float(y)

    coords = np.array(
        [
            [x0, y0],
            [x0 + w_f, y0],
            [x0 + w_f, y0 + h_f],
            [x0, y0 + h_f],
        ],
        dtype=np.float32,
    )
    return Shape(coords=coords, closed=True, style=style)
