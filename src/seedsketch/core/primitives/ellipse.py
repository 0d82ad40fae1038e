"""
どこで: `src/seedsketch/core/primitives/ellipse.py`。楕円と円弧プリミティブの実体生成。
何を: 中心・直径から楕円（閉）と円弧（開）をポリラインで近似して構築する。
なぜ: SVG とラスタの両出力で同じ頂点列を使い、見た目を一致させるため。
"""

from __future__ import annotations

import math

import numpy as np

from seedsketch.core.primitive_registry import primitive
from seedsketch.core.shape import Shape
from seedsketch.core.style import Style


def _ellipse_points(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    angles: np.ndarray,
) -> np.ndarray:
    x = cx + rx * np.cos(angles)
    y = cy + ry * np.sin(angles)
    return np.stack([x, y], axis=1).astype(np.float32, copy=False)


@primitive
def ellipse(
    *,
    cx: float,
    cy: float,
    w: float,
    h: float | None = None,
    segments: int = 64,
    style: Style = Style(),
) -> Shape:
    """楕円の閉ポリゴンを生成する。

    Parameters
    ----------
    cx, cy : float
        中心座標 [px]。
    w : float
        横方向の直径 [px]。
    h : float or None, optional
        縦方向の直径 [px]。None なら w と同じ（円）。
    segments : int, optional
        近似に使う頂点数。3 未満は 3 にクランプする。
    style : Style, optional
        塗り・線のスタイル。
    """
    n = max(int(segments), 3)
    rx = 0.5 * float(w)
    ry = rx if h is None else 0.5 * float(h)
    angles = np.linspace(0.0, 2.0 * math.pi, num=n, endpoint=False)
    coords = _ellipse_points(float(cx), float(cy), rx, ry, angles)
    return Shape(coords=coords, closed=True, style=style)


@primitive
def arc(
    *,
    cx: float,
    cy: float,
    w: float,
    h: float,
    start: float,
    stop: float,
    segments: int = 64,
    style: Style = Style(),
) -> Shape:
    """楕円弧の開いたポリラインを生成する。

    Parameters
    ----------
    cx, cy : float
        中心座標 [px]。
    w, h : float
        楕円の横・縦の直径 [px]。
    start, stop : float
        開始角・終了角 [rad]。時計回り（y 下向き）に start から stop へ進む。
    segments : int, optional
        弧の分割数。1 未満は 1 にクランプする。
    style : Style, optional
        線のスタイル。開いた弧は塗らない。

    Notes
    -----
    stop < start の場合は 2π を足して 1 周以内の弧として扱う。
    """
    start_f = float(start)
    stop_f = float(stop)
    while stop_f < start_f:
        stop_f += 2.0 * math.pi
    n = max(int(segments), 1)
    angles = np.linspace(start_f, stop_f, num=n + 1, endpoint=True)
    coords = _ellipse_points(float(cx), float(cy), 0.5 * float(w), 0.5 * float(h), angles)
    return Shape(coords=coords, closed=False, style=style)
