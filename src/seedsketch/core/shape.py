# src/seedsketch/core/shape.py
# 1 フレーム分の描画要素（Shape / Bitmap）のモデルと検証ロジック。

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from seedsketch.core.style import Style


@dataclass(frozen=True, slots=True)
class Shape:
    """スタイル付きのポリライン/ポリゴン。

    Parameters
    ----------
    coords : np.ndarray
        float32 型 shape (N, 2) の頂点配列。キャンバス座標 [px]（原点左上、y 下向き）。
    closed : bool
        True なら終点から始点へ閉じたポリゴンとして扱う（塗りは closed のみ）。
    style : Style
        塗り・線のスタイル。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で保持する。
    """

    coords: np.ndarray
    closed: bool = False
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        """配列形状を検証し、不変条件を満たす形に固定する。"""
        coords = np.array(self.coords, dtype=np.float32, copy=True)

        if coords.size == 0:
            coords = coords.reshape((0, 2))

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")

        if not np.all(np.isfinite(coords)):
            raise ValueError("coords に非有限値が含まれている")

        coords.setflags(write=False)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "closed", bool(self.closed))

    @property
    def n_vertices(self) -> int:
        """頂点数を返す。"""
        return int(self.coords.shape[0])

    def translated(self, dx: float, dy: float) -> "Shape":
        """平行移動したコピーを返す。"""
        offset = np.array([dx, dy], dtype=np.float32)
        return Shape(coords=self.coords + offset, closed=self.closed, style=self.style)


@dataclass(frozen=True, slots=True)
class Bitmap:
    """キャンバスに貼り付けるラスタ画像。

    Parameters
    ----------
    pixels : np.ndarray
        uint8 型 shape (H, W, 3) の RGB 画素。
    x, y : float
        左上隅の配置位置 [px]。
    """

    pixels: np.ndarray
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        pixels = np.asarray(self.pixels)
        if pixels.ndim == 2:
            pixels = np.repeat(pixels[:, :, None], 3, axis=2)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError("pixels は shape (H,W,3) の配列である必要がある")
        if pixels.shape[2] == 4:
            pixels = pixels[:, :, :3]
        pixels = np.array(pixels, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) を返す。"""
        h, w = self.pixels.shape[:2]
        return int(w), int(h)


__all__ = ["Bitmap", "Shape"]
