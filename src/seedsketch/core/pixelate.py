"""
どこで: `src/seedsketch/core/pixelate.py`。
何を: 画素配列に対するブロック化（ローレゾ化）と、行ごとに粒度が変わるグリッチフィルタを提供する。
なぜ: 画像スケッチの画素処理を numpy のインデックス演算にまとめ、描画と独立に検証できるようにするため。
"""

from __future__ import annotations

import math

import numpy as np


def _as_image(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim not in (2, 3):
        raise ValueError(f"image は (H,W) か (H,W,C) の配列である必要がある: shape={arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError("image は空であってはならない")
    return arr


def _js_round(values: np.ndarray) -> np.ndarray:
    """0.5 を常に +∞ 側へ丸める（銀行丸めではない）。"""
    return np.floor(values + 0.5)


def pixelate(image: np.ndarray, block_size: int) -> np.ndarray:
    """画像を block_size 四方のブロックに分け、各ブロックを中央画素の色で塗る。

    Parameters
    ----------
    image : np.ndarray
        shape (H, W) または (H, W, C) の画素配列。
    block_size : int
        ブロックの一辺 [px]。

    Returns
    -------
    np.ndarray
        入力と同じ shape/dtype の新しい配列。

    Notes
    -----
    画素 (x, y) は ``(x - x % b + b // 2, y - y % b + b // 2)`` を画像内にクランプした位置から採る。
    """
    arr = _as_image(image)
    b = int(block_size)
    if b < 1:
        raise ValueError(f"block_size は 1 以上である必要がある: got={block_size}")

    h, w = arr.shape[:2]
    xs = np.arange(w)
    ys = np.arange(h)
    px = np.clip(xs - xs % b + b // 2, 0, w - 1)
    py = np.clip(ys - ys % b + b // 2, 0, h - 1)
    return arr[py[:, None], px[None, :]].copy()


def lowres_block_size(frame_count: int) -> int:
    """フレームごとに 1..64 を往復するブロックサイズ（2 の冪）を返す。

    ``2 ** floor(6 * (sin(90° + 8° * frame) + 1) / 2)``。
    """
    s = math.sin(math.radians(90.0 + float(frame_count) * 8.0))
    mod = math.floor(6.0 * ((s + 1.0) * 0.5))
    mod = min(max(mod, 0), 6)
    return int(2**mod)


def row_block_sizes(height: int, frame_count: int) -> np.ndarray:
    """行 y ごとのブロックサイズ ``round((0.5 * sin((y + frame) / 16) + 1) * 16)`` を返す。"""
    ys = np.arange(int(height), dtype=np.float64)
    sizes = _js_round((0.5 * np.sin((ys + float(frame_count)) * 0.0625) + 1.0) * 16.0)
    return sizes.astype(np.int64)


def row_glitch(image: np.ndarray, frame_count: int) -> np.ndarray:
    """行ごとに粒度の異なる縦方向ブロック化を行う。

    Parameters
    ----------
    image : np.ndarray
        shape (H, W) または (H, W, C) の画素配列。
    frame_count : int
        現在のフレーム番号。粒度の位相に使う。

    Returns
    -------
    np.ndarray
        入力と同じ shape/dtype の新しい配列。外周 1px は 0（黒）。

    Notes
    -----
    内側の画素 (x, y) は ``(x, y - y % block(y))`` から採る。
    """
    arr = _as_image(image)
    h, w = arr.shape[:2]
    out = np.zeros_like(arr)
    if h < 3 or w < 3:
        return out

    ys = np.arange(h)
    blocks = row_block_sizes(h, frame_count)
    src_rows = np.maximum(ys - ys % blocks, 0)

    inner = slice(1, h - 1)
    out[inner, 1 : w - 1] = arr[src_rows[inner], 1 : w - 1]
    return out


__all__ = ["lowres_block_size", "pixelate", "row_block_sizes", "row_glitch"]
