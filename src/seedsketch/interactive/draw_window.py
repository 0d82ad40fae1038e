# どこで: `src/seedsketch/interactive/draw_window.py`。
# 何を: プレビュー用の pyglet ウィンドウ生成と、画素配列の blit を行う。
# なぜ: pyglet 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import numpy as np
import pyglet
from pyglet.window import Window


def create_draw_window(canvas_size: tuple[int, int], *, caption: str = "seedsketch") -> Window:
    """キャンバス寸法と同じ大きさの描画ウィンドウを生成する。"""
    canvas_w, canvas_h = canvas_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(canvas_w),
        height=int(canvas_h),
        resizable=False,
        caption=caption,
    )
    return window


def pixels_to_image(pixels: np.ndarray) -> pyglet.image.ImageData:
    """uint8 shape (H, W, 3) の画素配列を pyglet の ImageData に変換する。

    Notes
    -----
    配列は上端が行 0、pyglet は下端が行 0 のため、負の pitch で上下を合わせる。
    """
    arr = np.ascontiguousarray(pixels, dtype=np.uint8)
    h, w = arr.shape[:2]
    return pyglet.image.ImageData(w, h, "RGB", arr.tobytes(), pitch=-w * 3)
