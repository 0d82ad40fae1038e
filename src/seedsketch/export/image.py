"""
どこで: `src/seedsketch/export/image.py`。
何を: Scene を Pillow でラスタライズし、PNG/JPEG/SVG として保存する関数を提供する。
なぜ: プレビュー表示・静止画保存・動画フレームの全てで同じ画素を使うため。
"""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from seedsketch.core.runtime_config import runtime_config
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Bitmap, Shape
from seedsketch.export.svg import export_svg

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".svg")
_JPEG_QUALITY = 95


def output_size(canvas_size: tuple[int, int], scale: float = 1.0) -> tuple[int, int]:
    """canvas_size を scale 倍した出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の (width, height) である必要がある")
    _scale = float(scale)
    if _scale <= 0:
        raise ValueError(f"scale は正の値である必要がある: got={scale}")
    return max(1, int(round(canvas_w * _scale))), max(1, int(round(canvas_h * _scale)))


def _extend_ends(points: np.ndarray, amount: float) -> np.ndarray:
    """開いたポリラインの両端を進行方向に amount だけ延ばす（square cap 用）。"""

    out = points.astype(np.float64, copy=True)
    for end, nxt in ((0, 1), (-1, -2)):
        d = out[end] - out[nxt]
        n = math.hypot(float(d[0]), float(d[1]))
        if n > 0:
            out[end] = out[end] + d / n * amount
    return out


def _draw_shape(draw: ImageDraw.ImageDraw, shape: Shape, scale: float) -> None:
    if shape.n_vertices == 0:
        return
    style = shape.style
    pts = shape.coords.astype(np.float64) * scale

    if shape.closed and style.fill is not None and shape.n_vertices >= 3:
        draw.polygon([(float(x), float(y)) for x, y in pts], fill=style.fill)

    if style.stroke is None or style.stroke_weight <= 0 or shape.n_vertices < 2:
        return

    width = max(1, int(round(style.stroke_weight * scale)))
    if shape.closed:
        pts = np.vstack([pts, pts[:1]])
    elif style.stroke_cap == "square":
        pts = _extend_ends(pts, 0.5 * width)

    joint = "curve" if style.stroke_join == "round" else None
    draw.line([(float(x), float(y)) for x, y in pts], fill=style.stroke, width=width, joint=joint)

    if not shape.closed and style.stroke_cap == "round" and width > 2:
        r = 0.5 * width
        for x, y in (pts[0], pts[-1]):
            draw.ellipse([float(x) - r, float(y) - r, float(x) + r, float(y) + r], fill=style.stroke)


def _paste_bitmap(canvas: Image.Image, bitmap: Bitmap, scale: float) -> None:
    img = Image.fromarray(np.ascontiguousarray(bitmap.pixels))
    if scale != 1.0:
        w, h = bitmap.size
        img = img.resize((max(1, int(round(w * scale))), max(1, int(round(h * scale)))), Image.Resampling.NEAREST)
    canvas.paste(img, (int(round(bitmap.x * scale)), int(round(bitmap.y * scale))))


def rasterize(scene: Scene, scale: float = 1.0) -> np.ndarray:
    """Scene を描画し、uint8 shape (H, W, 3) の RGB 配列で返す。

    Parameters
    ----------
    scene : Scene
        描画するシーン。
    scale : float, optional
        出力倍率。1.0 ならキャンバス寸法どおり。

    Returns
    -------
    np.ndarray
        行 0 が画像の上端。
    """

    size = output_size(scene.size, scale)
    _scale = float(scale)
    canvas = Image.new("RGB", size, color=scene.background)
    draw = ImageDraw.Draw(canvas)
    for item in scene.items:
        if isinstance(item, Bitmap):
            _paste_bitmap(canvas, item, _scale)
            continue
        _draw_shape(draw, item, _scale)
    return np.asarray(canvas, dtype=np.uint8).copy()


def export_image(scene: Scene, path: str | Path, *, scale: float | None = None) -> Path:
    """Scene を拡張子に応じた画像として保存する。

    Parameters
    ----------
    scene : Scene
        保存するシーン。
    path : str or Path
        出力先パス。拡張子は ``.png`` / ``.jpg`` / ``.jpeg`` / ``.svg``。
    scale : float or None, optional
        ラスタ出力の倍率。None なら runtime config の `export.png.scale`。

    Raises
    ------
    ValueError
        未対応の拡張子の場合。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()
    if suffix not in IMAGE_SUFFIXES:
        raise ValueError(f"未対応の画像フォーマット: {suffix!r}")

    if suffix == ".svg":
        return export_svg(scene, _path)

    _scale = float(runtime_config().png_scale) if scale is None else float(scale)
    pixels = rasterize(scene, _scale)
    _path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.fromarray(pixels)
    if suffix == ".png":
        img.save(_path, format="PNG")
    else:
        img.save(_path, format="JPEG", quality=_JPEG_QUALITY)
    return _path


__all__ = ["IMAGE_SUFFIXES", "export_image", "output_size", "rasterize"]
