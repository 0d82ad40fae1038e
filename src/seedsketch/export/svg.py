"""
どこで: `src/seedsketch/export/svg.py`。
何を: Scene を SVG テキストとして保存する関数を提供する。
なぜ: ベクター出力用のパラメータセットで、プロッタや編集ソフトに渡せる決定的な SVG を得るため。
"""

from __future__ import annotations

import base64
import io
from pathlib import Path

import numpy as np
from PIL import Image

from seedsketch.core.scene import Scene
from seedsketch.core.shape import Bitmap, Shape
from seedsketch.core.style import rgb255_to_hex

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _shape_to_d(coords: np.ndarray, *, closed: bool) -> str:
    """頂点列（shape (N,2)）を SVG path の d 属性へ変換して返す。"""
    parts = [f"M {_fmt(coords[0, 0])} {_fmt(coords[0, 1])}"]
    for xy in coords[1:]:
        parts.append(f"L {_fmt(xy[0])} {_fmt(xy[1])}")
    if closed:
        parts.append("Z")
    return " ".join(parts)


def _shape_element(shape: Shape) -> str | None:
    if shape.n_vertices < 2 or not shape.style.visible:
        return None
    style = shape.style
    fill = rgb255_to_hex(style.fill) if (style.fill is not None and shape.closed) else "none"
    if style.stroke is not None and style.stroke_weight > 0:
        stroke_attrs = (
            f'stroke="{rgb255_to_hex(style.stroke)}" stroke-width="{_fmt(style.stroke_weight)}" '
            f'stroke-linecap="{style.stroke_cap}" stroke-linejoin="{style.stroke_join}"'
        )
    else:
        stroke_attrs = 'stroke="none"'
    d = _shape_to_d(shape.coords, closed=shape.closed)
    return f'  <path d="{d}" fill="{fill}" {stroke_attrs} />'


def _png_data_uri(pixels: np.ndarray) -> str:
    buf = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(pixels)).save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def _bitmap_element(bitmap: Bitmap) -> str:
    w, h = bitmap.size
    return (
        f'  <image x="{_fmt(bitmap.x)}" y="{_fmt(bitmap.y)}" width="{w}" height="{h}" '
        f'href="{_png_data_uri(bitmap.pixels)}" />'
    )


def scene_to_svg(scene: Scene) -> str:
    """Scene を SVG 文字列に変換して返す。"""

    w, h = scene.size
    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">')
    lines.append(f'  <rect x="0" y="0" width="{w}" height="{h}" fill="{rgb255_to_hex(scene.background)}" />')

    for item in scene.items:
        if isinstance(item, Bitmap):
            lines.append(_bitmap_element(item))
            continue
        element = _shape_element(item)
        if element is not None:
            lines.append(element)

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(scene: Scene, path: str | Path) -> Path:
    """Scene を SVG として保存する。

    Parameters
    ----------
    scene : Scene
        保存するシーン。
    path : str or Path
        出力先パス。

    Returns
    -------
    Path
        保存先パス（正規化済み）。
    """
    _path = Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(scene_to_svg(scene))
    return _path


__all__ = ["export_svg", "scene_to_svg"]
