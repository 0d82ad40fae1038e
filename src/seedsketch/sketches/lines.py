"""
どこで: `src/seedsketch/sketches/lines.py`。
何を: 格子状の箱を、分割してずらした線で埋める静止画スケッチ。
なぜ: シード履歴で「良い乱数」を行き来しながら気に入った 1 枚を探すため。
"""

from __future__ import annotations

import math

from seedsketch.api.primitives import G
from seedsketch.core.easing import lerp
from seedsketch.core.rng import SketchRandom
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Shape
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.core.style import Style

BACKGROUND = "#272744"
COLOURS = ("#fbf5ef", "#f2d3ab", "#c69fa5", "#8b6d9c", "#494d7e")

STROKE_WEIGHTS = (2, 3)
ROW_COUNTS = (5, 7, 9, 11)
COL_COUNTS = (7, 9, 11)
LINE_COUNTS = (7, 9, 11, 13)
INSET = 1

LINE_VARIANTS = ("a", "b", "c")

Segment = tuple[float, float, float, float]

PARAM_SETS = (
    SketchConfig(
        name="lines-and-such",
        seed="make the lines",
        width=540,
        height=540,
        fps=30,
        duration=30 * 10,
        params={"line_variant": "c", "vertical_probability": 0.995},
    ),
)


def _sign(rng: SketchRandom) -> float:
    return 1.0 if rng.rand_boolean() else -1.0


def _split_two(rng: SketchRandom, a0: float, a1: float, weight: float) -> list[tuple[float, float, float]]:
    mid = lerp(a0, a1, rng.rand_between(0.2, 0.8))
    return [
        (a0, mid, 0.5 * weight * _sign(rng)),
        (mid, a1, 0.5 * weight * _sign(rng)),
    ]


def _split_three(
    rng: SketchRandom,
    a0: float,
    a1: float,
    offsets: tuple[float, float, float],
) -> list[tuple[float, float, float]]:
    mid1 = lerp(a0, a1, rng.rand_between(0.2, 0.6))
    mid2 = lerp(mid1, a1, rng.rand_between(0.2, 0.8))
    return [(a0, mid1, offsets[0]), (mid1, mid2, offsets[1]), (mid2, a1, offsets[2])]


def split_line(
    rng: SketchRandom,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    *,
    weight: float,
    variant: str,
    canvas_width: float,
) -> list[Segment]:
    """軸平行な線分を分割し、各区間を線に直交する向きへずらした線分列を返す。

    Parameters
    ----------
    rng : SketchRandom
        分割位置とずらす向きに使う乱数源。
    x1, y1, x2, y2 : float
        元の線分。x1 == x2 なら垂直、それ以外は水平として扱う。
    weight : float
        線幅。ずらし量の基準。
    variant : str
        ``"a"``: 2 分割で ±weight/2。
        ``"b"``: 3 分割で ±weight/2。
        ``"c"``: 3 分割で中央区間だけ weight ずらす。垂直線の分割位置は x 座標から決まる。
    canvas_width : float
        variant "c" の垂直線で分割位置の位相に使う。
    """

    if variant not in LINE_VARIANTS:
        raise ValueError(f"未対応の line variant: {variant!r}")

    vertical = x1 == x2
    a0, a1 = (y1, y2) if vertical else (x1, x2)

    if variant == "a":
        parts = _split_two(rng, a0, a1, weight)
    elif variant == "b":
        parts = _split_three(
            rng, a0, a1, (0.5 * weight * _sign(rng), 0.5 * weight * _sign(rng), 0.5 * weight * _sign(rng))
        )
    elif vertical:
        mid1 = lerp(y1, y2, 0.8 * abs(math.cos(math.pi * x1 / float(canvas_width))))
        mid2 = lerp(y1, y2, abs(math.sin(math.radians(2.0 * x2))))
        mid1, mid2 = min(mid1, mid2), max(mid1, mid2)
        parts = [(y1, mid1, 0.0), (mid1, mid2, float(weight)), (mid2, y2, 0.0)]
    else:
        parts = _split_three(rng, a0, a1, (0.0, float(weight) * _sign(rng), 0.0))

    if vertical:
        return [(x1 + off, s, x2 + off, e) for s, e, off in parts]
    return [(s, y1 + off, e, y2 + off) for s, e, off in parts]


def fill_box_with_lines(
    x: float,
    y: float,
    w: float,
    h: float,
    *,
    steps: int,
    vertical: bool,
) -> list[Segment]:
    """箱 (x, y, w, h) を steps 本の平行線で埋めた線分列を返す（分割前）。"""

    out: list[Segment] = []
    if vertical:
        for step in range(int(steps)):
            xo = x + step * math.floor(w / steps)
            out.append((xo, y, xo, y + h))
    else:
        for step in range(int(steps)):
            yo = y + step * math.floor(h / steps)
            out.append((x, yo, x + w, yo))
    return out


def draw(ctx: FrameContext) -> Scene:
    rng = ctx.rng
    variant = str(ctx.config.param("line_variant", "c"))
    vertical_p = float(ctx.config.param("vertical_probability", 0.995))

    weight = float(rng.pick(STROKE_WEIGHTS))
    rows = rng.pick(ROW_COUNTS)
    row_height = ctx.height / rows
    cols = rng.pick(COL_COUNTS)
    col_width = ctx.width / cols

    shapes: list[Shape] = []
    for row in range(INSET, rows - INSET):
        style = Style.outline(rng.pick(COLOURS), weight, cap="square", join="miter")
        for col in range(INSET, cols - INSET):
            box = fill_box_with_lines(
                col * col_width,
                row * row_height,
                col_width,
                row_height,
                steps=rng.pick(LINE_COUNTS),
                vertical=rng.rand_boolean(vertical_p),
            )
            for x1, y1, x2, y2 in box:
                for sx1, sy1, sx2, sy2 in split_line(
                    rng, x1, y1, x2, y2, weight=weight, variant=variant, canvas_width=ctx.width
                ):
                    shapes.append(G.line(x1=sx1, y1=sy1, x2=sx2, y2=sy2, style=style))

    return Scene.build(ctx.config.canvas_size, BACKGROUND, shapes)


SKETCH = Sketch(
    name="lines",
    param_sets=PARAM_SETS,
    default_param_set="lines-and-such",
    draw=draw,
)
