"""
どこで: `src/seedsketch/sketches/fibonacci.py`。
何を: フィボナッチ螺旋の正方形を、ランダムな図形のグリッドで埋めるアニメーション。
なぜ: 毎フレーム 1 枚の正方形を強調色にし、螺旋を順に辿るため。
"""

from __future__ import annotations

import math

from seedsketch.api.primitives import G
from seedsketch.core.fibonacci import fibonacci_tiles, highlighted_tile
from seedsketch.core.rng import SketchRandom
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Shape
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.core.style import RGB255, Style, parse_color

DEFAULT_COLOURS = ("#fff", "#999", "#333")
CELL_SCALE = 0.9


def _param_set(name: str, *, fps: float, duration: int, colours: tuple[str, ...], cells_per_side: int) -> SketchConfig:
    return SketchConfig(
        name=name,
        seed="hello world",
        width=610,
        height=987,
        fps=fps,
        duration=duration,
        is_animated=True,
        video_format="webm",
        params={"colours": list(colours), "steps": 15, "cells_per_side": cells_per_side},
    )


_SEABORN = ("#4c72b0", "#55a868", "#c44e52", "#8172b2", "#ccb974", "#64b5cd")

PARAM_SETS = (
    _param_set("fibonacci", fps=2, duration=30 * 5, colours=("#01befe", "#ffdd00", "#ff006d", "#8f00ff"), cells_per_side=10),
    _param_set("fibonacci-2", fps=2, duration=30 * 5, colours=_SEABORN, cells_per_side=4),
    _param_set("fibonacci-3", fps=2, duration=30 * 5, colours=_SEABORN, cells_per_side=2),
    _param_set("fibonacci-4", fps=4, duration=4 * 4 * 2, colours=("#001d3d", "#003566", "#ffc300", "#ffd60a"), cells_per_side=4),
    _param_set(
        "fibonacci-5",
        fps=4,
        duration=4 * 4 * 2,
        colours=("#8172b2", "#55a868", "#c44e52", "#ccb974", "#64b5cd", "#4c72b0"),
        cells_per_side=4,
    ),
)


def _palette(ctx: FrameContext) -> list[RGB255]:
    pal = [parse_color(c) for c in ctx.config.param("colours", DEFAULT_COLOURS)]
    if len(pal) < 2:
        raise ValueError("colours には 2 色以上が必要")
    return pal


def fill_cell(rng: SketchRandom, x: float, y: float, size: float, *, bg: RGB255, fg: RGB255) -> list[Shape]:
    """セル (x, y, size) に、乱数で選んだ 1 つの図形を描く。

    4px 以下のセルは中央の 1px 点だけになる。
    """

    cx = x + size * 0.5
    cy = y + size * 0.5
    fill = Style.filled(fg)
    if size <= 4:
        return [G.rect(x=cx, y=cy, w=1, mode="center", style=fill)]

    big = size * CELL_SCALE
    thin = size * 0.1
    choice = math.floor(rng.random() * 5)
    if choice == 1:
        return [G.ellipse(cx=cx, cy=cy, w=big, style=fill)]
    if choice == 2:
        return [
            G.rect(x=cx, y=cy, w=thin, h=big, mode="center", style=fill),
            G.rect(x=cx, y=cy, w=big, h=thin, mode="center", style=fill),
        ]
    if choice == 3:
        return [G.rect(x=cx, y=cy, w=thin, h=big, mode="center", style=fill)]
    if choice == 4:
        return [G.rect(x=cx, y=cy, w=big, h=thin, mode="center", style=fill)]
    return [
        G.ellipse(cx=cx, cy=cy, w=big, style=fill),
        G.ellipse(cx=cx, cy=cy, w=big * 0.5, style=Style.filled(bg)),
    ]


def fill_grid(
    rng: SketchRandom,
    ox: float,
    oy: float,
    size: float,
    cells_per_side: int,
    *,
    bg: RGB255,
    fg: RGB255,
) -> list[Shape]:
    """正方形 (ox, oy, size) を背景色で塗り、cells_per_side 四方のセルを図形で埋める。"""

    cell_size = max(1.0, size / cells_per_side)
    cells = math.floor(size / cell_size)

    out = [G.rect(x=ox, y=oy, w=size, style=Style.filled(bg))]
    for row in range(cells):
        for col in range(cells):
            out.extend(fill_cell(rng, ox + col * cell_size, oy + row * cell_size, cell_size, bg=bg, fg=fg))
    return out


def draw(ctx: FrameContext) -> Scene:
    pal = _palette(ctx)
    layout = fibonacci_tiles(int(ctx.config.param("steps", 15)))
    dx, dy = layout.offset_for_canvas(ctx.width, ctx.height)
    highlight = highlighted_tile(ctx.frame_count, len(layout.tiles))
    cells_per_side = int(ctx.config.param("cells_per_side", 6))

    bg = pal[0]
    accent = pal[3] if len(pal) > 3 else pal[-1]

    shapes: list[Shape] = []
    for n, tile in enumerate(layout.tiles):
        fg = accent if n == highlight else pal[1]
        shapes.extend(fill_grid(ctx.rng, dx + tile.x, dy + tile.y, tile.size, cells_per_side, bg=bg, fg=fg))

    return Scene.build(ctx.config.canvas_size, 255, shapes)


SKETCH = Sketch(
    name="fibonacci",
    param_sets=PARAM_SETS,
    default_param_set="fibonacci-4",
    draw=draw,
)
