"""
どこで: `src/seedsketch/sketches/rings.py`。
何を: 正多角形（または円）を同心リング状に並べ、回転・伸縮させるスケッチ。
なぜ: 1 色・1 形状だけで動きのある模様を作るため。
"""

from __future__ import annotations

import math

from seedsketch.api.primitives import G
from seedsketch.core.easing import lerp, smoothstep
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Shape
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.core.style import Style

SHAPES = ("polygon", "circle")

# 同心の内側リングは 1 段ごとに 0.8 倍。
_CONCENTRIC_SCALE = 0.8
_STYLE = Style.outline(255, 5.0)

PARAM_SETS = (
    SketchConfig(
        name="day1-one-color-one-shape",
        seed="hello world",
        width=540,
        height=720,
        fps=30,
        duration=30 * 5,
        params={
            "plotting_radius_scale_factor": 1.75,
            "circumference_steps": 12,
            "concentric_rings": 2,
        },
    ),
    SketchConfig(
        name="day1-one-color-one-shape-overlap",
        seed="hello world",
        width=540,
        height=720,
        fps=30,
        duration=30 * 5,
        params={
            "plotting_radius_scale_factor": 1.5,
            "circumference_steps": 8,
            "concentric_rings": 1,
            "overlap_factor": 1.7,
        },
    ),
    SketchConfig(
        name="day1-one-color-one-shape-motion-pentagon",
        seed="hello world",
        width=540,
        height=960,
        fps=30,
        duration=720,
        export_video=True,
        is_animated=True,
        params={
            "plotting_radius_scale_factor": 1.8,
            "circumference_steps": 10,
            "concentric_rings": 1,
            "overlap_factor": 1.0,
            "polygon_side_count": 5,
        },
    ),
    SketchConfig(
        name="day1-one-color-one-shape-motion-hexagon",
        seed="hello world",
        width=540,
        height=960,
        fps=30,
        duration=720,
        is_animated=True,
        params={
            "plotting_radius_scale_factor": 1.8,
            "circumference_steps": 10,
            "concentric_rings": 1,
            "overlap_factor": 1.0,
            "polygon_side_count": 6,
        },
    ),
)


def loop_phase(frame_count: int) -> float:
    """720 フレームで 0 から 1 へ進むループ位相を返す。"""

    return ((0.5 * float(frame_count)) % 360.0) / 360.0


def ring_radii(available_radius: float, scale_factor: float) -> list[float]:
    """内側から外側へ、キャンバスからはみ出すまでのリング半径を返す。

    半径は ``available_radius * 0.2`` から始まり、毎回 scale_factor 倍する。
    最後の 1 本は available_radius を超える。
    """

    factor = float(scale_factor)
    if factor <= 1.0:
        raise ValueError(f"plotting_radius_scale_factor は 1 より大きい必要がある: got={scale_factor}")
    radius = float(available_radius) * 0.2
    out: list[float] = []
    while radius < available_radius:
        radius *= factor
        out.append(radius)
    return out


def _concentric(
    x: float,
    y: float,
    size: float,
    *,
    rings: int,
    shape: str,
    sides: int,
    rotation: float,
) -> list[Shape]:
    out: list[Shape] = []
    for i in range(int(rings)):
        s = size * _CONCENTRIC_SCALE**i
        if shape == "circle":
            out.append(G.ellipse(cx=x, cy=y, w=s, style=_STYLE))
        else:
            out.append(G.polygon(cx=x, cy=y, size=s, sides=sides, offset_angle=rotation, style=_STYLE))
    return out


def draw(ctx: FrameContext) -> Scene:
    cfg = ctx.config
    shape = str(cfg.param("shape", "polygon"))
    if shape not in SHAPES:
        raise ValueError(f"未対応の shape: {shape!r}")
    steps = int(cfg.param("circumference_steps", 12))
    rings = int(cfg.param("concentric_rings", 1))
    overlap = float(cfg.param("overlap_factor", 1.0))
    sides = int(cfg.param("polygon_side_count", 5))

    phase = loop_phase(ctx.frame_count)
    cx = ctx.width * 0.5
    cy = ctx.height * 0.5
    available = min(cx, cy)

    # 縦方向の揺れは smoothstep で緩急をつける。
    t = (math.cos(phase * 2.0 * math.pi) + 1.0) / 2.0
    smooth_cos = smoothstep(t) * 2.0 - 1.0
    pulse = lerp(1.0, 1.25, math.sin(phase * 2.0 * math.pi))

    shapes: list[Shape] = []
    for radius in ring_radii(available, float(cfg.param("plotting_radius_scale_factor", 1.75))):
        side_length = 2.0 * radius * math.sin(math.pi / steps)
        for step in range(steps):
            angle = step / steps * 2.0 * math.pi
            dx = math.cos(angle + phase * 2.0 * math.pi + math.pi) * radius
            dy = math.sin(angle + smooth_cos**2 * 2.0 * math.pi) * radius
            shapes.extend(
                _concentric(
                    cx + dx,
                    cy + dy,
                    side_length * overlap * pulse,
                    rings=rings,
                    shape=shape,
                    sides=sides,
                    rotation=math.atan2(dy, dx),
                )
            )

    return Scene.build(cfg.canvas_size, 0, shapes)


SKETCH = Sketch(
    name="rings",
    param_sets=PARAM_SETS,
    default_param_set="day1-one-color-one-shape-motion-hexagon",
    draw=draw,
)
