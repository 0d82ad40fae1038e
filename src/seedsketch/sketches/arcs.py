# どこで: `src/seedsketch/sketches/arcs.py`。
# 何を: 7 組の円弧ペアが少しずつ遅れて easeInOutBack で一回転するアニメーション。
# なぜ: 「タメ」と「遅れ」というアニメーションの原則を確かめるため。

from __future__ import annotations

import math

from seedsketch.api.primitives import G
from seedsketch.core.easing import ease_in_out_back
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Shape
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.core.style import Style

BACKGROUND = (253, 252, 220)
COLOURS = ((0, 129, 167), (0, 175, 185), (254, 217, 183), (240, 113, 103))

OFFSET_ANGLE = math.pi * 0.5
ARC_LENGTH = math.pi * 0.625
LAG_FACTOR = 2
ITEM_COUNT = 7
STROKE_WEIGHT = 10.0

FPS = 30


def cycle_length(fps: float, item_count: int = ITEM_COUNT, lag_factor: int = LAG_FACTOR) -> int:
    """1 ループのフレーム数（2 秒 + 最後の要素の遅れ）を返す。"""

    return int(2 * fps) + lag_factor * item_count


PARAM_SETS = (
    SketchConfig(
        name="day2-animation-principles",
        seed="v1",
        width=540,
        height=540,
        fps=FPS,
        duration=cycle_length(FPS) * 2,
        is_animated=True,
        video_format="webm",
    ),
)


def item_timing(frame_count: int, n: int, *, fps: float) -> float:
    """n 番目の要素の [0, 1) の進行度を返す。"""

    base = int(2 * fps)
    lag = n * LAG_FACTOR
    frame = int(frame_count) % cycle_length(fps)
    return (min(base, max(frame - lag, 0)) % base) / base


def draw(ctx: FrameContext) -> Scene:
    cx = ctx.width * 0.5
    cy = ctx.height * 0.5

    shapes: list[Shape] = []
    for n in range(ITEM_COUNT):
        diameter = (0.3 + n * 0.1) * ctx.width
        centre = ease_in_out_back(item_timing(ctx.frame_count, n, fps=ctx.config.fps)) * 2.0 * math.pi
        centre += OFFSET_ANGLE
        start = centre - ARC_LENGTH * 0.5
        stop = centre + ARC_LENGTH * 0.5

        front = Style.outline(COLOURS[n % 2], STROKE_WEIGHT, cap="square")
        back = Style.outline(COLOURS[n % 2 + 2], STROKE_WEIGHT, cap="square")
        shapes.append(G.arc(cx=cx, cy=cy, w=diameter, h=diameter, start=start, stop=stop, style=front))
        shapes.append(
            G.arc(
                cx=cx,
                cy=cy,
                w=diameter,
                h=diameter,
                start=start + math.pi,
                stop=stop + math.pi,
                style=back,
            )
        )

    return Scene.build(ctx.config.canvas_size, BACKGROUND, shapes)


SKETCH = Sketch(
    name="arcs",
    param_sets=PARAM_SETS,
    default_param_set="day2-animation-principles",
    draw=draw,
)
