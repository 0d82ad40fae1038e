# どこで: `src/seedsketch/sketches/glitch.py`。
# 何を: 1 枚の画像に、行ごとに粒度が揺れる縦方向のブロック化をかけるスケッチ。

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seedsketch.core.assets import load_image
from seedsketch.core.pixelate import row_glitch
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Bitmap
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig

PARAM_SETS = (
    SketchConfig(
        name="day4-glitch",
        seed="hello world",
        width=800,
        height=1200,
        fps=8,
        duration=64,
        export_video=True,
        is_animated=True,
        video_format="webm",
        params={"image": "prepped-rilla-paris-wfyks-9ZiFQ-unsplash.png"},
    ),
)


def preload(config: SketchConfig) -> Mapping[str, Any]:
    path = config.param("image")
    if not path:
        raise ValueError(f"param set '{config.name}' に image がない")
    return {"image": load_image(path)}


def draw(ctx: FrameContext) -> Scene:
    pixels = row_glitch(ctx.assets["image"], ctx.frame_count)
    return Scene.build(ctx.config.canvas_size, 0, Bitmap(pixels))


SKETCH = Sketch(
    name="glitch",
    param_sets=PARAM_SETS,
    default_param_set="day4-glitch",
    draw=draw,
    preload=preload,
)
