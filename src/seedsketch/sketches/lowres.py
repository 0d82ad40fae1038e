# どこで: `src/seedsketch/sketches/lowres.py`。
# 何を: 連番画像をコマ送りしながら、脈打つブロックサイズでローレゾ化するスケッチ。
# なぜ: 画素単位の加工を numpy で行い、シーンに Bitmap として載せる例。

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seedsketch.core.assets import load_images
from seedsketch.core.pixelate import lowres_block_size, pixelate
from seedsketch.core.scene import Scene
from seedsketch.core.shape import Bitmap
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig

RICK_ASTLEY_FRAMES = tuple(f"rick-astley_{n:04d}.png" for n in range(1, 33))

PARAM_SETS = (
    SketchConfig(
        name="set one",
        seed="hello world",
        width=800,
        height=1200,
        fps=2,
        duration=30 * 5,
        is_animated=True,
        video_format="webm",
        params={"images": list(RICK_ASTLEY_FRAMES)},
    ),
    SketchConfig(
        name="rick-astley",
        seed="hello world",
        width=498,
        height=428,
        fps=16,
        duration=33 * 4,
        export_video=True,
        is_animated=True,
        video_format="webm",
        params={"images": list(RICK_ASTLEY_FRAMES)},
    ),
)


def preload(config: SketchConfig) -> Mapping[str, Any]:
    paths = config.param("images", ())
    if not paths:
        raise ValueError(f"param set '{config.name}' に images がない")
    return {"frames": load_images(paths)}


def draw(ctx: FrameContext) -> Scene:
    frames = ctx.assets["frames"]
    image = frames[(ctx.frame_count - 1) % len(frames)]
    pixels = pixelate(image, lowres_block_size(ctx.frame_count))
    return Scene.build(ctx.config.canvas_size, 0, Bitmap(pixels))


SKETCH = Sketch(
    name="lowres",
    param_sets=PARAM_SETS,
    default_param_set="rick-astley",
    draw=draw,
    preload=preload,
)
