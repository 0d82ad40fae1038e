"""
どこで: リポジトリ直下 `main.py`。
何を: API を用いた簡単なスケッチを定義し、run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from seedsketch import FrameContext, G, Scene, Sketch, SketchConfig, Style, run

CANVAS_WIDTH = 300
CANVAS_HEIGHT = 300


def draw(ctx: FrameContext) -> Scene:
    rng = ctx.rng
    shapes = []
    for _ in range(40):
        x = rng.rand_between(0, ctx.width)
        y = rng.rand_between(0, ctx.height)
        sides = rng.rand_between(3, 7, integer=True)
        shapes.append(G.polygon(cx=x, cy=y, size=rng.rand_between(10, 60), sides=sides, style=Style.outline("#272744", 2.0)))
    return Scene.build((ctx.width, ctx.height), "#fbf5ef", shapes)


SKETCH = Sketch(
    name="main",
    param_sets=[SketchConfig(name="main", seed="hello world", width=CANVAS_WIDTH, height=CANVAS_HEIGHT)],
    default_param_set="main",
    draw=draw,
)


if __name__ == "__main__":
    run(SKETCH)
