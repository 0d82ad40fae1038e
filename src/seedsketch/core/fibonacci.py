"""
どこで: `src/seedsketch/core/fibonacci.py`。
何を: フィボナッチ数列生成器と、フィボナッチ正方形を螺旋状に敷き詰めるレイアウト計算を提供する。
なぜ: タイル配置（幾何）を描画から切り離し、単体で検証できるようにするため。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


def fib() -> Iterator[int]:
    """1 から始まるフィボナッチ数列 1, 1, 2, 3, 5, 8, ... を無限に生成する。"""
    a, b = 0, 1
    yield b
    while True:
        a, b = b, a + b
        yield b


class Placement(Enum):
    """次の正方形を置く方向。"""

    RIGHT = "right"
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"


# 螺旋は RIGHT -> TOP -> LEFT -> BOTTOM の順に反時計回りに成長する。
PLACEMENT_SEQUENCE = (Placement.RIGHT, Placement.TOP, Placement.LEFT, Placement.BOTTOM)


@dataclass(frozen=True, slots=True)
class Tile:
    """フィボナッチ正方形 1 枚（左上隅と一辺）。"""

    x: int
    y: int
    size: int


@dataclass(frozen=True, slots=True)
class FibonacciLayout:
    """螺旋状に並べた正方形列とその外接矩形。

    Notes
    -----
    tiles の座標は最初の正方形の左上を原点とする相対座標。
    """

    tiles: tuple[Tile, ...]
    min_x: int
    min_y: int
    width: int
    height: int

    def offset_for_canvas(self, canvas_width: float, canvas_height: float) -> tuple[float, float]:
        """螺旋全体をキャンバス中央に置くための平行移動量 (dx, dy) を返す。"""
        dx = -self.min_x + (float(canvas_width) - self.width) * 0.5
        dy = -self.min_y + (float(canvas_height) - self.height) * 0.5
        return dx, dy


def fibonacci_tiles(num_steps: int) -> FibonacciLayout:
    """num_steps 枚のフィボナッチ正方形を螺旋状に配置する。

    Parameters
    ----------
    num_steps : int
        正方形の枚数。

    Returns
    -------
    FibonacciLayout
        配置結果。

    Raises
    ------
    ValueError
        num_steps が 1 未満の場合。
    """
    n_steps = int(num_steps)
    if n_steps < 1:
        raise ValueError(f"num_steps は 1 以上である必要がある: got={num_steps}")

    seq = fib()
    last_fib = 0
    curr_fib = 0
    x = 0
    y = 0

    tiles: list[Tile] = []
    for n in range(n_steps):
        last_fib = curr_fib
        curr_fib = next(seq)

        if n > 0:
            placement = PLACEMENT_SEQUENCE[(n - 1) % len(PLACEMENT_SEQUENCE)]
            if placement is Placement.RIGHT:
                x += last_fib
                # 2 枚目だけは同じ高さに並べる。
                if n != 1:
                    y -= curr_fib - last_fib
            elif placement is Placement.TOP:
                x -= curr_fib - last_fib
                y -= curr_fib
            elif placement is Placement.LEFT:
                x -= curr_fib
            else:
                y += last_fib

        tiles.append(Tile(x=x, y=y, size=curr_fib))

    min_x = min(t.x for t in tiles)
    min_y = min(t.y for t in tiles)
    max_x = max(t.x + t.size for t in tiles)
    max_y = max(t.y + t.size for t in tiles)
    return FibonacciLayout(
        tiles=tuple(tiles),
        min_x=min_x,
        min_y=min_y,
        width=max_x - min_x,
        height=max_y - min_y,
    )


def highlighted_tile(frame_count: int, count: int) -> int | None:
    """このフレームで強調表示するタイル番号を返す。該当なしなら None。

    Notes
    -----
    ``count - index == (frame_count - 1) % count`` を満たす index を強調する。
    右辺が 0 のフレームでは該当するタイルがない。
    """
    if int(count) <= 0:
        return None
    phase = (int(frame_count) - 1) % int(count)
    if phase == 0:
        return None
    return int(count) - phase


__all__ = [
    "FibonacciLayout",
    "PLACEMENT_SEQUENCE",
    "Placement",
    "Tile",
    "fib",
    "fibonacci_tiles",
    "highlighted_tile",
]
