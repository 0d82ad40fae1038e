# どこで: `src/seedsketch/core/easing.py`。
# 何を: アニメーション用の補間・イージング関数を提供する。
# なぜ: フレーム番号から角度や大きさを滑らかに決めるため。

from __future__ import annotations

_C1 = 1.70158
_C2 = _C1 * 1.525


def lerp(a: float, b: float, t: float) -> float:
    """a から b への線形補間を返す。"""
    return float(a) + (float(b) - float(a)) * float(t)


def smoothstep(x: float) -> float:
    """[0, 1] にクランプした x の smoothstep ``x^2 (3 - 2x)`` を返す。"""
    t = min(max(float(x), 0.0), 1.0)
    return t * t * (3.0 - 2.0 * t)


def ease_in_out_back(x: float) -> float:
    """両端で少し行き過ぎて戻る easeInOutBack を返す。

    x=0 で 0、x=0.5 で 0.5、x=1 で 1。途中で [0, 1] をはみ出す。
    """
    x = float(x)
    if x < 0.5:
        return ((2.0 * x) ** 2 * ((_C2 + 1.0) * 2.0 * x - _C2)) / 2.0
    return ((2.0 * x - 2.0) ** 2 * ((_C2 + 1.0) * (x * 2.0 - 2.0) + _C2) + 2.0) / 2.0


__all__ = ["ease_in_out_back", "lerp", "smoothstep"]
