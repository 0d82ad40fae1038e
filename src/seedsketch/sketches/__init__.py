# どこで: `src/seedsketch/sketches/__init__.py`。
# 何を: 同梱スケッチを名前で引けるレジストリを提供する。
# なぜ: CLI や run() からスケッチ名だけで起動できるようにするため。

from __future__ import annotations

from seedsketch.core.sketch import Sketch

from . import arcs, fibonacci, glitch, lines, lowres, rings

SKETCHES: dict[str, Sketch] = {
    m.SKETCH.name: m.SKETCH for m in (lines, rings, arcs, fibonacci, lowres, glitch)
}


def get_sketch(name: str) -> Sketch:
    """名前に対応するスケッチを返す。

    Raises
    ------
    KeyError
        未知のスケッチ名が指定された場合。
    """

    try:
        return SKETCHES[name]
    except KeyError:
        names = ", ".join(sorted(SKETCHES))
        raise KeyError(f"未知のスケッチ: {name!r} (候補: {names})") from None


__all__ = ["SKETCHES", "get_sketch"]
