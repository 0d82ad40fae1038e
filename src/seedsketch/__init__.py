# どこで: `src/seedsketch/__init__.py`。
# 何を: ルート `seedsketch` パッケージを定義する。
# なぜ: import 起点を `seedsketch` に統一するため。

from __future__ import annotations

from seedsketch.api import G, SketchSession, primitive, run
from seedsketch.core.scene import Scene
from seedsketch.core.seed_history import SeedHistory
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.core.style import Style

__all__ = [
    "FrameContext",
    "G",
    "Scene",
    "SeedHistory",
    "Sketch",
    "SketchConfig",
    "SketchSession",
    "Style",
    "primitive",
    "run",
]
