# どこで: `src/seedsketch/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして G/run/SketchSession と、ユーザー定義登録用の primitive を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .export import export_still, render_video
from .primitives import G
from .session import SketchSession
from seedsketch.core.primitive_registry import primitive

__all__ = ["G", "SketchSession", "export_still", "primitive", "render_video", "run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
