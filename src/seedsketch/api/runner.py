"""
どこで: `src/seedsketch/api/runner.py`。公開 API のランナー実装。
何を: pyglet ウィンドウでスケッチをプレビューし、キー操作でシード切替・保存・録画を行う。
なぜ: シード履歴を行き来しながら、気に入った描画をその場で保存できるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyglet

from seedsketch.api.session import SketchSession
from seedsketch.core.runtime_config import runtime_config, set_config_path
from seedsketch.core.sketch import Sketch
from seedsketch.interactive.runtime.draw_window_system import DrawWindowSystem
from seedsketch.interactive.runtime.window_loop import WindowLoop

_logger = logging.getLogger(__name__)


def run(
    sketch: Sketch | str,
    *,
    config_name: str | None = None,
    config_index: int | None = None,
    seed: str | None = None,
    config_path: str | Path | None = None,
) -> None:
    """pyglet ウィンドウを生成しスケッチをプレビューする。

    Parameters
    ----------
    sketch : Sketch or str
        スケッチ、または同梱スケッチ名。
    config_name : str or None
        パラメータセット名。
    config_index : int or None
        パラメータセット番号。config_name と同時には指定できない。
    seed : str or None
        初期シード。None ならパラメータセットのシード。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。

    Notes
    -----
    キー操作: S 保存、N 新しいシード、→/↑ 次のシード、←/↓ 前のシード、V 録画の開始/停止。
    ウィンドウを閉じると制御を返す。
    """

    set_config_path(config_path)
    cfg_runtime = runtime_config()

    if isinstance(sketch, str):
        from seedsketch.sketches import get_sketch

        sketch = get_sketch(sketch)

    config = sketch.config(name=config_name, index=config_index)
    if seed is not None:
        config = config.with_seed(seed)
    session = SketchSession(sketch, config)
    _logger.info("Running %s [%s] seed=%s", sketch.name, config.name, config.seed)

    pyglet.options["vsync"] = False

    draw_window = DrawWindowSystem(session)
    draw_window.window.set_location(*cfg_runtime.window_position)

    loop = WindowLoop(draw_window.window, draw_window.draw_frame, fps=config.fps)
    try:
        loop.run()
    finally:
        draw_window.close()


__all__ = ["run"]
