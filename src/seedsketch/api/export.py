"""
どこで: `src/seedsketch/api/export.py`。
何を: ウィンドウを開かずに静止画・動画を書き出すヘッドレス出力の導線を提供する。
なぜ: CLI やバッチから、対話プレビューと同じ描画結果をファイルに残せるようにするため。
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from seedsketch.api.session import SketchSession
from seedsketch.core.output_paths import output_path
from seedsketch.export.config import save_config
from seedsketch.export.image import rasterize
from seedsketch.export.video import VideoRecorder

_logger = logging.getLogger(__name__)


def export_still(session: SketchSession, fmt: str = "png", *, frame: int = 1) -> list[Path]:
    """frame 番目のフレームを描き、画像と設定 JSON を保存する。

    Returns
    -------
    list[Path]
        [画像パス, 設定 JSON パス]。
    """

    session.seek(frame)
    return session.save(fmt)


def render_video(session: SketchSession, path: str | Path | None = None) -> Path:
    """フレーム 1 から `duration` フレームを動画として保存し、設定 JSON も書き出す。

    Parameters
    ----------
    session : SketchSession
        書き出すセッション。フレーム番号は 1 に戻してから録画する。
    path : str or Path or None, optional
        出力先。None なら `output/video/{name}-{seed}-{timestamp}.{video_format}`。

    Returns
    -------
    Path
        動画の保存先パス。

    Raises
    ------
    ValueError
        `render_as_vector` のパラメータセット、または duration が 0 の場合。
    RuntimeError
        ffmpeg が見つからない、または失敗した場合。
    """

    cfg = session.config
    if cfg.render_as_vector:
        raise ValueError("cannot export video when rendering as vector")
    if cfg.duration <= 0:
        raise ValueError("duration が 0 のため録画するフレームがない")

    if path is None:
        stamp = datetime.now(timezone.utc)
        _path = output_path(kind="video", ext=cfg.video_format, config=cfg, seed=session.seed, now=stamp)
    else:
        _path = Path(path)

    print(f"Recording {cfg.duration} frames at {cfg.fps:g} fps...")
    with VideoRecorder(output_path=_path, size=cfg.canvas_size, fps=cfg.fps) as recorder:
        scene = session.seek(1)
        for _ in range(cfg.duration):
            recorder.write_frame(rasterize(scene))
            if recorder.frames_written < cfg.duration:
                session.advance_frame()
                scene = session.render()
    print(f"Saved video: {_path}")

    config_path = save_config(session.config, _path.with_name(f"{_path.stem}-config.json"))
    _logger.info("Saved config: %s", config_path)
    return _path


__all__ = ["export_still", "render_video"]
