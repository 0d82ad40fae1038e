# どこで: `src/seedsketch/interactive/runtime/draw_window_system.py`。
# 何を: プレビューウィンドウのサブシステム（キー入力・描画・録画）を提供する。
# なぜ: SketchSession の操作をウィンドウイベントに結び付け、描画ループから呼べる形にまとめるため。

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
from pyglet.window import key

from seedsketch.api.session import SketchSession
from seedsketch.core.output_paths import output_path
from seedsketch.export.config import save_config
from seedsketch.export.image import rasterize
from seedsketch.interactive.draw_window import create_draw_window, pixels_to_image
from seedsketch.interactive.runtime.recording_system import VideoRecordingSystem

_logger = logging.getLogger(__name__)

# pyglet のキーシンボル -> SketchSession.handle_key のキー名。
_KEY_NAMES = {
    key.S: "s",
    key.N: "n",
    key.RIGHT: "right",
    key.UP: "up",
    key.LEFT: "left",
    key.DOWN: "down",
}


class DrawWindowSystem:
    """描画（メインウィンドウ）のサブシステム。"""

    def __init__(self, session: SketchSession) -> None:
        """ウィンドウと録画器を初期化する。"""

        self._session = session
        cfg = session.config
        self.window = create_draw_window(cfg.canvas_size, caption=f"seedsketch: {cfg.name}")
        self._recording = VideoRecordingSystem(size=cfg.canvas_size, fps=cfg.fps)
        self._needs_redraw = True
        self._paused = False
        self._image = None
        self._auto_record = cfg.should_export_video
        self.window.push_handlers(on_key_press=self._on_key_press)

    @property
    def animated(self) -> bool:
        cfg = self._session.config
        return cfg.is_animated or cfg.should_export_video

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        name = "v" if symbol == key.V else _KEY_NAMES.get(symbol)
        if name is None:
            return
        try:
            if name == "v":
                if not self._recording.is_recording:
                    self.start_video_recording()
                else:
                    self.stop_video_recording()
            elif self._session.handle_key(name):
                self._needs_redraw = True
        except Exception as e:
            # 保存失敗などでプレビューを止めない。
            _logger.exception("Failed to handle key: %s", name)
            print(f"Failed to handle key {name!r}: {e}")

    def start_video_recording(self) -> None:
        """動画録画を開始する。"""

        cfg = self._session.config
        if cfg.render_as_vector:
            raise ValueError("cannot export video when rendering as vector")
        path = output_path(
            kind="video",
            ext=cfg.video_format,
            config=cfg,
            seed=self._session.seed,
            now=datetime.now(timezone.utc),
        )
        self._recording.start(path)
        print(f"Recording {cfg.duration} frames at {cfg.fps:g} fps...")

    def stop_video_recording(self) -> Path | None:
        """動画録画を終了し、設定 JSON も書き出す。"""

        path = self._recording.stop()
        if path is not None:
            config_path = save_config(self._session.config, path.with_name(f"{path.stem}-config.json"))
            print(f"Saved config: {config_path}")
        return path

    def _render_pixels(self) -> np.ndarray:
        scene = self._session.render()
        return rasterize(scene)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        if self._auto_record:
            self._auto_record = False
            self.start_video_recording()

        # 一時停止はフレーム送りだけを止め、キー操作による再描画は受け付ける。
        if self._needs_redraw or self._image is None or (self.animated and not self._paused):
            pixels = self._render_pixels()
            self._image = pixels_to_image(pixels)
            self._needs_redraw = False

            if self._recording.is_recording:
                self._recording.write_frame(pixels)
                if self._session.config.should_export_video and (
                    self._recording.frames_written >= self._session.config.duration
                ):
                    self.stop_video_recording()
                    self._paused = True
                    print("Recording complete.")

            if self.animated and not self._paused:
                self._session.advance_frame()

        self.window.clear()
        if self._image is not None:
            self._image.blit(0, 0)

    def close(self) -> None:
        """録画を止めてウィンドウを閉じる。"""

        if self._recording.is_recording:
            try:
                self.stop_video_recording()
            except Exception:
                _logger.exception("Failed to stop video recording")
        self.window.close()


__all__ = ["DrawWindowSystem"]
